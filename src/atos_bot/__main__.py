from atos_bot.main import main

main()
