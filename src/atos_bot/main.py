from atos_bot.bot import AtosBot
from atos_bot.clients import AppleMusicClient, build_spotify_client
from atos_bot.config.settings import AppSettings, get_settings
from atos_bot.logger import configure_logging, get_logger
from atos_bot.services import TrackResolver

logger = get_logger(__name__)


def validate_critical_settings(settings: AppSettings) -> None:
    """Ensure every secret is present; exit the process otherwise."""

    missing: list[str] = []
    if not settings.spotify_client_id:
        missing.append("SPOTIFY_CLIENT_ID")
    if not settings.spotify_client_secret:
        missing.append("SPOTIFY_CLIENT_SECRET")
    if not settings.discord_token:
        missing.append("DISCORD_TOKEN")

    if missing:
        logger.error("Missing required environment variables: %s", ", ".join(missing))
        raise SystemExit(1)

    logger.info("All critical environment variables are present")


def build_bot(settings: AppSettings) -> AtosBot:
    """Wire the Apple Music scraper, Spotify client and resolver into a bot."""

    spotify_client = build_spotify_client(settings)
    resolver = TrackResolver(apple_music=AppleMusicClient(), spotify=spotify_client)
    return AtosBot(spotify=spotify_client, resolver=resolver)


def main() -> None:
    """Start the bot and stay connected until interrupted."""

    configure_logging()
    settings = get_settings()
    validate_critical_settings(settings)

    bot = build_bot(settings)
    logger.info("Starting up (press ctrl+c to exit)")
    # discord.py handles SIGINT and closes the gateway connection itself.
    bot.run(settings.discord_token or "", log_handler=None)
    logger.info("Shut down cleanly")


if __name__ == "__main__":
    main()
