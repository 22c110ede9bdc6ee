"""discord.py client that feeds new messages into the rewrite pipeline."""

from __future__ import annotations

import discord

from atos_bot.bot.handler import MessageGateway, TrackLookup, process_message
from atos_bot.clients import DiscordMessenger, SpotifyClient
from atos_bot.logger import get_logger
from atos_bot.schemas import DiscordMessage

logger = get_logger(__name__)


def build_intents() -> discord.Intents:
    """Intents needed to receive guild messages with their content."""

    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


class AtosBot(discord.Client):
    """Rewrites Apple Music links posted in guild channels."""

    def __init__(
        self,
        *,
        spotify: SpotifyClient,
        resolver: TrackLookup,
        messenger: MessageGateway | None = None,
        intents: discord.Intents | None = None,
    ) -> None:
        super().__init__(intents=intents or build_intents())
        self.spotify = spotify
        self.resolver = resolver
        self.messenger: MessageGateway = messenger or DiscordMessenger(self)

    async def setup_hook(self) -> None:
        # Runs before the gateway connects; a bad credential aborts startup.
        await self.spotify.get_access_token()
        logger.info("Spotify client credentials accepted")

    async def on_ready(self) -> None:  # pragma: no cover - network call
        logger.info("Connected to Discord as %s", self.user)

    async def on_message(self, message: discord.Message) -> None:
        if self.user is not None and message.author.id == self.user.id:
            return

        await process_message(
            DiscordMessage.from_discord(message),
            self.resolver,
            self.messenger,
        )
