"""Pydantic model for the parts of a Discord message the bot reads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    import discord


class DiscordMessage(BaseModel):
    """Identity and text of an incoming chat message."""

    message_id: int
    channel_id: int
    author_id: int
    content: str = ""

    @property
    def author_mention(self) -> str:
        return f"<@{self.author_id}>"

    @classmethod
    def from_discord(cls, message: "discord.Message") -> "DiscordMessage":
        """Build the model from a gateway ``discord.Message``."""

        return cls(
            message_id=message.id,
            channel_id=message.channel.id,
            author_id=message.author.id,
            content=message.content or "",
        )
