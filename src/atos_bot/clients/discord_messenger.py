"""Outbound Discord calls used to replace a message."""

from __future__ import annotations

from dataclasses import dataclass

import discord


class DiscordAPIError(RuntimeError):
    """Raised when a Discord REST call fails."""


@dataclass(slots=True)
class DiscordMessenger:
    """Deletes and posts channel messages through a connected discord.py client."""

    client: discord.Client

    async def delete_message(self, channel_id: int, message_id: int) -> None:
        """Delete a message identified by its channel and message ids."""

        channel = self.client.get_partial_messageable(channel_id)
        try:
            await channel.get_partial_message(message_id).delete()
        except discord.HTTPException as exc:
            raise DiscordAPIError(
                "Discord message delete failed: "
                f"channel_id={channel_id}, message_id={message_id}, "
                f"status={exc.status}, detail={exc.text}"
            ) from exc

    async def create_message(self, channel_id: int, content: str) -> int:
        """Post ``content`` into the channel and return the new message id."""

        if not content.strip():
            raise ValueError("Discord messages must contain non-empty content")

        channel = self.client.get_partial_messageable(channel_id)
        try:
            message = await channel.send(content)
        except discord.HTTPException as exc:
            raise DiscordAPIError(
                "Discord message create failed: "
                f"channel_id={channel_id}, status={exc.status}, detail={exc.text}"
            ) from exc

        return message.id
