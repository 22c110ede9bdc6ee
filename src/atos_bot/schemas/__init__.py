"""Shared Pydantic models used across the application."""

from .discord_message import DiscordMessage

__all__ = ["DiscordMessage"]
