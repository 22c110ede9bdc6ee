"""Discord-facing pieces of the bot."""

from .client import AtosBot, build_intents
from .handler import format_replacement, process_message

__all__ = ["AtosBot", "build_intents", "format_replacement", "process_message"]
