"""Per-message pipeline: find Apple Music links, resolve them, repost the message."""

from __future__ import annotations

import asyncio
from typing import Protocol

from atos_bot.clients import DiscordAPIError
from atos_bot.logger import get_logger
from atos_bot.schemas import DiscordMessage
from atos_bot.services import (
    TrackResolutionError,
    contains_apple_music_url,
    extract_apple_music_urls,
    rewrite_content,
)

logger = get_logger(__name__)

MESSAGE_BUDGET_SECONDS = 5.0
MIN_POST_TIMEOUT_SECONDS = 1.0


class TrackLookup(Protocol):
    async def resolve(self, url: str) -> list[str]: ...


class MessageGateway(Protocol):
    async def delete_message(self, channel_id: int, message_id: int) -> None: ...

    async def create_message(self, channel_id: int, content: str) -> object: ...


def format_replacement(message: DiscordMessage, content: str) -> str:
    """Return the repost text, attributed to the original author."""

    return f"[{message.author_mention}] {content}"


async def process_message(
    message: DiscordMessage,
    resolver: TrackLookup,
    messenger: MessageGateway,
    *,
    budget: float = MESSAGE_BUDGET_SECONDS,
) -> str | None:
    """Replace Apple Music links in ``message`` with Spotify links.

    Links are resolved one after another within a single ``budget`` (seconds)
    shared by every network call made for this message. A link that fails to
    resolve is logged and left as-is. When at least one link was replaced, the
    original message is deleted and a rewritten copy is posted in its channel.

    Returns the posted content, or ``None`` when nothing was reposted.
    """

    if not contains_apple_music_url(message.content):
        return None

    loop = asyncio.get_running_loop()
    deadline = loop.time() + budget

    content = message.content
    changed = False

    for url in extract_apple_music_urls(content):
        remaining = deadline - loop.time()
        if remaining <= 0:
            logger.warning("Message budget exhausted before resolving %s; skipping", url)
            continue

        try:
            candidates = await asyncio.wait_for(resolver.resolve(url), timeout=remaining)
        except asyncio.TimeoutError:
            logger.warning("Timed out resolving %s; skipping", url)
            continue
        except (ValueError, TrackResolutionError) as exc:
            logger.warning("Error getting Spotify matches for %s: %s", url, exc)
            continue

        if not candidates:
            logger.info("No Spotify matches for %s", url)
            continue

        content, substituted = rewrite_content(content, url, candidates)
        changed = changed or substituted

    if not changed:
        return None

    remaining = deadline - loop.time()
    if remaining <= 0:
        logger.warning(
            "Message budget exhausted before replacing message %s; leaving it untouched",
            message.message_id,
        )
        return None

    try:
        await asyncio.wait_for(
            messenger.delete_message(message.channel_id, message.message_id),
            timeout=remaining,
        )
    except (asyncio.TimeoutError, DiscordAPIError):
        logger.exception(
            "Error deleting message %s in channel %s; leaving it untouched",
            message.message_id,
            message.channel_id,
        )
        return None

    # Original is already deleted; the repost always gets a minimum window.
    replacement = format_replacement(message, content)
    try:
        await asyncio.wait_for(
            messenger.create_message(message.channel_id, replacement),
            timeout=max(deadline - loop.time(), MIN_POST_TIMEOUT_SECONDS),
        )
    except (asyncio.TimeoutError, DiscordAPIError):
        logger.exception(
            "Error posting rewritten message in channel %s", message.channel_id
        )
        return None

    logger.info(
        "Replaced message %s in channel %s with Spotify links",
        message.message_id,
        message.channel_id,
    )
    return replacement
