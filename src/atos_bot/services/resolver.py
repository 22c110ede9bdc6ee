"""Resolve Apple Music links to Spotify track links."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

import httpx

from atos_bot.clients import (
    AppleMusicClient,
    AppleMusicPageError,
    AppleMusicParseError,
    SpotifyAPIError,
    SpotifyAuthenticationError,
    SpotifyClient,
)
from atos_bot.logger import get_logger
from atos_bot.services.text_parser import normalize_title

logger = get_logger(__name__)

SEARCH_TIMEOUT_SECONDS = 1.0


class TrackResolutionError(RuntimeError):
    """Base class for failures while resolving a single link."""


class AppleMusicFetchError(TrackResolutionError):
    """The Apple Music page could not be downloaded."""


class AppleMusicLinkParseError(TrackResolutionError):
    """The Apple Music URL could not be parsed."""


class SpotifySearchError(TrackResolutionError):
    """The Spotify search failed or ran out of time."""


@dataclass(slots=True)
class TrackResolver:
    """Turns one Apple Music link into an ordered list of Spotify track URLs."""

    apple_music: AppleMusicClient
    spotify: SpotifyClient
    search_timeout: float = SEARCH_TIMEOUT_SECONDS

    async def resolve(
        self,
        url: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> list[str]:
        """Return candidate Spotify track URLs for ``url``, best match first.

        Links whose host is not exactly ``music.apple.com`` yield an empty list.
        A page without an ``og:title`` still triggers a search, with an empty query.
        """

        if not url:
            raise ValueError("An Apple Music URL is required")

        logger.info("Resolving Apple Music URL: %s", url)

        try:
            if not self.apple_music.is_apple_music_url(url):
                logger.debug("Ignoring URL with unexpected host: %s", url)
                return []
        except AppleMusicParseError as exc:
            raise AppleMusicLinkParseError(str(exc)) from exc

        try:
            title = await self.apple_music.fetch_title(url, http_client=http_client)
        except AppleMusicPageError as exc:
            raise AppleMusicFetchError(str(exc)) from exc

        query = normalize_title(title)
        logger.debug("Normalized search query for %s: %r", url, query)

        try:
            tracks = await asyncio.wait_for(
                self.spotify.search_tracks(query, http_client=http_client),
                timeout=self.search_timeout,
            )
        except asyncio.TimeoutError as exc:
            raise SpotifySearchError(
                f"Spotify search timed out after {self.search_timeout}s for query: {query!r}"
            ) from exc
        except (SpotifyAPIError, SpotifyAuthenticationError, httpx.HTTPError) as exc:
            raise SpotifySearchError(str(exc)) from exc

        if tracks:
            best = tracks[0]
            artists_display = ", ".join(best.artists) if best.artists else "<unknown artist>"
            logger.info(
                "Spotify match found for %s: %s - %s (%s)",
                url,
                artists_display,
                best.name,
                best.track_url,
            )

        return [track.track_url for track in tracks]
