"""Scraper for public Apple Music pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx
from bs4 import BeautifulSoup


APPLE_MUSIC_HOST = "music.apple.com"


class AppleMusicPageError(RuntimeError):
    """Raised when an Apple Music page cannot be downloaded."""


class AppleMusicParseError(ValueError):
    """Raised when an Apple Music URL or page cannot be parsed."""


def extract_og_title(html: str) -> str:
    """Return the ``og:title`` of the page, or an empty string when absent.

    Only the first ``<meta property="og:title">`` element is considered.
    """

    soup = BeautifulSoup(html, "html.parser")
    meta = soup.find("meta", attrs={"property": "og:title"})
    if meta is None:
        return ""

    content = meta.get("content")
    if not isinstance(content, str):
        return ""
    return content


@dataclass(slots=True)
class AppleMusicClient:
    """Downloads Apple Music pages so their metadata can be scraped."""

    host: str = APPLE_MUSIC_HOST

    def is_apple_music_url(self, url: str) -> bool:
        """Return True if the URL points exactly at the Apple Music host."""

        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as exc:
            raise AppleMusicParseError(f"Malformed Apple Music URL: {url}") from exc

        return parsed.host == self.host

    async def fetch_page(
        self,
        url: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = 10.0,
    ) -> str:
        """Download the page at ``url`` and return its HTML body."""

        async def _get(client: httpx.AsyncClient) -> str:
            try:
                response = await client.get(url)
            except httpx.HTTPError as exc:
                raise AppleMusicPageError(f"Apple Music request failed: {exc}") from exc

            if not response.is_success:
                raise AppleMusicPageError(
                    "Apple Music page request failed: "
                    f"status={response.status_code} {response.reason_phrase}"
                )

            return response.text

        if http_client is not None:
            return await _get(http_client)

        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            return await _get(client)

    async def fetch_title(
        self,
        url: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = 10.0,
    ) -> str:
        """Download the page and return its ``og:title`` (possibly empty)."""

        html = await self.fetch_page(url, http_client=http_client, timeout=timeout)
        return extract_og_title(html)
