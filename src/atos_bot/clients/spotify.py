"""Thin wrapper around the Spotify Web API."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from http import HTTPStatus
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, cast

import httpx

from atos_bot.config.settings import AppSettings


SPOTIFY_TRACK_URL = "https://open.spotify.com/track/{track_id}"

_EMPTY_MAPPING: Mapping[str, Any] = MappingProxyType({})


class SpotifyClientConfigError(ValueError):
    """Raised when Spotify credentials are missing or invalid."""


class SpotifyAuthenticationError(RuntimeError):
    """Raised when Spotify fails to issue an access token."""


class SpotifyAPIError(RuntimeError):
    """Raised when a Spotify Web API request fails."""


@dataclass(slots=True)
class SpotifyAccessToken:
    """Container for Spotify access token metadata."""

    access_token: str
    token_type: str
    expires_in: int
    acquired_at: datetime

    def expires_at(self) -> datetime:
        """Return the absolute UTC expiry timestamp."""

        return self.acquired_at + timedelta(seconds=self.expires_in)

    def is_expired(self, *, buffer_seconds: int = 0) -> bool:
        """Return True if the token is expired (optionally with a buffer)."""

        threshold = self.expires_at() - timedelta(seconds=buffer_seconds)
        return datetime.now(timezone.utc) >= threshold


@dataclass(slots=True)
class SpotifyTrackSummary:
    """Minimal representation of a Spotify track result."""

    id: str
    name: str
    artists: list[str]

    @property
    def track_url(self) -> str:
        """Canonical open.spotify.com link built from the track id."""

        return SPOTIFY_TRACK_URL.format(track_id=self.id)


def _parse_track(item: Mapping[str, Any]) -> SpotifyTrackSummary:
    artists: list[str] = []
    artists_raw = item.get("artists")
    if isinstance(artists_raw, Sequence) and not isinstance(artists_raw, str):
        for artist in cast(Sequence[Any], artists_raw):
            if not isinstance(artist, Mapping):
                continue
            name_value: Any = cast(Mapping[str, Any], artist).get("name")
            if isinstance(name_value, str):
                artists.append(name_value)

    return SpotifyTrackSummary(
        id=str(item.get("id", "")),
        name=str(item.get("name", "")),
        artists=artists,
    )


@dataclass(slots=True)
class SpotifyClient:
    """Client-credentials Spotify client used for track lookups."""

    client_id: str
    client_secret: str
    base_url: str = "https://api.spotify.com/v1"
    token_url: str = "https://accounts.spotify.com/api/token"
    _token_cache: Optional[SpotifyAccessToken] = field(default=None, init=False, repr=False)

    async def search_tracks(
        self,
        query: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = 10.0,
    ) -> list[SpotifyTrackSummary]:
        """Search for tracks and return every result from the first page.

        Later pages are never requested; Spotify's default page size applies.
        """

        token = await self.get_access_token(
            http_client=http_client,
            timeout=timeout,
        )

        headers = {
            "Authorization": f"{token.token_type} {token.access_token}",
            "Accept": "application/json",
        }
        params: dict[str, str] = {
            "q": query,
            "type": "track",
        }

        async def _perform_search(client: httpx.AsyncClient) -> list[SpotifyTrackSummary]:
            response = await client.get(
                f"{self.base_url}/search",
                params=params,
                headers=headers,
            )

            if response.status_code != HTTPStatus.OK:
                detail: str
                try:
                    payload_obj = response.json()
                except ValueError:
                    payload_obj = {}

                if isinstance(payload_obj, Mapping):
                    payload_map = cast(Mapping[str, Any], payload_obj)
                else:
                    payload_map = _EMPTY_MAPPING

                error_obj: Any = payload_map.get("error") if payload_map else None
                if isinstance(error_obj, Mapping):
                    error_map = cast(Mapping[str, Any], error_obj)
                    message = error_map.get("message")
                    detail = str(message) if message is not None else str(dict(error_map))
                else:
                    detail = str(error_obj or response.text or "Unknown error")

                raise SpotifyAPIError(
                    "Spotify search request failed: "
                    f"status={response.status_code}, detail={detail}"
                )

            try:
                payload_obj = response.json()
            except ValueError as exc:  # pragma: no cover - unexpected payload format
                raise SpotifyAPIError("Spotify search response was not valid JSON") from exc

            if not isinstance(payload_obj, Mapping):
                raise SpotifyAPIError("Spotify search response had unexpected format")

            payload_map = cast(Mapping[str, Any], payload_obj)

            tracks_section_any = payload_map.get("tracks")
            if not isinstance(tracks_section_any, Mapping):
                return []
            tracks_section = cast(Mapping[str, Any], tracks_section_any)

            items_raw = tracks_section.get("items")
            if not isinstance(items_raw, Sequence):
                return []

            return [
                _parse_track(cast(Mapping[str, Any], item))
                for item in cast(Sequence[Any], items_raw)
                if isinstance(item, Mapping)
            ]

        try:
            if http_client is not None:
                return await _perform_search(http_client)

            async with httpx.AsyncClient(timeout=timeout) as client:
                return await _perform_search(client)
        except httpx.HTTPError as exc:
            raise SpotifyAPIError(f"Spotify search request failed: {exc}") from exc

    async def get_client_credentials_token(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: Optional[float] = 10.0,
    ) -> SpotifyAccessToken:
        """Fetch a client-credentials access token from Spotify."""

        authorization = base64.b64encode(f"{self.client_id}:{self.client_secret}".encode("utf-8"))
        headers = {
            "Authorization": f"Basic {authorization.decode('ascii')}",
            "Content-Type": "application/x-www-form-urlencoded",
        }

        async def _request_token(client: httpx.AsyncClient) -> SpotifyAccessToken:
            response = await client.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                headers=headers,
            )

            if response.status_code != HTTPStatus.OK:
                message: str
                try:
                    body = response.json()
                except ValueError:
                    body = None

                if isinstance(body, Mapping):
                    body_map = cast(Mapping[str, Any], body)
                    message = str(
                        body_map.get("error_description") or body_map.get("error") or "Unknown error"
                    )
                else:
                    message = response.text or "Unknown error"

                raise SpotifyAuthenticationError(
                    "Failed to obtain Spotify access token: "
                    f"status={response.status_code}, detail={message}"
                )

            try:
                payload_obj = response.json()
            except ValueError as exc:
                raise SpotifyAuthenticationError(
                    "Spotify token response was not valid JSON"
                ) from exc

            if not isinstance(payload_obj, Mapping):
                raise SpotifyAuthenticationError("Spotify token response had unexpected format")
            payload = cast(Mapping[str, Any], payload_obj)

            access_token = payload.get("access_token")
            if not isinstance(access_token, str) or not access_token:
                raise SpotifyAuthenticationError("Spotify token response did not include an access_token")

            try:
                expires_in = int(payload.get("expires_in", 3600))
            except (TypeError, ValueError) as exc:
                raise SpotifyAuthenticationError(
                    "Spotify token response had an invalid expires_in"
                ) from exc

            return SpotifyAccessToken(
                access_token=access_token,
                token_type=str(payload.get("token_type") or "Bearer"),
                expires_in=expires_in,
                acquired_at=datetime.now(timezone.utc),
            )

        if http_client is not None:
            return await _request_token(http_client)

        async with httpx.AsyncClient(timeout=timeout) as client:
            return await _request_token(client)

    async def get_access_token(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        force_refresh: bool = False,
        buffer_seconds: int = 5,
        timeout: Optional[float] = 10.0,
    ) -> SpotifyAccessToken:
        """Return a valid (cached) client-credentials access token."""

        token = self._token_cache
        if not force_refresh and token is not None and not token.is_expired(buffer_seconds=buffer_seconds):
            return token

        token = await self.get_client_credentials_token(http_client, timeout=timeout)
        self._token_cache = token
        return token


def build_spotify_client(settings: AppSettings) -> SpotifyClient:
    """Create a SpotifyClient instance from application settings."""

    if not settings.spotify_client_id or not settings.spotify_client_secret:
        raise SpotifyClientConfigError(
            "Spotify client credentials are required to instantiate SpotifyClient"
        )

    return SpotifyClient(
        client_id=settings.spotify_client_id,
        client_secret=settings.spotify_client_secret,
    )
