"""Client integrations for external services."""

from .apple_music import (
    AppleMusicClient,
    AppleMusicPageError,
    AppleMusicParseError,
    extract_og_title,
)
from .discord_messenger import DiscordAPIError, DiscordMessenger
from .spotify import (
    SpotifyAccessToken,
    SpotifyAPIError,
    SpotifyAuthenticationError,
    SpotifyClient,
    SpotifyClientConfigError,
    SpotifyTrackSummary,
    build_spotify_client,
)

__all__ = [
    "AppleMusicClient",
    "AppleMusicPageError",
    "AppleMusicParseError",
    "extract_og_title",
    "DiscordAPIError",
    "DiscordMessenger",
    "SpotifyAPIError",
    "SpotifyAccessToken",
    "SpotifyAuthenticationError",
    "SpotifyClient",
    "SpotifyClientConfigError",
    "SpotifyTrackSummary",
    "build_spotify_client",
]
