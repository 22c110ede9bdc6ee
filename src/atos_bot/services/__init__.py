"""Service layer modules for the atos Discord bot."""

from .resolver import (
	AppleMusicFetchError,
	AppleMusicLinkParseError,
	SpotifySearchError,
	TrackResolutionError,
	TrackResolver,
)
from .text_parser import (
	APPLE_MUSIC_URL_PATTERN,
	contains_apple_music_url,
	extract_apple_music_urls,
	normalize_title,
	rewrite_content,
)

__all__ = [
	"APPLE_MUSIC_URL_PATTERN",
	"AppleMusicFetchError",
	"AppleMusicLinkParseError",
	"SpotifySearchError",
	"TrackResolutionError",
	"TrackResolver",
	"contains_apple_music_url",
	"extract_apple_music_urls",
	"normalize_title",
	"rewrite_content",
]
