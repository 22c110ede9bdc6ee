"""Utilities for finding Apple Music links and rewriting message text."""

import re
from typing import Optional, Sequence, Tuple

APPLE_MUSIC_URL_PATTERN = re.compile(r"https://music\.apple\.com/\S+")

# Separators and suffixes Apple Music puts into page titles,
# e.g. "Artist - Song - Single" or "Song by Artist & Friend".
_TITLE_NOISE_PATTERN = re.compile(r"( - |single| by | & |, )")


def contains_apple_music_url(content: Optional[str]) -> bool:
    """Return True when the content holds at least one Apple Music link."""

    if not content:
        return False
    return APPLE_MUSIC_URL_PATTERN.search(content) is not None


def extract_apple_music_urls(content: Optional[str]) -> list[str]:
    """Return every Apple Music link in the content, in order of appearance.

    Duplicates are preserved so callers see exactly what the author wrote.
    """

    if not content:
        return []
    return APPLE_MUSIC_URL_PATTERN.findall(content)


def normalize_title(title: Optional[str]) -> str:
    """Turn a scraped page title into a search query.

    The title is lowercased and every separator match is replaced by a single
    space in one pass; spaces left by neighbouring matches are not merged.
    """

    if not title:
        return ""
    return _TITLE_NOISE_PATTERN.sub(" ", title.lower())


def rewrite_content(
    content: str, url: str, candidates: Sequence[str]
) -> Tuple[str, bool]:
    """Replace every occurrence of ``url`` with the best candidate.

    Returns the (possibly) rewritten content and whether a substitution happened.
    Only the first candidate is used.
    """

    if not candidates:
        return content, False

    return content.replace(url, candidates[0]), True
