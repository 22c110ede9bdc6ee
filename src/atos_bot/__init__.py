"""Discord bot that swaps Apple Music links for Spotify links."""

__version__ = "0.1.0"
