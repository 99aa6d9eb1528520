"""
Configuration management for yt-transcript.

Loads settings from .env file with sensible defaults.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Configuration settings for the application."""

    # YouTube endpoints
    WATCH_URL: str = os.getenv("WATCH_URL", "https://www.youtube.com/watch?v={video_id}")
    COOKIE_DOMAIN: str = ".youtube.com"

    # Network settings
    REQUEST_TIMEOUT: int = int(os.getenv("YOUTUBE_TIMEOUT", "30"))
    ACCEPT_LANGUAGE: str = os.getenv("ACCEPT_LANGUAGE", "en-US")

    # CLI defaults
    DEFAULT_LANGUAGES: str = os.getenv("DEFAULT_LANGUAGES", "en")
    DEFAULT_FORMAT: str = os.getenv("DEFAULT_FORMAT", "text")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    @classmethod
    def get_http_proxy(cls) -> str | None:
        """Get the proxy URL from the environment at call time."""
        return os.getenv("HTTP_PROXY") or None

    @classmethod
    def get_watch_url(cls, video_id: str) -> str:
        """Get the watch page URL for the given video."""
        return cls.WATCH_URL.format(video_id=video_id)

    @classmethod
    def get_default_languages(cls) -> list[str]:
        """Get the default language preference list."""
        return [code.strip() for code in cls.DEFAULT_LANGUAGES.split(",") if code.strip()]


# Global config instance
config = Config()
