"""
Helpers for turning user input into video IDs and language lists.
"""

from __future__ import annotations

import re

# Video ID extraction regex
_VIDEO_ID_RE = re.compile(r"(?:watch\?v=|youtu\.be/|embed/|shorts/)([\w\-]{11})")
_BARE_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{11}$")


def extract_video_id(url_or_id: str) -> str:
    """
    Extract YouTube video ID from URL or return the ID if already extracted.

    Args:
        url_or_id: YouTube URL or video ID.

    Returns:
        11-character video ID.

    Raises:
        ValueError: If unable to extract valid video ID.
    """
    cleaned = url_or_id.strip()
    if not cleaned:
        raise ValueError("Empty video URL/ID provided")

    match = _VIDEO_ID_RE.search(cleaned)
    if match:
        return match.group(1)

    if _BARE_ID_RE.match(cleaned):
        return cleaned

    raise ValueError(f"Unable to extract video ID from: {url_or_id}")


def parse_language_codes(value: str) -> list[str]:
    """Split a comma separated list of language codes, dropping blanks."""
    return [code.strip() for code in value.split(",") if code.strip()]
