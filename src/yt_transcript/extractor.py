"""
Extraction of the captions JSON embedded in the watch page.

The player configuration is rendered into the page as a JavaScript object;
its ``"captions"`` value describes the available caption tracks and
translation languages.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .errors import (
    NoTranscriptAvailable,
    RequestFailed,
    TooManyRequests,
    TranscriptsDisabled,
    VideoUnavailable,
)

logger = logging.getLogger(__name__)

CAPTIONS_MARKER = '"captions":'
RECAPTCHA_MARKER = 'class="g-recaptcha"'
PLAYABILITY_MARKER = '"playabilityStatus":'

_decoder = json.JSONDecoder()


def _decode_json_value(html: str, start: int) -> Any:
    """Decode the JSON value beginning at ``start``, stopping at its end."""
    while start < len(html) and html[start].isspace():
        start += 1
    value, _ = _decoder.raw_decode(html, start)
    return value


def parse_captions_object(html: str, video_id: str) -> dict[str, Any]:
    """
    Parse the object following the captions marker.

    Raises:
        TooManyRequests: If the page is a CAPTCHA check.
        VideoUnavailable: If the page has no player data.
        TranscriptsDisabled: If the player data has no captions object.
        RequestFailed: If the captions object is not valid JSON.
    """
    marker_index = html.find(CAPTIONS_MARKER)
    if marker_index == -1:
        if RECAPTCHA_MARKER in html:
            raise TooManyRequests(video_id)
        if PLAYABILITY_MARKER not in html:
            raise VideoUnavailable(video_id)
        raise TranscriptsDisabled(video_id)

    start = marker_index + len(CAPTIONS_MARKER)
    try:
        captions = _decode_json_value(html, start)
    except json.JSONDecodeError as e:
        logger.debug(f"Decoding captions JSON failed for {video_id}: {e}")
        raise RequestFailed(video_id, e) from e

    if not isinstance(captions, dict):
        raise RequestFailed(video_id, f"unexpected captions value of type {type(captions).__name__}")

    return captions


def extract_captions_json(html: str, video_id: str) -> dict[str, Any]:
    """
    Locate the caption track renderer in the watch page.

    Args:
        html: Watch page HTML, after consent handling.
        video_id: YouTube video ID.

    Returns:
        The ``playerCaptionsTracklistRenderer`` object.

    Raises:
        TranscriptsDisabled: If the renderer is missing.
        NoTranscriptAvailable: If the renderer lists no caption tracks.
    """
    captions = parse_captions_object(html, video_id)

    renderer = captions.get("playerCaptionsTracklistRenderer")
    if not isinstance(renderer, dict):
        raise TranscriptsDisabled(video_id)

    if not renderer.get("captionTracks"):
        raise NoTranscriptAvailable(video_id)

    return renderer
