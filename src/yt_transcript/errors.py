"""
Exceptions raised while listing and fetching transcripts.

Every failure carries the video ID it relates to and renders as
``Transcript error for video <id>: <reason>``.
"""

from __future__ import annotations

from typing import Iterable


class TranscriptError(Exception):
    """Base exception for transcript-related errors."""

    reason = "Unknown error"

    def __init__(self, video_id: str, reason: str | None = None):
        self.video_id = video_id
        if reason is not None:
            self.reason = reason
        super().__init__(f"Transcript error for video {video_id}: {self.reason}")


class RequestFailed(TranscriptError):
    """Raised when a request to YouTube fails or returns unparsable content."""

    def __init__(self, video_id: str, cause: object):
        self.cause = cause
        super().__init__(video_id, f"YouTube request error: {cause}")


class TooManyRequests(TranscriptError):
    """Raised when YouTube answers with a CAPTCHA page or HTTP 429."""

    reason = "Too many requests"


class VideoUnavailable(TranscriptError):
    """Raised when the watch page carries no player data at all."""

    reason = "Video unavailable"


class TranscriptsDisabled(TranscriptError):
    """Raised when the video plays but has no captions block."""

    reason = "Transcripts are disabled for this video"


class NoTranscriptAvailable(TranscriptError):
    """Raised when the captions block lists no tracks."""

    reason = "No transcripts available for this video"


class ConsentTokenMissing(TranscriptError):
    """Raised when the consent page cannot be passed."""

    reason = "Failed to create consent cookie"


class NoTranscriptFound(TranscriptError):
    """Raised when no track matches any of the requested languages."""

    def __init__(self, video_id: str, requested_language_codes: Iterable[str]):
        self.requested_language_codes = list(requested_language_codes)
        super().__init__(
            video_id,
            "No transcript found for languages: "
            + ", ".join(self.requested_language_codes),
        )
