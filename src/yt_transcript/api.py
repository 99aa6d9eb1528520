"""
High-level API for listing and fetching YouTube transcripts.

Usage:
    api = TranscriptApi()
    transcript = api.get_transcript("dQw4w9WgXcQ", ["en", "de"])
    for entry in transcript.entries:
        print(f"{entry.start}: {entry.text}")
"""

from __future__ import annotations

import logging
from html import unescape
from typing import Iterable

from .catalog import Transcript, TranscriptCatalog
from .config import config
from .consent import create_consent_cookie, is_consent_page
from .errors import ConsentTokenMissing
from .extractor import extract_captions_json
from .http_client import HttpClient

logger = logging.getLogger(__name__)


class TranscriptApi:
    """Entry point tying page fetching, consent handling and parsing together."""

    def __init__(self, http_client: HttpClient | None = None):
        self.http_client = http_client if http_client is not None else HttpClient()

    def list_transcripts(self, video_id: str) -> TranscriptCatalog:
        """
        List the transcripts available for a video.

        Args:
            video_id: YouTube video ID.

        Returns:
            Catalog of manually created and generated transcripts.

        Raises:
            TranscriptError: Any failure of the page fetch or extraction.
        """
        logger.info(f"Listing transcripts for video {video_id}")
        html = self._fetch_video_html(video_id)
        captions_json = extract_captions_json(html, video_id)
        return TranscriptCatalog.build(video_id, captions_json)

    def get_transcript(
        self,
        video_id: str,
        languages: Iterable[str] | None = None,
    ) -> Transcript:
        """
        Fetch the best matching transcript for a video.

        Args:
            video_id: YouTube video ID.
            languages: Language codes in order of preference, defaults to
                config.DEFAULT_LANGUAGES.

        Returns:
            The selected transcript with its entries populated.
        """
        if languages is None:
            languages = config.get_default_languages()

        catalog = self.list_transcripts(video_id)
        transcript = catalog.find_transcript(languages)
        logger.debug(
            f"Using {'generated' if transcript.is_generated else 'manual'} "
            f"{transcript.language_code} transcript for {video_id}"
        )
        transcript.fetch(self.http_client)
        return transcript

    def _fetch_video_html(self, video_id: str) -> str:
        html = self._fetch_html(video_id)
        if is_consent_page(html):
            logger.info(f"Consent page served for {video_id}, retrying with consent cookie")
            create_consent_cookie(html, video_id, self.http_client)
            html = self._fetch_html(video_id)
            # Only one retry.
            if is_consent_page(html):
                raise ConsentTokenMissing(video_id)
        return html

    def _fetch_html(self, video_id: str) -> str:
        return unescape(self.http_client.get_text(config.get_watch_url(video_id), video_id))
