"""
Transcript catalog: the caption tracks available for one video.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import chain
from typing import Any, Iterable, Iterator

from .decoder import TranscriptEntry, parse_timed_text
from .errors import NoTranscriptFound, RequestFailed
from .http_client import HttpClient

logger = logging.getLogger(__name__)

__all__ = ["TranscriptEntry", "TranslationLanguage", "Transcript", "TranscriptCatalog"]


@dataclass(frozen=True)
class TranslationLanguage:
    """A language YouTube can machine-translate a track into."""
    language: str
    language_code: str


def _display_name(name: Any) -> str:
    """Read a display name given either as simpleText or as text runs."""
    if "simpleText" in name:
        return name["simpleText"]
    return name["runs"][0]["text"]


class Transcript:
    """One caption track; entries are empty until fetch() is called."""

    def __init__(
        self,
        video_id: str,
        url: str,
        language: str,
        language_code: str,
        is_generated: bool,
        translation_languages: list[TranslationLanguage],
    ):
        self.video_id = video_id
        self._url = url
        self.language = language
        self.language_code = language_code
        self.is_generated = is_generated
        self.translation_languages = translation_languages
        self.entries: list[TranscriptEntry] = []
        self._fetched = False

    @property
    def is_fetched(self) -> bool:
        return self._fetched

    @property
    def is_translatable(self) -> bool:
        return len(self.translation_languages) > 0

    def fetch(self, http_client: HttpClient) -> list[TranscriptEntry]:
        """
        Download and decode this track's timed text.

        Args:
            http_client: Client used for the payload request.

        Returns:
            The decoded entries, also stored on ``self.entries``.

        Raises:
            RequestFailed: If the request fails or the payload is not XML.
        """
        logger.info(f"Fetching {self.language_code} transcript for {self.video_id}")
        body = http_client.get_text(self._url, self.video_id)
        self.entries = parse_timed_text(body, self.video_id)
        self._fetched = True
        return self.entries

    def __str__(self) -> str:
        translatable = "[TRANSLATABLE]" if self.is_translatable else ""
        return f'{self.language_code} ("{self.language}"){translatable}'

    def __repr__(self) -> str:
        return (
            f"Transcript(video_id={self.video_id!r}, language_code={self.language_code!r}, "
            f"is_generated={self.is_generated}, entries={len(self.entries)})"
        )


class TranscriptCatalog:
    """Manually created and generated tracks of a video, keyed by language code."""

    def __init__(
        self,
        video_id: str,
        manually_created: dict[str, Transcript],
        generated: dict[str, Transcript],
        translation_languages: list[TranslationLanguage],
    ):
        self.video_id = video_id
        self.manually_created = manually_created
        self.generated = generated
        self.translation_languages = translation_languages

    @classmethod
    def build(cls, video_id: str, captions_json: dict[str, Any]) -> "TranscriptCatalog":
        """
        Build a catalog from the caption track renderer object.

        Args:
            video_id: YouTube video ID.
            captions_json: The ``playerCaptionsTracklistRenderer`` object.

        Returns:
            Catalog holding every listed track.

        Raises:
            RequestFailed: If any caption track entry is malformed.
        """
        translation_languages = []
        for entry in captions_json.get("translationLanguages") or []:
            try:
                translation_languages.append(
                    TranslationLanguage(
                        language=_display_name(entry["languageName"]),
                        language_code=entry["languageCode"],
                    )
                )
            except (KeyError, IndexError, TypeError) as e:
                logger.debug(f"Skipping malformed translation language for {video_id}: {e!r}")

        manually_created: dict[str, Transcript] = {}
        generated: dict[str, Transcript] = {}

        try:
            for caption in captions_json["captionTracks"]:
                is_generated = caption.get("kind", "") == "asr"
                transcript = Transcript(
                    video_id=video_id,
                    url=caption["baseUrl"].replace("&fmt=srv3", ""),
                    language=_display_name(caption["name"]),
                    language_code=caption["languageCode"],
                    is_generated=is_generated,
                    translation_languages=translation_languages,
                )
                target = generated if is_generated else manually_created
                target[transcript.language_code] = transcript
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise RequestFailed(video_id, f"malformed caption track: {e!r}") from e

        logger.debug(
            f"Found {len(manually_created)} manual and {len(generated)} generated "
            f"transcripts for {video_id}"
        )
        return cls(video_id, manually_created, generated, translation_languages)

    def __iter__(self) -> Iterator[Transcript]:
        return chain(self.manually_created.values(), self.generated.values())

    def __len__(self) -> int:
        return len(self.manually_created) + len(self.generated)

    def find_transcript(self, language_codes: Iterable[str]) -> Transcript:
        """
        Find a transcript for the first matching language code.

        Manually created transcripts win over generated ones of the same
        language; earlier language codes win over later ones.

        Raises:
            NoTranscriptFound: If no requested language has a track.
        """
        return self._find_transcript(language_codes, [self.manually_created, self.generated])

    def find_manually_created_transcript(self, language_codes: Iterable[str]) -> Transcript:
        return self._find_transcript(language_codes, [self.manually_created])

    def find_generated_transcript(self, language_codes: Iterable[str]) -> Transcript:
        return self._find_transcript(language_codes, [self.generated])

    def _find_transcript(
        self,
        language_codes: Iterable[str],
        transcript_dicts: list[dict[str, Transcript]],
    ) -> Transcript:
        language_codes = list(language_codes)
        for language_code in language_codes:
            for transcript_dict in transcript_dicts:
                if language_code in transcript_dict:
                    return transcript_dict[language_code]
        raise NoTranscriptFound(self.video_id, language_codes)

    def __str__(self) -> str:
        def fmt(items: Iterable[Any]) -> str:
            lines = [f" - {item}" for item in items]
            return "\n".join(lines) if lines else "None"

        translation = (f"{tl.language_code} ({tl.language})" for tl in self.translation_languages)
        return (
            f"Transcripts for {self.video_id}:\n\n"
            f"(MANUALLY CREATED)\n{fmt(self.manually_created.values())}\n\n"
            f"(GENERATED)\n{fmt(self.generated.values())}\n\n"
            f"(TRANSLATION LANGUAGES)\n{fmt(translation)}"
        )
