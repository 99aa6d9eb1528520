"""
Output formatters for fetched transcripts.
"""

from __future__ import annotations

import json
import logging
from enum import Enum

from .catalog import Transcript

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    SRT = "srt"

    @classmethod
    def from_name(cls, name: str, default: "OutputFormat | None" = None) -> "OutputFormat":
        """Parse a format name, falling back to ``default`` (text) if unknown."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            fallback = default or cls.TEXT
            logger.warning(f"Unknown output format {name!r}, using {fallback.value}")
            return fallback


def format_srt_timestamp(seconds: float) -> str:
    """Format seconds as SRT timestamp: HH:MM:SS,mmm."""
    total_millis = int(round(seconds * 1000))
    hours, remainder = divmod(total_millis, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


class Formatter:
    """Base class for transcript formatters."""

    def format_transcript(self, transcript: Transcript) -> str:
        raise NotImplementedError


class TextFormatter(Formatter):
    """One ``[start - end]: text`` line per entry."""

    def format_transcript(self, transcript: Transcript) -> str:
        return "".join(
            f"[{entry.start:.2f} - {entry.end:.2f}]: {entry.text}\n"
            for entry in transcript.entries
        )


class JSONFormatter(Formatter):
    """Pretty-printed array of ``{text, start, duration}`` objects."""

    def format_transcript(self, transcript: Transcript) -> str:
        return json.dumps(
            [entry.to_dict() for entry in transcript.entries],
            indent=2,
            ensure_ascii=False,
        )


class SRTFormatter(Formatter):
    """SubRip subtitles."""

    def format_transcript(self, transcript: Transcript) -> str:
        blocks = []
        for index, entry in enumerate(transcript.entries, start=1):
            start_time = format_srt_timestamp(entry.start)
            end_time = format_srt_timestamp(entry.end)
            # SRT format: index, timestamps, text, blank line
            blocks.append(f"{index}\n{start_time} --> {end_time}\n{entry.text}\n\n")
        return "".join(blocks)


FORMATTERS: dict[OutputFormat, type[Formatter]] = {
    OutputFormat.TEXT: TextFormatter,
    OutputFormat.JSON: JSONFormatter,
    OutputFormat.SRT: SRTFormatter,
}


def get_formatter(output_format: OutputFormat) -> Formatter:
    """
    Instantiate the formatter for an output format.

    Raises:
        ValueError: If ``output_format`` is not an OutputFormat member.
    """
    if not isinstance(output_format, OutputFormat):
        raise ValueError(f"Unsupported output format: {output_format!r}")
    return FORMATTERS[output_format]()
