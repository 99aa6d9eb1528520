"""
Decoding of YouTube timed-text XML into transcript entries.
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from html import unescape
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree

from .errors import RequestFailed

logger = logging.getLogger(__name__)

_FORMATTING_TAGS = ["b", "i", "u", "s", "em", "strong", "font", "mark", "small", "del", "ins", "sub", "sup", "span", "br"]
# Only formatting tags are removed; other angle brackets are spoken text.
_MARKUP_RE = re.compile(
    r"</?(?:" + "|".join(_FORMATTING_TAGS) + r")(?:\s+[\w-]+=\"[^\"]*\")*\s*/?>",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class TranscriptEntry:
    """A single caption segment."""
    text: str
    start: float
    duration: float

    @property
    def end(self) -> float:
        return self.start + self.duration

    def to_dict(self) -> dict:
        return asdict(self)


def _parse_seconds(value: str | None, attribute: str, video_id: str) -> float:
    # Malformed timings decode to zero.
    if value is None:
        return 0.0
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid {attribute}={value!r} in transcript for {video_id}, using 0")
        return 0.0


def _clean_text(raw: str) -> str:
    return _MARKUP_RE.sub("", unescape(raw))


def parse_timed_text(xml_text: str, video_id: str) -> list[TranscriptEntry]:
    """
    Parse a timed-text document into entries.

    Args:
        xml_text: Body of the caption track payload.
        video_id: YouTube video ID, for error reporting.

    Returns:
        One entry per ``<text>`` element, in document order.

    Raises:
        RequestFailed: If the payload is not well-formed XML.
    """
    try:
        root = ElementTree.fromstring(xml_text)
    except (ParseError, DefusedXmlException) as e:
        logger.error(f"XML parsing error - YouTube returned a malformed transcript for {video_id}")
        raise RequestFailed(video_id, e) from e

    entries = []
    for element in root.iter("text"):
        entries.append(
            TranscriptEntry(
                text=_clean_text("".join(element.itertext())),
                start=_parse_seconds(element.get("start"), "start", video_id),
                duration=_parse_seconds(element.get("dur"), "dur", video_id),
            )
        )

    logger.debug(f"Decoded {len(entries)} transcript entries for {video_id}")
    return entries
