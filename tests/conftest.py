"""Pytest configuration and fixtures."""

import json
from unittest.mock import Mock

import pytest
import requests

from yt_transcript.http_client import HttpClient


def make_response(text: str = "", status_code: int = 200) -> Mock:
    """Build a fake requests.Response."""
    response = Mock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


def make_watch_html(captions=None, playable=True, recaptcha=False, raw_captions=None) -> str:
    """
    Build a minimal watch page.

    Args:
        captions: Object embedded after the captions marker, omitted if None.
        playable: Whether the player data carries a playabilityStatus.
        recaptcha: Whether to include the CAPTCHA form marker.
        raw_captions: Raw text to embed after the captions marker instead of JSON.
    """
    parts = []
    if playable:
        parts.append('"playabilityStatus":{"status":"OK"}')
    if raw_captions is not None:
        parts.append('"captions":' + raw_captions)
    elif captions is not None:
        parts.append('"captions":' + json.dumps(captions, separators=(",", ":")))
    parts.append('"videoDetails":{"videoId":"dQw4w9WgXcQ","title":"Test"}')
    body = "var ytInitialPlayerResponse = {" + ",".join(parts) + "};"
    if recaptcha:
        body = '<form><div class="g-recaptcha" data-sitekey="x"></div></form>' + body
    return f"<html><head><script>{body}</script></head><body></body></html>"


@pytest.fixture
def sample_video_id():
    """Sample YouTube video ID for testing."""
    return "dQw4w9WgXcQ"


@pytest.fixture
def captions_json():
    """Caption track renderer with a manual and two generated tracks."""
    return {
        "captionTracks": [
            {
                "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en",
                "name": {"simpleText": "English"},
                "languageCode": "en",
                "isTranslatable": True,
            },
            {
                "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en&kind=asr",
                "name": {"simpleText": "English (auto-generated)"},
                "languageCode": "en",
                "kind": "asr",
                "isTranslatable": True,
            },
            {
                "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=de&kind=asr&fmt=srv3",
                "name": {"runs": [{"text": "German (auto-generated)"}]},
                "languageCode": "de",
                "kind": "asr",
            },
        ],
        "translationLanguages": [
            {"languageCode": "fr", "languageName": {"simpleText": "French"}},
            {"languageCode": "es", "languageName": {"runs": [{"text": "Spanish"}]}},
        ],
    }


@pytest.fixture
def watch_html(captions_json):
    """Watch page carrying the sample captions."""
    return make_watch_html({"playerCaptionsTracklistRenderer": captions_json})


@pytest.fixture
def timed_text_xml():
    """Timed-text payload with two entries."""
    return (
        '<?xml version="1.0" encoding="utf-8" ?>'
        "<transcript>"
        '<text start="1.5" dur="2.0">Hello</text>'
        '<text start="3.5" dur="1.0">World</text>'
        "</transcript>"
    )


@pytest.fixture
def session():
    """Real requests session whose get() is replaced by a mock."""
    session = requests.Session()
    session.get = Mock()
    return session


@pytest.fixture
def http_client(session):
    """HttpClient without proxy backed by the mocked session."""
    return HttpClient(proxy="", timeout=5, session=session)
