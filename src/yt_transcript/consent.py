"""
Handling of the EU consent interstitial served instead of the watch page.
"""

from __future__ import annotations

import logging
import re

from .config import config
from .errors import ConsentTokenMissing
from .http_client import HttpClient

logger = logging.getLogger(__name__)

CONSENT_FORM_MARKER = 'action="https://consent.youtube.com/s"'
_CONSENT_TOKEN_RE = re.compile(r'name="v" value="(.*?)"')


def is_consent_page(html: str) -> bool:
    """Check whether the page is the consent form rather than the video."""
    return CONSENT_FORM_MARKER in html


def create_consent_cookie(html: str, video_id: str, http_client: HttpClient) -> None:
    """
    Install the CONSENT cookie derived from the consent form.

    Args:
        html: Consent page HTML.
        video_id: YouTube video ID, for error reporting.
        http_client: Client whose cookie jar receives the cookie.

    Raises:
        ConsentTokenMissing: If the form carries no consent token.
    """
    match = _CONSENT_TOKEN_RE.search(html)
    if match is None:
        raise ConsentTokenMissing(video_id)

    http_client.set_cookies(config.COOKIE_DOMAIN, {"CONSENT": "YES+" + match.group(1)})
    logger.debug(f"Installed consent cookie for {video_id}")
