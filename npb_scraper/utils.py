# utils.py
from __future__ import annotations

import re
from typing import Optional

import requests
from bs4 import BeautifulSoup, Tag

from .logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_FETCH_TIMEOUT = 15.0
USER_AGENT = "Mozilla/5.0 (compatible; npb-roster-directory/1.0)"

_WHITESPACE_RE = re.compile(r"\s+")


# ===================== ERRORS =====================

class ScraperError(Exception):
    """Base class for errors raised by the scraper package."""


class FetchFailure(ScraperError):
    """
    An upstream page could not be retrieved.

    Transport errors, timeouts and non-2xx responses all collapse into this
    one kind; the failing URL is kept for logging.
    """

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        message = f"Failed to fetch {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownTeam(ScraperError):
    """The requested team code is not in the team directory."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unknown team code: {code!r}")


# ===================== TEXT HELPERS =====================

def strip_whitespace(value: Optional[str]) -> str:
    """Remove every whitespace character, including full-width spaces."""
    if not value:
        return ""
    return _WHITESPACE_RE.sub("", value)


def select_text(node: BeautifulSoup | Tag, selector: str) -> str:
    """
    Concatenated text of every element matching ``selector`` under ``node``,
    trimmed. Missing elements give an empty string.
    """
    return "".join(el.get_text() for el in node.select(selector)).strip()


def select_attr(node: BeautifulSoup | Tag, selector: str, attr: str) -> str:
    """Attribute of the first element matching ``selector``, or ''."""
    el = node.select_one(selector)
    if el is None:
        return ""
    value = el.get(attr)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


# ===================== HTTP =====================

def fetch_html(url: str, timeout: Optional[float] = None) -> str:
    """
    GET ``url`` once and return the decoded body.

    Any requests error (connection, timeout, HTTP status) is re-raised as
    FetchFailure. There is no retry.
    """
    logger.info("Fetching HTML: %s", url)
    headers = {"User-Agent": USER_AGENT}
    try:
        resp = requests.get(url, headers=headers, timeout=timeout or DEFAULT_FETCH_TIMEOUT)
        resp.raise_for_status()
    except requests.Timeout as exc:
        raise FetchFailure(url, "timed out") from exc
    except requests.RequestException as exc:
        raise FetchFailure(url, str(exc)) from exc

    # requests falls back to ISO-8859-1 when the charset header is missing
    if not resp.encoding or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = resp.apparent_encoding
    return resp.text
