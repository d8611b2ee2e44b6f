# songs.py
from __future__ import annotations

from typing import List, Optional

from bs4 import Tag

from settings.urls import CHEERING_SONG_URL
from .logging_utils import get_logger
from .models import SongEntry
from .utils import ScraperError, fetch_html, make_soup, select_text, strip_whitespace

logger = get_logger(__name__)

SONG_ITEM_SELECTOR = ".v-players-song__list-item"
SONG_NAME_SELECTOR = ".v-players-song__list-name"
SONG_PHRASE_SELECTOR = ".v-players-song__phrase-text"


def names_match(target: str, candidate: str) -> bool:
    """
    Whitespace-insensitive containment in either direction, so
    "村上 宗隆" matches "村上宗隆" and a list name with an extra token
    still matches the shorter one.
    """
    a = strip_whitespace(target)
    b = strip_whitespace(candidate)
    return b in a or a in b


def _phrase_html(item: Tag) -> str:
    phrase = item.select_one(SONG_PHRASE_SELECTOR)
    if phrase is None:
        return ""
    return phrase.decode_contents()


def parse_songs(html: str) -> List[SongEntry]:
    soup = make_soup(html)
    return [
        SongEntry(
            player_name=select_text(item, SONG_NAME_SELECTOR),
            phrase_html=_phrase_html(item),
        )
        for item in soup.select(SONG_ITEM_SELECTOR)
    ]


def match_songs(html: str, target_name: str) -> List[SongEntry]:
    """
    Every song entry whose player name matches ``target_name``.

    All matches are returned in page order; overlapping names can
    therefore yield more than one entry.
    """
    matches = [song for song in parse_songs(html) if names_match(target_name, song.player_name)]
    logger.debug("Found %d cheering song(s) for %s.", len(matches), target_name)
    return matches


def find_cheering_songs(target_name: str, timeout: Optional[float] = None) -> List[SongEntry]:
    """
    Fetch the song page and match ``target_name`` against it.

    Never raises: a failed fetch or an unparseable page is logged and
    treated as "no song".
    """
    try:
        html = fetch_html(CHEERING_SONG_URL, timeout=timeout)
        return match_songs(html, target_name)
    except ScraperError as exc:
        logger.warning("Cheering song lookup failed for %s: %s", target_name, exc)
    except Exception:
        logger.exception("Unexpected error while matching cheering songs for %s", target_name)
    return []
