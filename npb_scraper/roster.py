# roster.py
from __future__ import annotations

from typing import Iterable, List, Optional

from bs4 import Tag

from settings.urls import roster_url
from .logging_utils import get_logger
from .models import RosterEntry
from .utils import fetch_html, make_soup, select_attr, select_text

logger = get_logger(__name__)

# ===================== SELECTORS =====================

ROSTER_ROW_SELECTOR = "tr.rosterPlayer"
REGISTER_SELECTOR = ".rosterRegister"
REGISTER_LINK_SELECTOR = ".rosterRegister a"


def _row_number(row: Tag) -> str:
    cells = row.find_all("td")
    if not cells:
        return ""
    return cells[0].get_text().strip()


def parse_roster_row(row: Tag) -> Optional[RosterEntry]:
    """
    Parse a single roster row. Missing cells degrade to empty strings;
    returns None when the row carries no player name.
    """
    name = select_text(row, REGISTER_SELECTOR)
    if not name:
        return None
    return RosterEntry(
        number=_row_number(row),
        name=name,
        link=select_attr(row, REGISTER_LINK_SELECTOR, "href"),
    )


def parse_roster(html: str) -> List[RosterEntry]:
    """
    Extract roster entries from a team roster page in document order.

    Numbers are kept as text (e.g. "00", "124" for development players) and
    duplicates are not collapsed.
    """
    soup = make_soup(html)
    players: List[RosterEntry] = []
    skipped = 0

    for row in soup.select(ROSTER_ROW_SELECTOR):
        entry = parse_roster_row(row)
        if entry is None:
            skipped += 1
            continue
        players.append(entry)

    if skipped:
        logger.debug("Skipped %d roster rows without a player name.", skipped)
    logger.debug("Parsed %d roster entries.", len(players))
    return players


def filter_roster(
    players: Iterable[RosterEntry],
    name_query: Optional[str] = None,
    number_query: Optional[str] = None,
) -> List[RosterEntry]:
    """
    Narrow a roster by name substring and/or exact uniform number.

    Both queries are trimmed; an empty query imposes no constraint. The name
    match is case-sensitive and the number must match the whole string.
    """
    name_query = (name_query or "").strip()
    number_query = (number_query or "").strip()

    filtered = list(players)
    if name_query:
        filtered = [p for p in filtered if name_query in p.name]
    if number_query:
        filtered = [p for p in filtered if p.number == number_query]
    return filtered


def fetch_roster(team_code: str, timeout: Optional[float] = None) -> List[RosterEntry]:
    """Fetch and parse a team's roster page. Raises FetchFailure."""
    html = fetch_html(roster_url(team_code), timeout=timeout)
    return parse_roster(html)
