# profile.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from bs4 import BeautifulSoup

from settings.urls import player_url
from .age import age_suffix
from .logging_utils import get_logger
from .models import PlayerAttribute, PlayerProfile
from .utils import fetch_html, make_soup, select_text

logger = get_logger(__name__)

NAME_SELECTOR = "div#pc_v_name li#pc_v_name"
KANA_SELECTOR = "#pc_v_kana"
SITE_TITLE_SUFFIX = "日本野球機構オフィシャルサイト"

BIRTH_DATE_LABEL = "生年月日"

# Profile table rows kept for display, in npb.jp page order; everything else is dropped.
PROFILE_LABELS = (
    "ポジション",
    "投打",
    "身長／体重",
    BIRTH_DATE_LABEL,
    "出身地",
    "経歴",
    "ドラフト",
)


def extract_player_name(soup: BeautifulSoup) -> str:
    """
    Dedicated name element first; older page layouts only carry the name in
    the <h1>, followed by the site title.
    """
    name = select_text(soup, NAME_SELECTOR)
    if name:
        return name
    return select_text(soup, "h1").replace(SITE_TITLE_SUFFIX, "").strip()


def extract_attributes(soup: BeautifulSoup, today: Optional[date] = None) -> List[PlayerAttribute]:
    table = soup.find("table")
    if table is None:
        logger.debug("Player page has no profile table.")
        return []

    attributes: List[PlayerAttribute] = []
    for row in table.find_all("tr"):
        label = select_text(row, "th")
        if label not in PROFILE_LABELS:
            continue
        value = select_text(row, "td")
        if label == BIRTH_DATE_LABEL:
            value += age_suffix(value, today)
        attributes.append(PlayerAttribute(label=label, value=value))
    return attributes


def parse_profile(html: str, today: Optional[date] = None) -> PlayerProfile:
    """Build a PlayerProfile from a player page; missing parts become ''/[]."""
    soup = make_soup(html)
    return PlayerProfile(
        name=extract_player_name(soup),
        kana=select_text(soup, KANA_SELECTOR),
        attributes=extract_attributes(soup, today),
    )


def fetch_profile(link: str, timeout: Optional[float] = None, today: Optional[date] = None) -> PlayerProfile:
    """Fetch and parse a player page from its roster link. Raises FetchFailure."""
    html = fetch_html(player_url(link), timeout=timeout)
    return parse_profile(html, today)
