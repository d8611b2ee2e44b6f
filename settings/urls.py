# urls.py
"""
Upstream page locations.

Roster and player pages live on npb.jp; the logo image path carries the
season year, which is bumped once a year together with the site.
"""

NPB_BASE_URL = "https://npb.jp"
LOGO_YEAR = 2026
LOGO_URL_TEMPLATE = "https://p.npb.jp/img/common/logo/{year}/logo_{code}_m.png"
ROSTER_URL_TEMPLATE = NPB_BASE_URL + "/bis/teams/rst_{code}.html"
CHEERING_SONG_URL = "https://www.yakult-swallows.co.jp/players/song"


def logo_url(code: str, year: int = LOGO_YEAR) -> str:
    return LOGO_URL_TEMPLATE.format(year=year, code=code)


def roster_url(code: str) -> str:
    return ROSTER_URL_TEMPLATE.format(code=code)


def player_url(link: str) -> str:
    """
    Absolute URL of a player page from the relative path on the roster
    (e.g. "/bis/players/01105137.html").
    """
    return f"{NPB_BASE_URL}{link or ''}"
