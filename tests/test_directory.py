from datetime import date

import pytest

from npb_scraper.directory import get_player_detail, list_roster, list_teams
from npb_scraper.utils import FetchFailure, UnknownTeam

SONG_URL = "https://www.yakult-swallows.co.jp/players/song"


def test_list_teams_in_registry_order():
    teams = list_teams()
    assert teams[0].code == "g"
    assert teams[-1].code == "b"


def test_list_roster_filters(fake_site):
    players = list_roster("s", number_query="1")
    assert [(p.number, p.name) for p in players] == [("1", "山田 哲人")]
    assert fake_site.requested == ["https://npb.jp/bis/teams/rst_s.html"]


def test_list_roster_without_filters_drops_nameless_rows(fake_site):
    assert [p.number for p in list_roster("s")] == ["1", "12", "55"]


def test_list_roster_unknown_team(fake_site):
    with pytest.raises(UnknownTeam):
        list_roster("zz")
    assert fake_site.requested == []


def test_list_roster_fetch_failure(fake_site):
    with pytest.raises(FetchFailure):
        list_roster("t")


def test_player_detail_with_songs(fake_site):
    detail = get_player_detail("s", "/bis/players/55555555.html", "55", today=date(2025, 6, 1))
    assert detail.number == "55"
    assert detail.profile.name == "村上 宗隆"
    assert detail.profile.attribute("生年月日") == "2000年2月2日 25歳"
    assert [s.phrase_html for s in detail.songs] == ["かっとばせー<br/>むらかみ"]


def test_player_detail_other_team_skips_song_page(fake_site):
    detail = get_player_detail("g", "/bis/players/55555555.html", "55")
    assert detail.songs == []
    assert SONG_URL not in fake_site.requested


def test_player_detail_survives_song_page_failure(fake_site):
    del fake_site.pages[SONG_URL]
    detail = get_player_detail("s", "/bis/players/55555555.html", "55")
    assert detail.profile.name == "村上 宗隆"
    assert detail.songs == []
    assert SONG_URL in fake_site.requested


def test_player_detail_profile_failure_propagates(fake_site):
    with pytest.raises(FetchFailure):
        get_player_detail("s", "/bis/players/00000000.html", "0")
    assert SONG_URL not in fake_site.requested
