import pytest

from npb_scraper import profile, roster, songs
from npb_scraper.utils import FetchFailure

ROSTER_S = """
<table>
  <tr class="rosterPlayer"><td>1</td><td class="rosterRegister"><a href="/bis/players/11111111.html">山田 哲人</a></td></tr>
  <tr class="rosterPlayer"><td>12</td><td class="rosterRegister"><a href="/bis/players/22222222.html">石山 泰稚</a></td></tr>
  <tr class="rosterPlayer"><td></td><td class="rosterRegister"></td></tr>
  <tr class="rosterPlayer"><td>55</td><td class="rosterRegister"><a href="/bis/players/55555555.html">村上 宗隆</a></td></tr>
</table>
"""

PLAYER_55 = """
<div id="pc_v_name"><li id="pc_v_name">村上 宗隆</li></div>
<li id="pc_v_kana">むらかみ・むねたか</li>
<table>
  <tr><th>ポジション</th><td>内野手</td></tr>
  <tr><th>生年月日</th><td>2000年2月2日</td></tr>
</table>
"""

SONGS = """
<div class="v-players-song__list-item">
  <span class="v-players-song__list-name">村上宗隆</span>
  <p class="v-players-song__phrase-text">かっとばせー<br>むらかみ</p>
</div>
"""


class FakeSite:
    """Serves canned pages by URL; unknown URLs fail like a 404."""

    def __init__(self, pages):
        self.pages = dict(pages)
        self.requested = []

    def fetch(self, url, timeout=None):
        self.requested.append(url)
        if url not in self.pages:
            raise FetchFailure(url, "404 Client Error")
        return self.pages[url]


@pytest.fixture
def fake_site(monkeypatch):
    site = FakeSite(
        {
            "https://npb.jp/bis/teams/rst_s.html": ROSTER_S,
            "https://npb.jp/bis/teams/rst_g.html": ROSTER_S,
            "https://npb.jp/bis/players/55555555.html": PLAYER_55,
            "https://www.yakult-swallows.co.jp/players/song": SONGS,
        }
    )
    for module in (roster, profile, songs):
        monkeypatch.setattr(module, "fetch_html", site.fetch)
    return site
