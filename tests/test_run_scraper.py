import csv

import pytest

import run_scraper


@pytest.fixture
def export_dir(tmp_path, monkeypatch, fake_site):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(run_scraper, "REQUEST_DELAY", 0)
    monkeypatch.setattr(run_scraper, "setup_logging", lambda **kwargs: None)
    return tmp_path / "exports"


def _read(path):
    with open(path, encoding="utf-8-sig", newline="") as f:
        return list(csv.DictReader(f))


def test_export_roster(export_dir):
    assert run_scraper.main(["--team", "s", "--output", "swallows"]) == 0
    rows = _read(export_dir / "swallows.csv")
    assert [r["number"] for r in rows] == ["1", "12", "55"]
    assert rows[0]["team"] == "東京ヤクルトスワローズ"
    assert rows[0]["link"] == "/bis/players/11111111.html"


def test_export_with_profiles(export_dir):
    assert run_scraper.main(["--team", "s", "--num", "55", "--profiles"]) == 0
    rows = _read(export_dir / "npb_rosters.csv")
    assert len(rows) == 1
    assert rows[0]["kana"] == "むらかみ・むねたか"
    assert rows[0]["ポジション"] == "内野手"
    assert rows[0]["生年月日"].startswith("2000年2月2日 ")
    assert rows[0]["ドラフト"] == ""


def test_export_profile_failure_keeps_roster_row(export_dir):
    assert run_scraper.main(["--team", "s", "--num", "1", "--profiles"]) == 0
    rows = _read(export_dir / "npb_rosters.csv")
    assert rows[0]["name"] == "山田 哲人"
    assert rows[0]["kana"] == ""


def test_export_skips_unknown_and_failed_teams(export_dir):
    assert run_scraper.main(["--team", "zz", "--team", "t"]) == 1
    assert not (export_dir / "npb_rosters.csv").exists()
