import json

import pytest

import main
from arma3points.http_client import NetworkError
from arma3points.models import PlayerStatsRecord
from arma3points.scraper import FetchError, FetchResult
from tests.helpers import load_fixture


def test_once_prints_stats(monkeypatch, capsys):
    calls = []

    def fake_fetch(nickname, scraper=None):
        calls.append(nickname)
        return FetchResult(record=PlayerStatsRecord(session_score="42"), error=None, timestamp="10:00:00")

    monkeypatch.setattr(main, "fetch_player_stats", fake_fetch)

    assert main.main(["  Ace  ", "--once"]) == 0
    assert calls == ["Ace"]
    out = capsys.readouterr().out
    assert "42" in out
    assert "Updated: 10:00:00" in out


def test_once_json_error_exit_code(monkeypatch, capsys):
    def fake_fetch(nickname, scraper=None):
        return FetchResult(record=None, error=FetchError(nickname, "boom"), timestamp="10:00:00")

    monkeypatch.setattr(main, "fetch_player_stats", fake_fetch)

    assert main.main(["Ace", "--once", "--json"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"nickname": "Ace", "timestamp": "10:00:00", "stats": None, "error": "boom"}


def test_refresh_loop_sleeps_between_cycles(monkeypatch, capsys):
    cycles = {"count": 0}
    sleeps = []

    def fake_fetch(nickname, scraper=None):
        cycles["count"] += 1
        return FetchResult(record=PlayerStatsRecord(), error=None, timestamp="10:00:00")

    def fake_sleep(seconds):
        sleeps.append(seconds)
        if len(sleeps) == 2:
            raise KeyboardInterrupt

    monkeypatch.setattr(main, "fetch_player_stats", fake_fetch)
    monkeypatch.setattr(main.time, "sleep", fake_sleep)

    assert main.main(["Ace", "--interval", "30"]) == 0
    assert cycles["count"] == 2
    assert sleeps == [30, 30]


def test_online_listing(monkeypatch, capsys):
    monkeypatch.setattr(main.GameTrackerScraper, "fetch_widget", lambda self: load_fixture("widget.html"))

    assert main.main(["--online"]) == 0
    out = capsys.readouterr().out
    assert "Hawk [BC]" in out
    assert "Viper" in out


def test_online_listing_network_error(monkeypatch, capsys):
    def fail(self):
        raise NetworkError("https://cache.gametracker.com/", "Timed out")

    monkeypatch.setattr(main.GameTrackerScraper, "fetch_widget", fail)

    assert main.main(["--online"]) == 1
    assert "Could not load online players" in capsys.readouterr().out


def test_missing_nickname_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main.main([])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("timeout", ["0", "-5"])
def test_non_positive_timeout_is_usage_error(monkeypatch, timeout):
    def fail_fetch(nickname, scraper=None):
        raise AssertionError("should not fetch")

    monkeypatch.setattr(main, "fetch_player_stats", fail_fetch)

    with pytest.raises(SystemExit) as excinfo:
        main.main(["Ace", "--once", "--timeout", timeout])
    assert excinfo.value.code == 2

    with pytest.raises(SystemExit):
        main.main(["--online", "--timeout", timeout])
