import pytest

from netmon import main as cli
from netmon.collectors.generic import SnapshotError


def test_missing_filter_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code != 0
    assert "usage: netmon" in capsys.readouterr().err


def test_empty_filter_is_accepted(monkeypatch):
    seen = {}

    def fake_loop(cfg, name_filter):
        seen["filter"] = name_filter
        seen["once"] = cfg.once
        return 0

    monkeypatch.setattr(cli, "monitor_loop", fake_loop)
    assert cli.main(["", "--once"]) == 0
    assert seen == {"filter": "", "once": True}


def test_snapshot_failure_exits_non_zero(monkeypatch, caplog):
    def fake_loop(cfg, name_filter):
        raise SnapshotError("cannot enumerate processes: boom")

    monkeypatch.setattr(cli, "monitor_loop", fake_loop)
    assert cli.main(["app"]) == 1
    assert "error retrieving processes" in caplog.text


def test_invalid_interval_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["app", "--interval", "0"])
    assert exc.value.code == 2
    assert "interval must be a positive number" in capsys.readouterr().err


def test_ctrl_c_exits_cleanly(monkeypatch):
    def fake_loop(cfg, name_filter):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "monitor_loop", fake_loop)
    assert cli.main(["app"]) == 0
