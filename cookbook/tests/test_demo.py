from __future__ import annotations

import pytest

from cookbook import demo


@pytest.fixture(autouse=True)
def _no_log_handlers(monkeypatch):
    monkeypatch.setattr(demo, "setup_logging", lambda level=None: None)


def test_full_demo_succeeds(capsys):
    assert demo.main([]) == 0

    out = capsys.readouterr().out
    assert "Same instance? True" in out
    assert "dog says woof" in out
    assert "cat says meow" in out
    assert "electric" in out


def test_only_runs_selected_demo(capsys):
    assert demo.main(["--only", "strategy"]) == 0

    out = capsys.readouterr().out
    assert "--- Strategy ---" in out
    assert "--- Builder ---" not in out


def test_unknown_demo_rejected():
    with pytest.raises(SystemExit):
        demo.parse_args(["--only", "visitor"])


def test_singleton_demo_reports_lazy_construction(monkeypatch, capsys):
    monkeypatch.setattr(demo, "demo_service_initialized", lambda: False)

    assert demo.run_singleton_demo() is True

    out = capsys.readouterr().out
    assert "Constructed before first access? False" in out
    assert "DemoService: This is a singleton instance" in out
