"""Tests for the command line entry point."""

from unittest.mock import AsyncMock, patch

import main


def test_preview_epoch(capsys):
    assert main.main(["--preview", "--date", "1980-02-02"]) == 0
    out = capsys.readouterr().out
    assert "Preview for: 1980-02-02" in out
    assert "Daf: Berachos 1" in out
    assert "<b>" not in out


def test_preview_before_epoch(capsys):
    assert main.main(["--preview", "--date", "1979-12-31"]) == 1
    assert "prior to organized" in capsys.readouterr().err


def test_preview_bad_date(capsys):
    assert main.main(["--preview", "--date", "02/02/1980"]) == 1
    assert "Invalid date" in capsys.readouterr().err


def test_missing_config(monkeypatch, capsys):
    monkeypatch.setattr(main, "load_dotenv", lambda: None)
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.delenv("TELEGRAM_CHAT_ID", raising=False)
    assert main.main([]) == 1
    assert "Configuration error" in capsys.readouterr().err


def test_skips_outside_broadcast_hour(monkeypatch):
    monkeypatch.setattr(main, "load_dotenv", lambda: None)
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "-100200")
    send = AsyncMock(return_value=True)
    with (
        patch.object(main, "is_broadcast_hour", return_value=False),
        patch.object(main, "send_broadcast", send),
    ):
        assert main.main([]) == 0
    send.assert_not_called()


def test_forced_broadcast(monkeypatch):
    monkeypatch.setattr(main, "load_dotenv", lambda: None)
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "-100200")
    send = AsyncMock(return_value=False)
    with patch.object(main, "send_broadcast", send):
        assert main.main(["--force"]) == 1
    send.assert_awaited_once()
