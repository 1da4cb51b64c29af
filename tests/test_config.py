# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from kiko.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("KIKO_APP_NAME", "KIKO_LOG_LEVEL", "KIKO_DATA_DIR", "KIKO_TASKS_PATH", "KIKO_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "Kiko"
    assert s.tasks_path == Path("data") / "kiko.txt"
    assert s.log_dir == Path("data") / "logs"


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("KIKO_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("KIKO_TASKS_PATH", raising=False)
    monkeypatch.setenv("KIKO_LOG_LEVEL", "  ")

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "kiko.txt"
    assert s.log_level == "INFO"
