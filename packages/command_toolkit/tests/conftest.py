from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _set_required_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("COMMANDS_DIR", str(tmp_path / "commands"))
    monkeypatch.delenv("COMMAND_EXPORT_NAME", raising=False)
    monkeypatch.delenv("COMMAND_SOURCE_POLICY", raising=False)
    monkeypatch.delenv("COMMAND_LOG_LEVEL", raising=False)
