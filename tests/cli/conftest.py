"""Shared fixtures for CLI tests."""
from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory and clear overrides."""
    config_home = tmp_path / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    for key in ["STRATEGY", "ENCODING", "LOG_LEVEL", "STRICT", "TREE_DEPTH"]:
        monkeypatch.delenv(f"DOMAIN_FOREST_{key}", raising=False)
    return config_home


@pytest.fixture
def acme_files(tmp_path: Path) -> list[Path]:
    a = tmp_path / "a.txt"
    a.write_text("acme.com\ninternal.acme.com\nopenai.com\n", encoding="utf-8")
    b = tmp_path / "b.txt"
    b.write_text("one.internal.acme.com\n\n  API.openai.com \n", encoding="utf-8")
    return [a, b]
