"""Shared fixtures: keep every test away from the user's real config."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from freightctl.core.config import CONFIG_ENV_VAR
from freightctl.platform.paths import clear_caches


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    path = tmp_path / "freightctl-config.toml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    clear_caches()
    yield path
    clear_caches()
