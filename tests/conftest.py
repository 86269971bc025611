from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
import yaml

from opoopress.site import Site

FIXED_NOW = datetime(2025, 3, 7, 9, 5, 2)


def write_config(base_dir: Path, data: dict, name: str = "config.yml") -> Path:
    path = base_dir / name
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A site base directory with a minimal config.yml."""
    base = tmp_path / "site"
    base.mkdir()
    write_config(base, {"title": "My Blog", "source_dirs": ["source"]})
    return base


@pytest.fixture
def site(site_dir: Path) -> Site:
    return Site.load(site_dir)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("OPOOPRESS_LOCALE", "OPOOPRESS_FAIL_IF_EXISTS", "OPOOPRESS_DEFAULT_FORMAT", "OPOOPRESS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_config():
    """Return a helper writing a YAML config file into a site directory."""
    return write_config
