"""Shared pytest fixtures for the crcf test suite.

Provides reusable fixtures for:
- Temporary working directories for component output
- Component configurations for each template variant
- A pre-populated components directory for index aggregation
- Isolation from ``CRCF_*`` environment variables
"""

from __future__ import annotations

from pathlib import Path

import pytest

from crcf.config import ComponentConfig
from crcf.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_crcf_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's CRCF_* variables out of every test."""
    for var in (
        "CRCF_WORKING_DIR",
        "CRCF_STYLE",
        "CRCF_UPDATE_CHECK",
        "CRCF_UPDATE_CHECK_TIMEOUT",
        "CRCF_PACKAGE_INDEX_URL",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty working directory that components are created in."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    return directory


@pytest.fixture
def components_dir(tmp_path: Path) -> Path:
    """A components folder with real, hidden and numbered subfolders plus a file.

    Layout::

        components/
            .hidden/
            2Numeric/
            Alpha/
            beta/
            notes.md
    """
    root = tmp_path / "components"
    root.mkdir()
    for name in ("Alpha", ".hidden", "2Numeric", "beta"):
        (root / name).mkdir()
    (root / "notes.md").write_text("# notes\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config() -> ComponentConfig:
    return ComponentConfig()


@pytest.fixture
def typescript_config() -> ComponentConfig:
    return ComponentConfig(typescript=True)


@pytest.fixture
def native_config() -> ComponentConfig:
    return ComponentConfig(native=True)


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()
