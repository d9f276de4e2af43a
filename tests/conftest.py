"""Shared fixtures"""

# tests/conftest.py
from pathlib import Path

import pytest

from slideheaders.internals import constants
from slideheaders.sheets import SlideShow


@pytest.fixture
def legacy_show() -> SlideShow:
    """Slideshow saved by the legacy revision: untagged master, one slide, one notes page."""
    show = SlideShow()
    show.add_master()
    show.add_slide()
    show.add_notes()
    return show


@pytest.fixture
def ppt12_show() -> SlideShow:
    """Slideshow whose first master carries the 2007-revision programmable tag."""
    show = SlideShow()
    show.add_master(programmable_tag=constants.PPT12_TAG)
    show.add_slide()
    return show


@pytest.fixture
def clean_debug_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Ensure debug env var is not set before test."""
    monkeypatch.delenv("SLIDEHEADERS_DEBUG", raising=False)
    return monkeypatch


@pytest.fixture
def sample_config_toml() -> Path:
    """Path to a sample header/footer profile"""
    path = Path(__file__).parent / "data" / "test_config.toml"
    assert path.exists(), f"Test file not found: {path}"
    return path
