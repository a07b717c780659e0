"""Shared test configuration and fixtures."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fernetex.settings import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

KEY = "lBrMpXneb47e_iY4RFA-HhF2vk2zeL4smfijX-y02-g="
NOW = 1_700_000_000


def load_fixture(name: str) -> list[dict[str, object]]:
    """Load a JSON list of test vectors from ``tests/fixtures``."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text())


@pytest.fixture
def key() -> str:
    return KEY


@pytest.fixture
def now() -> int:
    return NOW


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Settings are cached per process; tests that patch the env need a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo handler changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
