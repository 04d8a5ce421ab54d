# tests/conftest.py
from __future__ import annotations
import copy
import json
from pathlib import Path

import pytest

from mediaprobe.common.settings import Settings

FIXTURES = Path(__file__).parent / "fixtures"

PROBE_ERROR_JSON = {
    "error": {
        "code": -1094995529,
        "string": "Invalid data found when processing input",
    }
}


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


@pytest.fixture()
def awesome_probe() -> dict:
    """ffprobe JSON for a small QuickTime file: h264 video #0 + aac audio #1."""
    return load_fixture("awesome_movie.json")


@pytest.fixture()
def probe_error() -> dict:
    return copy.deepcopy(PROBE_ERROR_JSON)


@pytest.fixture()
def settings() -> Settings:
    """Explicit settings so tests never depend on the environment or a .env file."""
    return Settings(_env_file=None)
