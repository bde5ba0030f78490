"""Pytest fixtures for url_builder's unit tests."""
from pathlib import Path
from typing import Generator

import pytest

from . import PRESETS_TOML


@pytest.fixture()
def presets_file(tmp_path: Path) -> Generator[Path, None, None]:
    """A TOML presets file with a few valid presets."""
    path = tmp_path / "presets.toml"
    path.write_text(PRESETS_TOML, encoding="utf-8")
    yield path
    path.unlink(missing_ok=True)
