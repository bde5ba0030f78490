"""Pytest conftest module."""
import pytest

# flake8: noqa: E402
pytest.register_assert_rewrite("tests.helpers")

# pylint: disable=wrong-import-position
from .fixtures import presets_file
from .helpers import ignore_unused

ignore_unused(presets_file)
