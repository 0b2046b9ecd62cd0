"""
Pytest configuration for stylecascade
"""

import copy
import json
import logging
import sys

import pytest


BUTTON_MAPPING = {
    "default": {"color": "black", "size": 10},
    "outline": {"color": "gray", "borderWidth": 1},
    "default.success": {"color": "green"},
    "outline.success": {"borderColor": "green"},
    "default.large": {"size": 20},
    "default.active": {"color": "red", "opacity": 0.5},
    "default.checked": {"opacity": 0.7},
    "default.active.checked": {"opacity": 1},
    "outline.active": {"borderWidth": 2},
    "default.success.active": {"color": "darkgreen"},
}


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid leaking handlers between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def theme_mapping():
    """Declared theme mapping with a single Button component."""
    return {"Button": copy.deepcopy(BUTTON_MAPPING)}


@pytest.fixture
def theme_file(tmp_path, theme_mapping):
    """Theme mapping written to a JSON file."""
    path = tmp_path / "theme.json"
    path.write_text(json.dumps(theme_mapping), encoding="utf-8")
    return path
