"""Pytest configuration and shared fixtures for the import/export tests.

Provides sample bar and shortcut trees, policy settings, and helpers for
building raw import strings.
"""
import sys
import logging
from pathlib import Path

import pytest

# Add the project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quickbar.config.settings import ImportSettings, set_settings
from quickbar.models import (
    BarAlign, BarConfig, BarDock, BarVisibility, ShortcutConfig, ShortcutMode, ShortcutType, Vector2
)
from quickbar.sharing.codec import ConfigCodec
from quickbar.sharing.compression import compress_string
from quickbar.sharing.registry import build_default_registry


# Configure logging for tests
logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(autouse=True)
def reset_global_settings():
    """Keep process-wide settings from leaking between tests."""
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def strict_settings():
    """Default policy: conditions and hotkeys are stripped on import."""
    return ImportSettings()


@pytest.fixture
def permissive_settings():
    """Policy allowing everything, for lossless round trips."""
    return ImportSettings(
        allow_import_conditions=True,
        allow_import_hotkeys=True,
        allow_exporting_sensitive_condition_sets=True,
    )


@pytest.fixture
def codec():
    """Codec bound to a fresh registry."""
    return ConfigCodec(build_default_registry())


@pytest.fixture
def make_import_string(codec):
    """Build an import string from any configuration object."""
    def _make(obj, full=False):
        return compress_string(codec.serialize(obj, full))
    return _make


@pytest.fixture
def sample_category():
    """Category with three children, some carrying dead fields."""
    return ShortcutConfig(
        name="Emotes",
        type=ShortcutType.CATEGORY,
        command="/wave",
        category_columns=3,
        category_width=200,
        category_spacing=Vector2(4, 2),
        sub_list=[
            ShortcutConfig(name="Wave", command="/wave", icon_zoom=2.0, cooldown_action=7),
            ShortcutConfig(name="::Dance", command="/dance", icon_zoom=1.5, icon_offset=Vector2(0.25, 0.5)),
            ShortcutConfig(name="gap", type=ShortcutType.SPACER, command="/ignored",
                           mode=ShortcutMode.RANDOM, category_columns=2),
        ],
    )


@pytest.fixture
def sample_bar(sample_category):
    """Docked bar with a nested tree, hotkeys and a condition set."""
    return BarConfig(
        name="Main",
        visibility=BarVisibility.SLIDE,
        hint=True,
        dock_side=BarDock.BOTTOM,
        alignment=BarAlign.LEFT_OR_TOP,
        reveal_area_scale=2.5,
        condition_set=3,
        position=Vector2(10.5, 20),
        shortcut_list=[
            ShortcutConfig(name="Mount", command="/mount", hotkey=0x41, key_passthrough=True, _i=4),
            sample_category,
        ],
    )


# Test markers and utilities
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
