"""Tests for the export entry points."""
import json

import pytest

from quickbar.config.settings import ImportSettings, set_settings
from quickbar.core.exceptions import SensitiveExportError
from quickbar.models import Condition, ConditionSet
from quickbar.sharing.codec import TYPE_KEY
from quickbar.sharing.compression import decompress_string
from quickbar.sharing.exporter import export_bar, export_condition_set, export_object, export_shortcut


def _decode(text):
    return json.loads(decompress_string(text))


class TestExportBar:
    """Test bar exports."""

    def test_compact_bar_is_cleaned(self, codec, sample_bar):
        data = _decode(export_bar(sample_bar, codec=codec))

        assert data[TYPE_KEY] == "e"
        bar = data["b2"]
        assert "reveal_area_scale" not in bar
        assert "_i" not in bar["shortcut_list"][0]

    def test_compact_export_leaves_caller_untouched(self, codec, sample_bar):
        export_bar(sample_bar, codec=codec)

        assert sample_bar.reveal_area_scale == 2.5
        assert sample_bar.shortcut_list[0]._i == 4
        assert sample_bar.shortcut_list[1].sub_list[0].icon_zoom == 2.0

    def test_full_export_is_verbatim(self, codec, sample_bar):
        data = _decode(export_bar(sample_bar, full=True, codec=codec))

        bar = data["b2"]
        assert data[TYPE_KEY] == "quickbar.sharing.envelope.ExportEnvelope"
        assert bar["reveal_area_scale"] == 2.5
        assert bar["shortcut_list"][0]["_i"] == 4

    def test_compact_is_smaller(self, codec, sample_bar):
        assert len(export_bar(sample_bar, codec=codec)) < len(export_bar(sample_bar, full=True, codec=codec))

    def test_hotkeys_are_exported(self, codec, sample_bar):
        data = _decode(export_bar(sample_bar, codec=codec))
        assert data["b2"]["shortcut_list"][0]["hotkey"] == 0x41


class TestExportShortcut:
    """Test shortcut exports."""

    def test_shortcut_slot(self, codec, sample_category):
        data = _decode(export_shortcut(sample_category, codec=codec))

        assert set(data) == {TYPE_KEY, "s2", "v"}
        assert len(data["s2"]["sub_list"]) == 3
        assert "icon_zoom" not in data["s2"]["sub_list"][0]

    def test_default_codec(self, sample_category):
        data = _decode(export_shortcut(sample_category))
        assert data["s2"]["name"] == "Emotes"


class TestExportConditionSet:
    """Test condition set exports and the sensitivity gate."""

    def test_plain_set(self, codec):
        cs = ConditionSet(name="In combat", conditions=[Condition(id="cb")])
        data = _decode(export_condition_set(cs, codec=codec))
        assert data["cs"]["conditions"][0]["id"] == "cb"

    def test_sensitive_set_refused(self, codec, strict_settings):
        cs = ConditionSet(name="Alt only", conditions=[Condition(id="c", arg="Someone")])
        with pytest.raises(SensitiveExportError):
            export_condition_set(cs, settings=strict_settings, codec=codec)

    def test_sensitive_set_allowed(self, codec, permissive_settings):
        cs = ConditionSet(name="Alt only", conditions=[Condition(id="c", arg="Someone")])
        data = _decode(export_condition_set(cs, settings=permissive_settings, codec=codec))
        assert data["cs"]["conditions"][0]["arg"] == "Someone"

    def test_process_wide_settings_used(self, codec):
        cs = ConditionSet(conditions=[Condition(id="c")])
        set_settings(ImportSettings(allow_exporting_sensitive_condition_sets=True))
        assert export_condition_set(cs, codec=codec)


def test_export_object_wraps_any_node(codec):
    data = _decode(export_object(ConditionSet(name="raw"), codec=codec))
    assert data == {TYPE_KEY: "cs", "name": "raw"}
