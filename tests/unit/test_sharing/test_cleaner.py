"""Tests for default-value pruning before compact export."""
from quickbar.models import (
    BarAlign, BarConfig, BarDock, BarVisibility, ShortcutConfig, ShortcutMode, ShortcutType, Vector2
)
from quickbar.sharing.cleaner import clean_bar, clean_shortcut


class TestCleanShortcut:
    """Test shortcut cleaning rules."""

    def test_category_keeps_category_fields(self, sample_category):
        clean_shortcut(sample_category)

        assert sample_category.category_columns == 3
        assert sample_category.category_width == 200
        assert sample_category.category_spacing == Vector2(4, 2)
        assert len(sample_category.sub_list) == 3
        assert sample_category.command == "/wave"

    def test_action_loses_category_fields(self):
        sh = ShortcutConfig(name="a", category_columns=4, category_on_hover=True,
                            sub_list=[ShortcutConfig(name="orphan")])
        clean_shortcut(sh)

        assert sh.category_columns == 0
        assert sh.category_on_hover is False
        assert sh.sub_list == []

    def test_non_default_category_mode_drops_command(self):
        sh = ShortcutConfig(type=ShortcutType.CATEGORY, mode=ShortcutMode.INCREMENTAL, command="/x")
        clean_shortcut(sh)

        assert sh.command == ""
        assert sh.mode == ShortcutMode.INCREMENTAL

    def test_spacer_resets_command_and_mode(self, sample_category):
        clean_shortcut(sample_category)
        spacer = sample_category.sub_list[2]

        assert spacer.command == ""
        assert spacer.mode == ShortcutMode.DEFAULT
        assert spacer.category_columns == 0

    def test_icon_fields_need_marker(self, sample_category):
        clean_shortcut(sample_category)
        wave, dance, _ = sample_category.sub_list

        assert wave.icon_zoom == 1.0
        assert wave.cooldown_action == 0
        assert dance.icon_zoom == 1.5
        assert dance.icon_offset == Vector2(0.25, 0.5)

    def test_runtime_cursor_reset(self):
        sh = ShortcutConfig(mode=ShortcutMode.INCREMENTAL, _i=3)
        clean_shortcut(sh)
        assert sh._i == 0

    def test_cleaning_is_idempotent(self, codec, sample_category):
        once = clean_shortcut(codec.clone(sample_category))
        twice = clean_shortcut(codec.clone(once))
        assert once == twice


class TestCleanBar:
    """Test bar cleaning rules."""

    def test_docked_bar(self, sample_bar):
        clean_bar(sample_bar)

        assert sample_bar.reveal_area_scale == 1.0
        assert sample_bar.hint is True
        assert sample_bar.alignment == BarAlign.LEFT_OR_TOP
        assert sample_bar.shortcut_list[0]._i == 0

    def test_docked_always_visible_bar_drops_hint(self):
        bar = BarConfig(dock_side=BarDock.TOP, visibility=BarVisibility.ALWAYS, hint=True)
        clean_bar(bar)
        assert bar.hint is False

    def test_undocked_bar(self):
        bar = BarConfig(dock_side=BarDock.UNDOCKED, alignment=BarAlign.RIGHT_OR_BOTTOM,
                        reveal_area_scale=3.0, hint=True, position=Vector2(5, 5))
        clean_bar(bar)

        assert bar.alignment == BarAlign.CENTER
        assert bar.reveal_area_scale == 1.0
        assert bar.hint is False
        assert bar.position == Vector2(5, 5)

    def test_hotkeys_and_conditions_untouched(self, sample_bar):
        sample_bar.hotkey = 0x70
        clean_bar(sample_bar)

        assert sample_bar.hotkey == 0x70
        assert sample_bar.condition_set == 3
        assert sample_bar.shortcut_list[0].hotkey == 0x41
