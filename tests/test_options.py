import pytest

from stickybar.engine import OptionsError, StickySidebarOptions


class FakeSettings:
    def __init__(self, values):
        self.values = values

    def value(self, key, default=None, type=None):
        return self.values.get(key, default)


def test_defaults_match_plugin_defaults():
    options = StickySidebarOptions()
    assert options.top_spacing == 0
    assert options.bottom_spacing == 0
    assert options.container_selector is None
    assert options.inner_wrapper_selector == "inner-wrapper-sticky"
    assert options.sticky_class == "is-affixed"
    assert options.resize_sensor is True
    assert options.breakpoint_width == 0


def test_extend_ignores_unknown_keys_and_none():
    options = StickySidebarOptions.extend(None, {
        "top_spacing": 12,
        "bottom_spacing": None,
        "animate": True,
    })
    assert options.top_spacing == 12
    assert options.bottom_spacing == 0
    assert not hasattr(options, "animate")


def test_extend_keeps_base_values():
    base = StickySidebarOptions(min_width=700)
    options = StickySidebarOptions.extend(base, {"top_spacing": 5})
    assert options.min_width == 700
    assert base.top_spacing == 0


def test_from_settings_normalizes_string_values():
    settings = FakeSettings({
        "sticky_top_spacing": "15",
        "sticky_bottom_spacing": "x",
        "sticky_container_selector": "",
        "sticky_resize_sensor": "false",
        "sticky_min_width": "640",
    })
    options = StickySidebarOptions.from_settings(settings)
    assert options.top_spacing == 15
    assert options.bottom_spacing == 0
    assert options.container_selector is None
    assert options.resize_sensor is False
    assert options.min_width == 640


def test_with_coerced_spacing_keeps_callables():
    def spacing(sidebar):
        return 3

    options = StickySidebarOptions(top_spacing=spacing, bottom_spacing="9px").with_coerced_spacing()
    assert options.top_spacing is spacing
    assert options.bottom_spacing == 9


def test_validate_rejects_bad_values():
    with pytest.raises(OptionsError):
        StickySidebarOptions(min_width=-10).validate()
    with pytest.raises(OptionsError):
        StickySidebarOptions(inner_wrapper_selector="").validate()


def test_changed_from_lists_only_differing_fields():
    settings_options = StickySidebarOptions(top_spacing=5, min_width=300)
    constructed = StickySidebarOptions(top_spacing=5, min_width=300, container_selector="main")

    assert constructed.changed_from(settings_options) == {"container_selector": "main"}
    assert settings_options.changed_from(settings_options) == {}
