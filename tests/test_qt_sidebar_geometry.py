from PySide6.QtCore import QPoint, QRect

from stickybar.engine import AffixMode, DimensionSnapshot, TransformSupport, resolve
from stickybar.widgets.qt_sidebar_host import inner_geometry, parse_px, translate_offset

SNAPSHOT = DimensionSnapshot(
    viewport_top=1000, viewport_height=600, viewport_left=0,
    container_top=80, container_height=4000,
    sidebar_height=300, sidebar_width=240, sidebar_left=700,
    top_spacing=10, bottom_spacing=20,
)


def place(style):
    return inner_geometry(
        style["inner"],
        sidebar_pos=QPoint(700, 80),
        sidebar_width=240,
        inner_height=300,
        viewport_top=SNAPSHOT.viewport_top,
        viewport_left=SNAPSHOT.viewport_left,
        viewport_height=SNAPSHOT.viewport_height,
    )


def test_parse_px():
    assert parse_px(12) == 12
    assert parse_px("12px") == 12
    assert parse_px("7.5px") == 7
    assert parse_px("auto") is None
    assert parse_px("", 3) == 3


def test_translate_offset():
    assert translate_offset("translate(0, 0)") == 0
    assert translate_offset("translate(0, 250px)") == 250
    assert translate_offset("translate3d(0, -12px, 0)") == -12
    assert translate_offset("") == 0


def test_static_sits_at_sidebar_position():
    style = resolve(AffixMode.STATIC, SNAPSHOT)
    assert place(style) == QRect(700, 80, 240, 300)


def test_viewport_top_sits_under_top_spacing():
    style = resolve(AffixMode.VIEWPORT_TOP, SNAPSHOT)
    assert place(style) == QRect(700, 1010, 240, 300)


def test_viewport_bottom_sits_above_bottom_spacing():
    style = resolve(AffixMode.VIEWPORT_BOTTOM, SNAPSHOT)
    assert place(style) == QRect(700, 1000 + 600 - 20 - 300, 240, 300)


def test_offset_modes_land_on_the_same_row():
    absolute = resolve(AffixMode.CONTAINER_BOTTOM, SNAPSHOT, TransformSupport(), 900)
    translated = resolve(AffixMode.CONTAINER_BOTTOM, SNAPSHOT, TransformSupport(transform=True), 900)
    assert place(absolute) == QRect(700, 980, 240, 300)
    assert place(translated) == QRect(700, 980, 240, 300)
