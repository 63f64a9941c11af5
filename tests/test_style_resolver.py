from stickybar.engine import AffixMode, DimensionSnapshot, TransformSupport, resolve
from stickybar.engine.style_resolver import INNER_RESET, OUTER_RESET

SNAPSHOT = DimensionSnapshot(
    viewport_top=900,
    viewport_height=800,
    viewport_left=15,
    container_top=120,
    container_height=3000,
    sidebar_height=640,
    sidebar_width=280,
    sidebar_left=700,
    top_spacing=20,
    bottom_spacing=30,
)


def test_every_mode_returns_complete_style_sets():
    for mode in AffixMode:
        for support in (TransformSupport(), TransformSupport(transform=True),
                        TransformSupport(transform=True, transform3d=True)):
            style = resolve(mode, SNAPSHOT, support, 250)
            assert set(INNER_RESET) <= set(style['inner'])
            assert set(OUTER_RESET) <= set(style['outer'])


def test_static_is_the_reset_set():
    style = resolve(AffixMode.STATIC, SNAPSHOT)
    assert style['inner'] == INNER_RESET
    assert style['outer'] == {'height': '', 'position': ''}


def test_viewport_top_is_fixed_under_top_spacing():
    style = resolve(AffixMode.VIEWPORT_TOP, SNAPSHOT)
    assert style['inner'] == {
        'position': 'fixed',
        'top': 20,
        'left': 685,
        'bottom': '',
        'width': 280,
        'transform': 'translate(0, 0)',
    }
    assert style['outer'] == {'height': 640, 'position': 'relative'}


def test_viewport_bottom_is_fixed_above_bottom_spacing():
    style = resolve(AffixMode.VIEWPORT_BOTTOM, SNAPSHOT)
    assert style['inner']['position'] == 'fixed'
    assert style['inner']['top'] == 'auto'
    assert style['inner']['left'] == 700
    assert style['inner']['bottom'] == 30
    assert style['inner']['width'] == 280
    assert style['outer'] == {'height': 640, 'position': 'relative'}


def test_offset_modes_prefer_translate3d():
    for mode in (AffixMode.CONTAINER_BOTTOM, AffixMode.VIEWPORT_UNBOTTOM):
        style = resolve(mode, SNAPSHOT, TransformSupport(transform=True, transform3d=True), 250)
        assert style['inner']['transform'] == 'translate3d(0, 250px, 0)'
        assert style['inner']['position'] == 'relative'
        assert style['inner']['top'] == ''


def test_offset_modes_fall_back_to_translate():
    style = resolve(AffixMode.CONTAINER_BOTTOM, SNAPSHOT, TransformSupport(transform=True), 250)
    assert style['inner']['transform'] == 'translate(0, 250px)'


def test_offset_modes_fall_back_to_absolute_top():
    style = resolve(AffixMode.VIEWPORT_UNBOTTOM, SNAPSHOT, TransformSupport(), 250)
    assert style['inner']['position'] == 'absolute'
    assert style['inner']['top'] == 120 + 250
    assert style['inner']['transform'] == 'translate(0, 0)'


def test_switching_modes_leaves_no_stale_properties():
    fixed = resolve(AffixMode.VIEWPORT_BOTTOM, SNAPSHOT)
    static = resolve(AffixMode.STATIC, SNAPSHOT)
    assert fixed['inner']['bottom'] == 30
    assert static['inner']['bottom'] == ''
    assert static['inner']['left'] == ''
