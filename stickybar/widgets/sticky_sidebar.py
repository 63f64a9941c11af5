"""Scroll/resize orchestration for one sticky sidebar."""

from __future__ import annotations

try:
    from engine import (AffixMode, AffixState, ContainerNotFoundError, DimensionSnapshot,
                        LayoutMeasurements, ScrollMeasurements, SidebarNotFoundError,
                        StickySidebarOptions, TransformSupport, evaluate, resolve)
    from utils.flow_log import log_flow
    from widgets.sidebar_host import (CONTAINER, INNER, RESIZE, SCROLL, UPDATE,
                                      affix_event_name)
except ModuleNotFoundError:
    from stickybar.engine import (AffixMode, AffixState, ContainerNotFoundError,
                                  DimensionSnapshot, LayoutMeasurements, ScrollMeasurements,
                                  SidebarNotFoundError, StickySidebarOptions,
                                  TransformSupport, evaluate, resolve)
    from stickybar.utils.flow_log import log_flow
    from stickybar.widgets.sidebar_host import (CONTAINER, INNER, RESIZE, SCROLL, UPDATE,
                                                affix_event_name)

# Settings keys that require re-reading options.
_OPTION_SETTING_PREFIX = 'sticky_'


class StickySidebar:
    """Keeps a sidebar pinned inside its container while the host scrolls.

    The host delivers scroll/resize/update notifications; each one refreshes
    the dimension snapshot, evaluates the affix state and applies styles
    when the mode changes (or a refresh is forced).
    """

    def __init__(self, host, options: StickySidebarOptions | None = None, *,
                 settings=None, follow_settings: bool = False, **overrides):
        self.host = host
        self.options = StickySidebarOptions.extend(options, overrides).validate()

        self.sidebar = getattr(host, 'sidebar', None)
        if self.sidebar is None:
            raise SidebarNotFoundError("There is no specific sidebar element.")

        self.container = host.locate_container(self.options.container_selector)
        if self.container is None:
            raise ContainerNotFoundError(
                f"The container {self.options.container_selector!r} does not contain the sidebar.")

        self.state = AffixState()
        self.direction = None
        self.support = TransformSupport()
        self.sidebar_inner = None
        self.layout = LayoutMeasurements(0, 0, 0, 0, 0)
        self.scroll = ScrollMeasurements(0, 0, 0)
        self.snapshot = DimensionSnapshot()

        self._initialized = False
        self._bound = False
        self._sensor_bound = False
        self._settings = settings
        self._follow_settings = follow_settings and settings is not None
        # Constructor values that differ from settings win over later setting changes.
        self._pinned_options = {}
        if self._follow_settings:
            self._pinned_options = self.options.changed_from(
                StickySidebarOptions.from_settings(settings))

        self.initialize()

    @property
    def affixed_type(self) -> AffixMode:
        return self.state.mode

    @property
    def is_breakpoint(self) -> bool:
        return self.state.is_breakpoint

    def initialize(self):
        """Resolve wrapper and options, measure, position and bind events."""
        self.support = self.host.transform_support()
        self.sidebar_inner = self.host.ensure_inner_wrapper(self.options.inner_wrapper_selector)
        self.options = self.options.with_coerced_spacing()

        self._width_breakpoint()
        self.calc_dimensions()
        self.sticky_position()
        self.bind_events()

        self._initialized = True

    def bind_events(self):
        if self._bound:
            return
        self.host.subscribe(SCROLL, self._on_scroll)
        self.host.subscribe(RESIZE, self._on_resize)
        self.host.subscribe(UPDATE, self.update_sticky)

        if self.options.resize_sensor:
            self.host.add_resize_listener(INNER, self.update_sticky)
            self.host.add_resize_listener(CONTAINER, self.update_sticky)
            self._sensor_bound = True

        if self._follow_settings:
            self._settings.change.connect(self._on_setting_changed)
        self._bound = True

    def _on_scroll(self):
        self.sticky_position()

    def _on_resize(self):
        self._width_breakpoint()
        self.update_sticky()

    def calc_dimensions(self):
        """Re-measure container, sidebar and viewport sizes."""
        if self.state.is_breakpoint:
            return
        self.layout = self.host.measure_layout()
        self._calc_dimensions_with_scroll()

    def _calc_dimensions_with_scroll(self):
        """Refresh the values that change while scrolling."""
        self.scroll = self.host.measure_scroll()
        self.snapshot = DimensionSnapshot.capture(
            self.layout,
            self.scroll,
            top_spacing=self.options.top_spacing,
            bottom_spacing=self.options.bottom_spacing,
            sidebar=self.sidebar,
        )
        return self.snapshot

    def get_affix_type(self):
        """Evaluate the affix state against the current scroll position."""
        snapshot = self._calc_dimensions_with_scroll()
        result = evaluate(snapshot, self.state)
        self.direction = result.direction
        return result

    def get_style(self, mode: AffixMode, translate_y: int | None = None) -> dict:
        if translate_y is None:
            translate_y = self.state.translate_y
        return resolve(mode, self.snapshot, self.support, translate_y)

    def sticky_position(self, force: bool = False):
        """Apply the affix style when the mode changed or ``force`` is set."""
        if self.state.is_breakpoint:
            return

        result = self.get_affix_type()
        style = self.get_style(result.mode, result.translate_y)
        previous = self.state.mode
        self.state.commit(result)

        if previous != result.mode or force:
            self.host.dispatch(affix_event_name(result.mode), result.mode)

            if self.options.sticky_class:
                self.host.set_sticky_marker(
                    self.options.sticky_class, result.mode != AffixMode.STATIC)

            self.host.apply_outer_style(style['outer'])
            self.host.apply_inner_style(style['inner'])

            self.host.dispatch(affix_event_name(result.mode, after=True), result.mode)
            if previous != result.mode:
                log_flow(
                    "AFFIX",
                    f"{previous.value} -> {result.mode.value} translate_y={result.translate_y} "
                    f"direction={result.direction.value}",
                )
        elif self._initialized:
            self.host.apply_inner_left(style['inner']['left'])

    def _width_breakpoint(self):
        """Suspend stickiness while the viewport is narrower than ``min_width``."""
        min_width = self.options.breakpoint_width
        was_breakpoint = self.state.is_breakpoint
        if min_width > 0 and self.host.viewport_width() <= min_width:
            self.state.is_breakpoint = True
            self.state.reset()
            self.host.clear_styles()
            if self.options.sticky_class:
                self.host.set_sticky_marker(self.options.sticky_class, False)
        else:
            self.state.is_breakpoint = False

        if was_breakpoint != self.state.is_breakpoint:
            log_flow("BREAKPOINT", f"active={self.state.is_breakpoint} min_width={min_width}")

    def update_sticky(self):
        """Force re-measuring everything and re-applying the current style."""
        self.calc_dimensions()
        self.sticky_position(force=True)

    def _on_setting_changed(self, key, value):
        if not str(key).startswith(_OPTION_SETTING_PREFIX) or key == 'sticky_trace_logs':
            return
        self.options = StickySidebarOptions.extend(
            StickySidebarOptions.from_settings(self._settings), self._pinned_options,
        ).validate().with_coerced_spacing()
        self._width_breakpoint()
        self.update_sticky()

    def destroy(self):
        """Stop listening and drop every inline style. Safe to call twice."""
        if not self._bound:
            return
        self.host.unsubscribe(SCROLL, self._on_scroll)
        self.host.unsubscribe(RESIZE, self._on_resize)
        self.host.unsubscribe(UPDATE, self.update_sticky)

        if self._sensor_bound:
            self.host.remove_resize_listener(INNER, self.update_sticky)
            self.host.remove_resize_listener(CONTAINER, self.update_sticky)
            self._sensor_bound = False

        if self._follow_settings:
            self._settings.change.disconnect(self._on_setting_changed)

        if self.options.sticky_class:
            self.host.set_sticky_marker(self.options.sticky_class, False)
        self.host.clear_styles()
        self.host.detach()
        self._bound = False
        log_flow("LIFECYCLE", "Sticky sidebar destroyed")
