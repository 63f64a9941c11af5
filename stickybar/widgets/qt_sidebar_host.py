"""QScrollArea-backed host for :class:`StickySidebar`."""

from __future__ import annotations

import re

from PySide6.QtCore import QEvent, QObject, QPoint, QRect, Signal
from PySide6.QtWidgets import QScrollArea, QVBoxLayout, QWidget

try:
    from engine import LayoutMeasurements, ScrollMeasurements, TransformSupport
    from engine.style_resolver import CLEARED_STYLE
    from widgets.sidebar_host import CONTAINER, INNER, RESIZE, SCROLL, UPDATE
except ModuleNotFoundError:
    from stickybar.engine import LayoutMeasurements, ScrollMeasurements, TransformSupport
    from stickybar.engine.style_resolver import CLEARED_STYLE
    from stickybar.widgets.sidebar_host import CONTAINER, INNER, RESIZE, SCROLL, UPDATE

INNER_WRAPPER_NAME = 'inner-wrapper-sticky'

_PX_VALUE = re.compile(r'^\s*(-?\d+(?:\.\d+)?)\s*(?:px)?\s*$')
_TRANSLATE_Y = re.compile(r'translate(?:3d)?\(\s*[^,]+,\s*(-?\d+(?:\.\d+)?)\s*(?:px)?')


def parse_px(value, default: int | None = None) -> int | None:
    """Parse ``12``, ``12.5`` or ``"12px"``; ``""``/``"auto"`` give ``default``."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        return int(value)
    match = _PX_VALUE.match(str(value))
    return int(float(match.group(1))) if match else default


def translate_offset(transform) -> int:
    """Vertical offset of a ``translate(...)``/``translate3d(...)`` value."""
    match = _TRANSLATE_Y.search(str(transform or ''))
    return int(float(match.group(1))) if match else 0


def inner_geometry(
    style: dict,
    *,
    sidebar_pos: QPoint,
    sidebar_width: int,
    inner_height: int,
    viewport_top: int,
    viewport_left: int,
    viewport_height: int,
) -> QRect:
    """Rectangle of the inner wrapper in scroll-content coordinates.

    ``fixed`` is relative to the visible viewport, ``absolute`` to the
    content widget, anything else to the sidebar's own position.
    """
    position = style.get('position') or 'relative'
    width = parse_px(style.get('width'), sidebar_width)

    if position == 'fixed':
        left = parse_px(style.get('left'), sidebar_pos.x() - viewport_left)
        x = viewport_left + left
        top = parse_px(style.get('top'))
        bottom = parse_px(style.get('bottom'))
        if top is None and bottom is not None:
            y = viewport_top + viewport_height - bottom - inner_height
        else:
            y = viewport_top + (top or 0)
    elif position == 'absolute':
        x = parse_px(style.get('left'), sidebar_pos.x())
        y = parse_px(style.get('top'), sidebar_pos.y())
    else:
        x = sidebar_pos.x()
        y = sidebar_pos.y() + translate_offset(style.get('transform'))

    return QRect(x, y, width, inner_height)


class QtSidebarHost(QObject):
    """Measures and positions a sidebar living inside a QScrollArea.

    The inner wrapper is re-parented onto the scroll area's content widget
    so it can leave the sidebar's bounds; the sidebar itself stays in its
    layout as a placeholder.
    """

    affix = Signal(str)  # Mode value, before styles are applied
    affixed = Signal(str)  # Mode value, after styles are applied
    event_triggered = Signal(str, object)
    update_requested = Signal()

    def __init__(self, scroll_area: QScrollArea, sidebar: QWidget | None,
                 transform_support: TransformSupport | None = None, parent=None):
        super().__init__(parent)
        self.scroll_area = scroll_area
        self.sidebar = sidebar
        self.container: QWidget | None = None
        self.inner: QWidget | None = None
        self._transform_support = transform_support or TransformSupport(transform=True)
        self._inner_style: dict = dict(CLEARED_STYLE)
        self._outer_style: dict = {}
        self._listeners = {SCROLL: [], RESIZE: [], UPDATE: []}
        self._resize_listeners = {INNER: [], CONTAINER: []}
        self._placing = False
        self._detached = False

        scroll_area.verticalScrollBar().valueChanged.connect(self._on_scroll)
        scroll_area.horizontalScrollBar().valueChanged.connect(self._on_scroll)
        scroll_area.viewport().installEventFilter(self)
        self.update_requested.connect(self._on_update_requested)

    @property
    def content(self) -> QWidget:
        return self.scroll_area.widget()

    def locate_container(self, selector: str | None):
        parent = self.sidebar.parentWidget()
        if not selector:
            self.container = parent
            return parent
        while parent is not None:
            if parent.objectName() == selector:
                self.container = parent
                return parent
            parent = parent.parentWidget()
        return None

    def ensure_inner_wrapper(self, selector: str) -> QWidget:
        """Find the inner wrapper by objectName, wrapping the sidebar's children if absent."""
        inner = self.sidebar.findChild(QWidget, selector) if selector else None
        if inner is None:
            inner = self._wrap_sidebar_children()

        inner.setParent(self.content)
        inner.show()
        inner.raise_()
        self.inner = inner
        self._place_inner()
        return inner

    def _wrap_sidebar_children(self) -> QWidget:
        wrapper = QWidget()
        wrapper.setObjectName(INNER_WRAPPER_NAME)
        wrapper_layout = QVBoxLayout(wrapper)

        old_layout = self.sidebar.layout()
        if old_layout is not None:
            wrapper_layout.setContentsMargins(old_layout.contentsMargins())
            wrapper_layout.setSpacing(old_layout.spacing())
            while old_layout.count():
                item = old_layout.takeAt(0)
                if item.widget() is not None:
                    wrapper_layout.addWidget(item.widget())
                else:
                    wrapper_layout.addItem(item)
        else:
            wrapper_layout.setContentsMargins(0, 0, 0, 0)
            for child in self.sidebar.findChildren(QWidget):
                if child.parentWidget() is self.sidebar:
                    wrapper_layout.addWidget(child)
        return wrapper

    def _doc_pos(self, widget: QWidget) -> QPoint:
        if widget is self.content:
            return QPoint(0, 0)
        return self.content.mapFromGlobal(widget.mapToGlobal(QPoint(0, 0)))

    def _inner_height(self) -> int:
        if self.inner is None:
            return 0
        width = max(1, self.sidebar.width())
        if self.inner.hasHeightForWidth():
            return max(0, self.inner.heightForWidth(width))
        return max(0, self.inner.sizeHint().height())

    def measure_layout(self) -> LayoutMeasurements:
        container = self.container or self.sidebar.parentWidget()
        return LayoutMeasurements(
            container_top=self._doc_pos(container).y(),
            container_height=container.height(),
            sidebar_height=self._inner_height(),
            sidebar_width=self.sidebar.width(),
            viewport_height=self.scroll_area.viewport().height(),
        )

    def measure_scroll(self) -> ScrollMeasurements:
        return ScrollMeasurements(
            viewport_top=self.scroll_area.verticalScrollBar().value(),
            viewport_left=self.scroll_area.horizontalScrollBar().value(),
            sidebar_left=self._doc_pos(self.sidebar).x(),
        )

    def viewport_width(self) -> int:
        return self.scroll_area.viewport().width()

    def transform_support(self) -> TransformSupport:
        return self._transform_support

    def apply_outer_style(self, style: dict):
        self._outer_style = dict(style)
        height = parse_px(style.get('height'))
        self.sidebar.setMinimumHeight(height if height is not None else self._inner_height())

    def apply_inner_style(self, style: dict):
        self._inner_style = dict(style)
        self._place_inner()

    def apply_inner_left(self, value):
        self._inner_style['left'] = value
        self._place_inner()

    def clear_styles(self):
        self._outer_style = {}
        self._inner_style = dict(CLEARED_STYLE)
        self.sidebar.setMinimumHeight(self._inner_height())
        self._place_inner()

    def set_sticky_marker(self, name: str, enabled: bool):
        self.sidebar.setProperty(name, bool(enabled))
        # Re-polish so property selectors in style sheets pick up the change.
        self.sidebar.style().unpolish(self.sidebar)
        self.sidebar.style().polish(self.sidebar)

    def dispatch(self, event_name: str, payload):
        self.event_triggered.emit(event_name, payload)
        value = getattr(payload, 'value', payload)
        if event_name.startswith('affixed.'):
            self.affixed.emit(str(value))
        else:
            self.affix.emit(str(value))

    def subscribe(self, kind: str, callback):
        self._listeners[kind].append(callback)

    def unsubscribe(self, kind: str, callback):
        if callback in self._listeners[kind]:
            self._listeners[kind].remove(callback)

    def add_resize_listener(self, target: str, callback):
        widget = self._resize_target(target)
        if not self._resize_listeners[target]:
            widget.installEventFilter(self)
        self._resize_listeners[target].append(callback)

    def remove_resize_listener(self, target: str, callback):
        listeners = self._resize_listeners[target]
        if callback in listeners:
            listeners.remove(callback)
        if not listeners:
            self._resize_target(target).removeEventFilter(self)

    def detach(self):
        """Disconnect from the scroll area and stop placing the inner wrapper."""
        if self._detached:
            return
        self._detached = True
        self.scroll_area.verticalScrollBar().valueChanged.disconnect(self._on_scroll)
        self.scroll_area.horizontalScrollBar().valueChanged.disconnect(self._on_scroll)
        self.scroll_area.viewport().removeEventFilter(self)
        self.update_requested.disconnect(self._on_update_requested)
        for target, listeners in self._resize_listeners.items():
            widget = self._resize_target(target)
            if listeners and widget is not None:
                widget.removeEventFilter(self)
            listeners.clear()
        for listeners in self._listeners.values():
            listeners.clear()

    def _resize_target(self, target: str) -> QWidget:
        return self.inner if target == INNER else self.container

    def _place_inner(self):
        if self.inner is None or self.content is None:
            return
        rect = inner_geometry(
            self._inner_style,
            sidebar_pos=self._doc_pos(self.sidebar),
            sidebar_width=self.sidebar.width(),
            inner_height=self._inner_height(),
            viewport_top=self.scroll_area.verticalScrollBar().value(),
            viewport_left=self.scroll_area.horizontalScrollBar().value(),
            viewport_height=self.scroll_area.viewport().height(),
        )
        self._placing = True
        try:
            self.inner.setGeometry(rect)
            self.inner.raise_()
        finally:
            self._placing = False

    def _notify(self, listeners):
        for callback in list(listeners):
            callback()

    def _on_scroll(self, _value=None):
        if self._detached:
            return
        self._notify(self._listeners[SCROLL])
        # Fixed styles are viewport-relative and move with every tick.
        self._place_inner()

    def _on_update_requested(self):
        self._notify(self._listeners[UPDATE])

    def eventFilter(self, watched, event):
        if self._placing or self._detached:
            return False
        event_type = event.type()
        if watched is self.scroll_area.viewport() and event_type == QEvent.Type.Resize:
            self._notify(self._listeners[RESIZE])
            self._place_inner()
        elif event_type in (QEvent.Type.Resize, QEvent.Type.LayoutRequest):
            if watched is self.inner:
                self._notify(self._resize_listeners[INNER])
            elif watched is self.container:
                self._notify(self._resize_listeners[CONTAINER])
        return False
