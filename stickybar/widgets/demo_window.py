from PySide6.QtCore import Qt
from PySide6.QtWidgets import (QFrame, QHBoxLayout, QLabel, QMainWindow, QScrollArea,
                               QVBoxLayout, QWidget)

try:
    from engine import StickySidebarOptions
    from utils.settings import settings
    from widgets.qt_sidebar_host import QtSidebarHost
    from widgets.sticky_sidebar import StickySidebar
except ModuleNotFoundError:
    from stickybar.engine import StickySidebarOptions
    from stickybar.utils.settings import settings
    from stickybar.widgets.qt_sidebar_host import QtSidebarHost
    from stickybar.widgets.sticky_sidebar import StickySidebar

CONTAINER_NAME = 'main-content'
SIDEBAR_NAME = 'sidebar'

STYLE_SHEET = """
QWidget#sidebar[is-affixed="true"] { background: #1f2a36; }
QWidget#inner-wrapper-sticky { background: #263445; border-radius: 6px; }
QLabel[role="card"] { color: #e0e6ee; padding: 8px; }
"""


def _paragraph(index: int) -> QLabel:
    label = QLabel(
        f"Section {index + 1}. " + "Scrolling content that is taller than the sidebar. " * 12)
    label.setWordWrap(True)
    return label


class DemoWindow(QMainWindow):
    """Article with a sticky sidebar next to it."""

    def __init__(self, options: StickySidebarOptions | None = None,
                 paragraphs: int = 60, sidebar_cards: int = 8):
        super().__init__()
        self.setWindowTitle('Sticky Sidebar')
        self.resize(1000, 700)
        self.setStyleSheet(STYLE_SHEET)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.addWidget(QLabel('<h1>Header</h1>'))

        container = QWidget()
        container.setObjectName(CONTAINER_NAME)
        container_layout = QHBoxLayout(container)
        article = QWidget()
        article_layout = QVBoxLayout(article)
        for index in range(paragraphs):
            article_layout.addWidget(_paragraph(index))
        container_layout.addWidget(article, 1)

        self.sidebar = QFrame()
        self.sidebar.setObjectName(SIDEBAR_NAME)
        self.sidebar.setFixedWidth(260)
        sidebar_layout = QVBoxLayout(self.sidebar)
        for index in range(sidebar_cards):
            card = QLabel(f"Sidebar card {index + 1}")
            card.setProperty('role', 'card')
            card.setMinimumHeight(60)
            sidebar_layout.addWidget(card)
        container_layout.addWidget(self.sidebar, 0, Qt.AlignmentFlag.AlignTop)

        content_layout.addWidget(container)
        content_layout.addWidget(QLabel('<h2>Footer</h2>' + '<br>' * 20))
        self.scroll_area.setWidget(content)
        self.setCentralWidget(self.scroll_area)

        self.host = QtSidebarHost(self.scroll_area, self.sidebar, parent=self)
        self.host.affixed.connect(self._on_affixed)
        options = options or StickySidebarOptions.from_settings(settings)
        self.sticky_sidebar = StickySidebar(
            self.host,
            StickySidebarOptions.extend(
                options, {'container_selector': options.container_selector or CONTAINER_NAME}),
            settings=settings,
            follow_settings=True,
        )

    def _on_affixed(self, mode: str):
        self.statusBar().showMessage(f"Affix: {mode}")

    def showEvent(self, event):
        super().showEvent(event)
        # Geometry is only final once the window is shown.
        self.host.update_requested.emit()

    def closeEvent(self, event):
        self.sticky_sidebar.destroy()
        super().closeEvent(event)
