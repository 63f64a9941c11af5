import argparse
import logging
import os
import sys
import threading
import traceback
import warnings
from datetime import datetime
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox

try:
    from engine import ProfileLoader, StickySidebarOptions
    from utils.settings import settings
    from widgets.demo_window import DemoWindow
except ModuleNotFoundError:
    from stickybar.engine import ProfileLoader, StickySidebarOptions
    from stickybar.utils.settings import settings
    from stickybar.widgets.demo_window import DemoWindow

CRASH_LOG_PATH = os.path.abspath('stickybar_crash.log')
PROFILE_DIR = Path(__file__).parent / 'profiles'


def _append_crash_log(title: str, exc_info=None):
    """Append a timestamped crash entry to the crash log."""
    ts = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    try:
        with open(CRASH_LOG_PATH, 'a', encoding='utf-8') as f:
            f.write("\n" + "=" * 80 + "\n")
            f.write(f"{ts} | {title}\n")
            f.write("=" * 80 + "\n")
            if exc_info is None:
                f.write(traceback.format_exc())
            else:
                f.writelines(traceback.format_exception(*exc_info))
            f.write("\n")
    except OSError as log_error:
        print(f"[CRASH] Failed to write crash log: {log_error}")
    print(f"[CRASH] Details written to: {CRASH_LOG_PATH}")


def install_crash_handlers():
    """Log unhandled exceptions from the main and worker threads."""
    def _unhandled_exception(exc_type, exc_value, exc_traceback):
        _append_crash_log("UNHANDLED EXCEPTION", (exc_type, exc_value, exc_traceback))
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    def _thread_exception(args):
        thread_name = getattr(args.thread, 'name', 'unknown')
        _append_crash_log(
            f"THREAD EXCEPTION ({thread_name})",
            (args.exc_type, args.exc_value, args.exc_traceback),
        )

    sys.excepthook = _unhandled_exception
    threading.excepthook = _thread_exception


def suppress_warnings():
    """Suppress all warnings when not in a development environment."""
    environment = os.getenv('STICKYBAR_ENVIRONMENT')
    if environment == 'development':
        print('Running in development environment.')
        return
    logging.basicConfig(level=logging.ERROR)
    warnings.simplefilter('ignore')


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Sticky sidebar demo")
    p.add_argument("--profile", type=str, default="",
                   help="YAML profile with a 'sidebar' section (name or path)")
    p.add_argument("--top-spacing", type=int, default=None)
    p.add_argument("--bottom-spacing", type=int, default=None)
    p.add_argument("--min-width", type=int, default=None, help="Breakpoint width (px)")
    p.add_argument("--offscreen", action="store_true", help="Use Qt offscreen platform")
    return p.parse_args(argv)


def resolve_profile_path(profile: str) -> Path | None:
    if not profile:
        return None
    path = Path(profile)
    if path.suffix != '.yaml' and not path.exists():
        path = PROFILE_DIR / f'{profile}.yaml'
    return path


def build_options(args: argparse.Namespace) -> StickySidebarOptions:
    """Settings, then profile, then command line."""
    options = StickySidebarOptions.from_settings(settings)

    profile = args.profile or settings.value('sticky_profile_path', '', type=str)
    profile_path = resolve_profile_path(profile)
    if profile_path is not None:
        loader = ProfileLoader()
        options = loader.apply_profile(loader.load_profile(profile_path), options)

    return StickySidebarOptions.extend(options, {
        'top_spacing': args.top_spacing,
        'bottom_spacing': args.bottom_spacing,
        'min_width': args.min_width,
    })


def run_demo(argv=None):
    args = parse_args(argv)
    if args.offscreen:
        os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

    app = QApplication(sys.argv[:1])
    app.setApplicationName('stickybar')
    app.setApplicationDisplayName('Sticky Sidebar')
    app.setStyle('Fusion')

    main_window = DemoWindow(build_options(args))
    main_window.show()
    return int(app.exec())


if __name__ == '__main__':
    suppress_warnings()
    install_crash_handlers()
    try:
        sys.exit(run_demo())
    except Exception as exception:
        _append_crash_log("TOP-LEVEL EXCEPTION", sys.exc_info())
        if QApplication.instance() is not None:
            error_message_box = QMessageBox()
            error_message_box.setWindowTitle('Error')
            error_message_box.setIcon(QMessageBox.Icon.Critical)
            error_message_box.setText(str(exception))
            error_message_box.setDetailedText(traceback.format_exc())
            error_message_box.exec()
        sys.exit(1)
