from PySide6.QtCore import QSettings, Signal

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'sticky_top_spacing': 0,
    'sticky_bottom_spacing': 0,
    'sticky_container_selector': '',  # Empty = sidebar's parent widget
    'sticky_inner_wrapper_selector': 'inner-wrapper-sticky',
    'sticky_class': 'is-affixed',
    'sticky_resize_sensor': True,
    'sticky_min_width': 0,  # 0 = breakpoint disabled
    'sticky_trace_logs': False,  # Print AFFIX/BREAKPOINT flow traces
    'sticky_profile_path': '',
}


class Settings(QSettings):
    # Emitted with the key and new value whenever a setting is changed
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('stickybar', 'stickybar')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()
