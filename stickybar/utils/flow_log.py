import time

try:
    from utils.settings import DEFAULT_SETTINGS, settings
except ModuleNotFoundError:
    from stickybar.utils.settings import DEFAULT_SETTINGS, settings

_flow_log_last: dict[str, float] = {}


def trace_enabled() -> bool:
    try:
        return bool(settings.value(
            'sticky_trace_logs', DEFAULT_SETTINGS['sticky_trace_logs'], type=bool))
    except Exception:
        return False


def log_flow(component: str, message: str, *, level: str = "DEBUG",
             throttle_key: str | None = None, every_s: float | None = None) -> bool:
    """Timestamped, optionally throttled flow logging for affix diagnostics.

    Returns True when a line was printed.
    """
    if level == "DEBUG" and not trace_enabled():
        return False

    now = time.time()
    if throttle_key and every_s is not None:
        last = _flow_log_last.get(throttle_key, 0.0)
        if (now - last) < every_s:
            return False
        _flow_log_last[throttle_key] = now
    ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
    print(f"[{ts}][TRACE][{component}][{level}] {message}")
    return True
