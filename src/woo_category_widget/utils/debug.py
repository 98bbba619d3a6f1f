"""Debug logging utilities."""

import os
import sys
import time


def debug_log(message: str, widget_name: str = "") -> None:
    """Log debug messages to per-widget debug log files if debug mode is enabled.

    Args:
        message: Debug message to log
        widget_name: Optional widget identifier used to pick the log file
    """
    if not os.getenv("WOO_CATEGORY_WIDGET_DEBUG"):
        return

    effective_name = widget_name or "general"

    logs_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "logs")
    log_file = os.path.join(logs_dir, f"widget_debug_{effective_name}.log")
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    widget_prefix = f"[{widget_name}] " if widget_name else ""
    log_message = f"[{timestamp}] {widget_prefix}{message}\n"

    try:
        os.makedirs(logs_dir, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(
            f"DEBUG (couldn't write to {log_file}): {widget_prefix}{message}",
            file=sys.stderr,
        )
