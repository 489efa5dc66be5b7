"""Debug rendering of values shown in step messages."""
from typing import Any


def debug_display(value: Any) -> str:
    """Render ``value`` for a transcript line.

    Objects can control their rendering by defining ``to_debug_display()``.
    This never raises; a value whose rendering fails is shown by type name.
    """
    try:
        if value is None:
            return "None"
        to_debug_display = getattr(value, "to_debug_display", None)
        if callable(to_debug_display):
            return str(to_debug_display())
        return repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"
