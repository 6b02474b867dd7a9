"""Badge rendering."""
from .render import (
    DEFAULT_COLOR,
    DEFAULT_LABEL,
    Badge,
    render_dynamic_badge,
    render_error_badge,
)

__all__ = [
    "Badge",
    "DEFAULT_COLOR",
    "DEFAULT_LABEL",
    "render_dynamic_badge",
    "render_error_badge",
]
