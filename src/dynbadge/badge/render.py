"""Badge payloads in the shields.io endpoint format.

    {"schemaVersion": 1, "label": "match", "message": "2.4", "color": "blue"}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LABEL = "match"
DEFAULT_COLOR = "blue"
ERROR_COLOR = "red"
INACCESSIBLE_COLOR = "lightgrey"


class Badge(BaseModel):
    """Presentation object handed to the badge endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_version: int = Field(default=1, alias="schemaVersion")
    label: str = Field(default=DEFAULT_LABEL, description="Left-hand text")
    message: str = Field(..., description="Right-hand text (the extracted value)")
    color: str = Field(default=DEFAULT_COLOR, description="Message background color")
    is_error: bool = Field(default=False, alias="isError")


def render_dynamic_badge(
    value: str,
    label: str | None = None,
    color: str | None = None,
) -> Badge:
    """Render an extracted value."""
    return Badge(
        label=label or DEFAULT_LABEL,
        message=value,
        color=color or DEFAULT_COLOR,
    )


def render_error_badge(
    message: str,
    label: str | None = None,
    color: str = ERROR_COLOR,
) -> Badge:
    """Render a failure; the label is kept so the badge stays recognisable."""
    return Badge(
        label=label or DEFAULT_LABEL,
        message=message,
        color=color,
        is_error=True,
    )
