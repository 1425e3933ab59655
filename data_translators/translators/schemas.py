"""Translator schemas: render options and target definitions.

RenderOptions is the per-call configuration record shared by every
translator. TargetDefinitions are loaded from JSON files in
``definitions/`` and declare each target's name, aliases and capabilities.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

MAX_DEPTH_ENV = "DATA_TRANSLATORS_MAX_DEPTH"

DEFAULT_TABLE_ATTRIBUTES = 'border="1"'

# Options read by translators; each target lists the ones it honours in
# its definition's supported_options. missing_value belongs to dataset
# normalization and applies to every target.
TRANSLATOR_OPTIONS = ("field_names", "table_attributes", "encode", "escape", "max_depth")


def _default_max_depth() -> Optional[int]:
    """Recursion limit from the environment; unset means unbounded."""
    raw = os.environ.get(MAX_DEPTH_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {MAX_DEPTH_ENV}={raw!r}")
        return None


class RenderOptions(BaseModel):
    """Options recognized by translators and the dispatcher."""

    model_config = ConfigDict(extra="forbid")

    field_names: Optional[list[str]] = Field(
        default=None,
        description="Column order for the top-level table, or keys for "
        "positional rows / a flat list read as one row",
    )
    table_attributes: Optional[str] = Field(
        default=None,
        description="Raw attribute string for the outermost HTML table tag. "
        f"Default: {DEFAULT_TABLE_ATTRIBUTES}",
    )
    encode: bool = Field(
        default=False,
        description="Replace non-ASCII characters in scalar text with "
        "numeric character references",
    )
    escape: bool = Field(
        default=False,
        description="Escape HTML-significant characters in scalar text",
    )
    missing_value: str = Field(
        default="",
        description="Sentinel for cells whose key a row lacks "
        "(dataset normalization)",
    )
    max_depth: Optional[int] = Field(
        default_factory=_default_max_depth,
        description="Maximum container nesting levels to render; "
        "None means unbounded",
    )

    def options_set(self) -> list[str]:
        """Names of translator options given a non-empty value."""
        return [name for name in TRANSLATOR_OPTIONS if getattr(self, name)]


class TargetDefinition(BaseModel):
    """A conversion target with its aliases and capabilities."""

    target_key: str = Field(
        ..., description="Unique identifier (e.g. 'html', 'r', 'wl', 'json')"
    )
    target_name: str = Field(
        ..., description="Human-readable name (e.g. 'Wolfram Language')"
    )
    description: str = Field(
        default="", description="What the target produces"
    )
    aliases: list[str] = Field(
        default_factory=list,
        description="Alternative names, matched case-insensitively",
    )
    output_format: str = Field(
        default="text/plain", description="Media type of the produced text"
    )
    passthrough: bool = Field(
        default=False,
        description="Serialize the value as JSON instead of rendering it",
    )
    supported_options: list[str] = Field(
        default_factory=list,
        description="RenderOptions fields this target interprets",
    )
    status: str = Field(
        default="active", description="'active', 'draft', 'deprecated'"
    )


class TargetSummary(BaseModel):
    """Lightweight summary for listing endpoints."""

    target_key: str
    target_name: str
    description: str = ""
    aliases: list[str] = Field(default_factory=list)
    output_format: str = "text/plain"
    status: str = "active"
