"""JSON-like value model.

Values are plain Python JSON types: None, bool, int, float, str,
list/tuple (ordered sequences) and dict (ordered mappings with unique keys).
Nothing in the package mutates a value; every transformation builds new
containers.

Loading turns JSON text, files and streams into values using the standard
``json`` parser. Parse errors are not caught here.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

JSONScalar = Union[None, bool, int, float, str]
JSONValue = Any

SCALAR_TYPES = (type(None), bool, int, float, str)


def is_scalar(value: Any) -> bool:
    """True for null, boolean, number and text values."""
    return isinstance(value, SCALAR_TYPES)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """True for ordered sequences (lists and tuples), never for text."""
    return isinstance(value, (list, tuple))


def is_pair(value: Any) -> bool:
    """True for a 2-element sequence whose first item can serve as a key."""
    return is_sequence(value) and len(value) == 2 and is_scalar(value[0])


def scalar_text(value: JSONScalar) -> str:
    """Plain text form of a scalar, spelled the way JSON spells it."""
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


# ── Loading ───────────────────────────────────────────


def load_value(source: Any) -> JSONValue:
    """Read and parse JSON input into a value.

    Accepts a ``Path``, a ``str`` naming an existing file, JSON text,
    ``bytes``, or a readable stream. Anything else is taken to be an
    already materialized value and returned as-is.
    """
    if isinstance(source, Path):
        logger.debug(f"Reading JSON from file: {source}")
        return json.loads(source.read_text(encoding="utf-8"))

    if isinstance(source, str):
        path = as_existing_file(source)
        if path is not None:
            logger.debug(f"Reading JSON from file: {path}")
            return json.loads(path.read_text(encoding="utf-8"))
        return json.loads(source)

    if isinstance(source, (bytes, bytearray)):
        return json.loads(source)

    if hasattr(source, "read"):
        return json.loads(source.read())

    return source


def as_existing_file(text: str) -> Optional[Path]:
    """Path for ``text`` when it names an existing file, else None."""
    # JSON text and long literals are never file names
    if not text or len(text) > 4096 or "\n" in text or text.lstrip()[:1] in "[{\"":
        return None
    try:
        path = Path(text).expanduser()
        return path if path.is_file() else None
    except (OSError, ValueError):
        return None
