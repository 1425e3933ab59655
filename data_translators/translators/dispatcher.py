"""Resolves a target name and runs the matching translator.

Targets and their aliases come from the target registry; the translator
for each target key is a stateless instance held in ``_TRANSLATORS``.
The JSON target bypasses every translator.
"""

import json
import logging
from typing import Any, Optional

from data_translators.datasets.normalizer import to_dataset
from data_translators.translators.base import Translator
from data_translators.translators.html import HTMLTranslator
from data_translators.translators.r import RTranslator
from data_translators.translators.registry import get_target_registry
from data_translators.translators.schemas import RenderOptions
from data_translators.translators.wl import WLTranslator
from data_translators.values import load_value

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "HTML"

_TRANSLATORS: dict[str, Translator] = {
    "html": HTMLTranslator(),
    "r": RTranslator(),
    "wl": WLTranslator(),
}


def get_translator(target_key: str) -> Optional[Translator]:
    """Get the translator instance for a target key."""
    return _TRANSLATORS.get(target_key)


def to_json(value: Any, indent: Optional[int] = None) -> str:
    """Standard JSON text of a value."""
    return json.dumps(value, indent=indent)


def build_options(options: Optional[RenderOptions] = None, **overrides) -> RenderOptions:
    """Merge keyword overrides onto an options record (or the defaults)."""
    if options is None:
        return RenderOptions(**overrides)
    if not overrides:
        return options
    return RenderOptions.model_validate({**options.model_dump(), **overrides})


def convert(
    data: Any,
    target: str = DEFAULT_TARGET,
    options: Optional[RenderOptions] = None,
    dataset: bool = False,
    parse: bool = True,
    **overrides,
) -> Optional[str]:
    """Convert data to the text of a target representation.

    Args:
        data: A value, or JSON input to parse first: a Path, a file name,
            JSON text, bytes or a readable stream
        target: Target name or alias, case-insensitive
            (html/markdown, r/rlang, wl/wolfram language/mathematica, json)
        options: Render options; keyword overrides are merged on top
        dataset: Normalize the value with to_dataset before rendering
        parse: When False, text data is a value in its own right, not JSON

    Returns:
        The rendered text, or None when the target is not supported

    Raises:
        json.JSONDecodeError: JSON input could not be parsed
        IncompatibleShapeError: The translator cannot render the value
    """
    registry = get_target_registry()
    definition = registry.resolve(target)
    if definition is None:
        logger.warning(
            f"Unsupported target '{target}'. Available: {registry.list_aliases()}"
        )
        return None

    options = build_options(options, **overrides)
    value = load_value(data) if parse else data

    if dataset:
        value = to_dataset(value, options.missing_value)

    if definition.passthrough:
        return to_json(value)

    translator = get_translator(definition.target_key)
    if translator is None:
        logger.warning(
            f"Target '{definition.target_key}' has no translator implementation"
        )
        return None

    logger.debug(f"Rendering {type(value).__name__} as {definition.target_name}")
    return translator.render(value, options)
