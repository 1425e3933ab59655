"""Command line entry point for data translation.

Usage:
    data-translation '[{"x": 1, "y": 2}]'
    data-translation data.json --target=R
    data-translation data.json --target=wl --field-names="a;b"
    data-translation '[{"a": 1}, {"b": 2}]' --dataset --missing-value=NA

DATA is a file path, JSON text, or literal text. Text that is not valid
JSON is rendered as a plain text value; a file that is not valid JSON is
an error.
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from data_translators.translators.base import IncompatibleShapeError
from data_translators.translators.dispatcher import DEFAULT_TARGET, convert
from data_translators.translators.schemas import RenderOptions
from data_translators.values import as_existing_file, load_value

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "DATA_TRANSLATORS_LOG_LEVEL"


def parse_field_names(text: Optional[str]) -> Optional[list[str]]:
    """Split a semicolon-separated list, dropping blank entries."""
    if not text:
        return None
    names = [name.strip() for name in text.split(";")]
    return [name for name in names if name] or None


def read_data(text: str):
    """Parse DATA as a file or JSON text, falling back to literal text.

    Raises:
        json.JSONDecodeError: DATA names a file that is not valid JSON
    """
    if as_existing_file(text) is not None:
        return load_value(text)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.debug("DATA is not JSON; using it as literal text")
        return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="data-translation",
        description="Convert JSON data to HTML, R, Wolfram Language or JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "data",
        help="Data to convert: a file path, JSON text, or literal text",
    )
    parser.add_argument(
        "--target",
        default=DEFAULT_TARGET,
        help="Target language: HTML, R, WL or JSON, aliases accepted "
        f"(default: {DEFAULT_TARGET})",
    )
    parser.add_argument(
        "--encode",
        action="store_true",
        help="Encode non-ASCII characters as character references",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="Escape HTML-significant characters",
    )
    parser.add_argument(
        "--field-names",
        default="",
        help="Semicolon-separated field names (column order / positional keys)",
    )
    parser.add_argument(
        "--table-attributes",
        default=None,
        help='Attributes of the outermost HTML table (default: border="1")',
    )
    parser.add_argument(
        "--dataset",
        action="store_true",
        help="Normalize ragged data into a rectangular dataset first",
    )
    parser.add_argument(
        "--missing-value",
        default="",
        help="Fill value for absent columns when --dataset is given",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING")
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    overrides = {
        "field_names": parse_field_names(args.field_names),
        "encode": args.encode,
        "escape": args.escape,
        "missing_value": args.missing_value,
    }
    if args.table_attributes is not None:
        overrides["table_attributes"] = args.table_attributes

    try:
        data = read_data(args.data)
    except json.JSONDecodeError as e:
        print(f"Error: {args.data} is not valid JSON: {e}", file=sys.stderr)
        return 1

    try:
        output = convert(
            data,
            target=args.target,
            options=RenderOptions(**overrides),
            dataset=args.dataset,
            parse=False,
        )
    except IncompatibleShapeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output is not None:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
