from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from styled_text.config import Settings, get_settings
from styled_text.errors import EmptyCandidateSetError
from styled_text.schemas import LETTER_STYLES, LETTER_TYPES, ConversionRequest
from styled_text.services.conversion import convert, detect_style_keys, to_styled
from styled_text.services.glyph_table import GlyphTable, get_glyph_table
from styled_text.services.glyph_types import all_style_keys
from styled_text.services.selection import build_selection_rng

logger = logging.getLogger(__name__)

DIST_NAME = "styled-text"
SAMPLE_TEXT = "AaZz"


def _package_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "unknown"


def _configure_logging(settings: Settings, *, verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def render_style_listing(table: GlyphTable | None = None) -> str:
    if table is None:
        table = get_glyph_table()
    lines = []
    for key in all_style_keys():
        covered = len(table.coverage(key))
        lines.append(f"{str(key):<24} {to_styled(SAMPLE_TEXT, key, table)}  {covered}/52")
    return "\n".join(lines)


def _parse_args(argv: list[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=DIST_NAME,
        description="Turn ASCII letters into styled Unicode letters, or styled letters back into ASCII.",
    )
    parser.add_argument("text", nargs="?", default=None, help="Text to convert")
    parser.add_argument(
        "--letter-type",
        choices=LETTER_TYPES,
        default=None,
        help=f"Letter type to convert into (default: {settings.default_letter_type})",
    )
    parser.add_argument(
        "--letter-style",
        choices=LETTER_STYLES,
        default=None,
        help=f"Letter style to convert into (default: {settings.default_letter_style})",
    )
    parser.add_argument("--random", action="store_true", help="Convert with a randomly chosen type and style")
    parser.add_argument(
        "--exclude-types",
        action="append",
        choices=LETTER_TYPES,
        default=None,
        metavar="TYPE",
        help="Letter type --random must not pick (repeat to exclude several)",
    )
    parser.add_argument(
        "--exclude-styles",
        action="append",
        choices=LETTER_STYLES,
        default=None,
        metavar="STYLE",
        help="Letter style --random must not pick (repeat to exclude several)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random (defaults to STYLED_TEXT_RANDOM_SEED)")
    parser.add_argument("--ascii", action="store_true", help="Turn styled letters back into ASCII letters")
    parser.add_argument("--list-styles", action="store_true", help="Show every type/style with a sample and its coverage")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    args = parser.parse_args(argv)

    style_options = args.letter_type or args.letter_style
    random_options = args.exclude_types or args.exclude_styles or args.seed is not None
    if args.ascii and (style_options or args.random or random_options):
        parser.error("--ascii cannot be combined with --letter-type, --letter-style or --random options")
    if args.random and style_options:
        parser.error("--random cannot be combined with --letter-type or --letter-style")
    if random_options and not args.random:
        parser.error("--exclude-types, --exclude-styles and --seed require --random")
    if args.text is None and not args.list_styles:
        parser.error("the following arguments are required: text")
    return args


def _build_request(args: argparse.Namespace, settings: Settings) -> ConversionRequest:
    if args.ascii:
        return ConversionRequest(text=args.text, direction="ascii")
    if args.random:
        return ConversionRequest(
            text=args.text,
            randomize=True,
            exclude_types=frozenset(args.exclude_types or ()),
            exclude_styles=frozenset(args.exclude_styles or ()),
        )
    return ConversionRequest(
        text=args.text,
        letter_type=args.letter_type or settings.default_letter_type,
        letter_style=args.letter_style or settings.default_letter_style,
    )


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = _parse_args(argv, settings)
    _configure_logging(settings, verbose=args.verbose)

    if args.list_styles:
        print(render_style_listing())
        return 0

    request = _build_request(args, settings)
    seed = args.seed if args.seed is not None else settings.random_seed
    try:
        result = convert(request, rng=build_selection_rng(seed))
    except EmptyCandidateSetError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if result.style_key:
        logger.info("Applied %s", result.style_key)
    else:
        detected = detect_style_keys(request.text)
        logger.info("Detected styles: %s", ", ".join(map(str, detected)) or "none")
    if result.text:
        print(result.text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
