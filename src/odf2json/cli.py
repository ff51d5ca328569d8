"""Command line entry point: convert ODF files under given paths to one JSON file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from odf2json import __version__, encode_batch
from odf2json._constants import DEFAULT_ENCODING, DEFAULT_FILE_PATTERN
from odf2json._errors import DiscoveryError, InvalidFormatError
from odf2json.discovery import find_odf_files, read_odf_files
from odf2json.profile import available_profiles, get_profile

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FORMAT_ERROR = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="odf2json",
        description="Convert ODF game object files into a single JSON document keyed by file name.",
    )
    ap.add_argument("paths", nargs="+", help="ODF files or directories to search recursively")
    ap.add_argument("-o", "--output", help="Output JSON path (default: the profile's file name; '-' for stdout)")
    ap.add_argument("--profile", default="all", choices=available_profiles(),
                    help="File selection preset (default: all)")
    ap.add_argument("--pattern", default=DEFAULT_FILE_PATTERN, help="Glob used inside directories")
    ap.add_argument("--preserve-comments", action="store_true", help="Emit comments as @cN keys")
    ap.add_argument("--no-noise-filter", action="store_true", help="Keep lines with noise prefixes")
    ap.add_argument("--noise-prefix", action="append", dest="noise_prefixes", metavar="PREFIX",
                    help="Noise prefix to drop (repeatable, replaces the built-in list)")
    ap.add_argument("--skip-invalid", action="store_true",
                    help="Leave out files with malformed section headers instead of failing")
    ap.add_argument("-j", "--jobs", type=int, default=None, help="Encode files on N threads")
    ap.add_argument("--encoding", default=DEFAULT_ENCODING, help=f"Source file encoding (default: {DEFAULT_ENCODING})")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log per-file progress")
    ap.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    profile = get_profile(args.profile)
    filter_noise = profile.filter_noise and not args.no_noise_filter

    try:
        paths = find_odf_files(args.paths, pattern=args.pattern, profile=profile)
        files = read_odf_files(paths, encoding=args.encoding)
    except DiscoveryError as e:
        logger.error("%s", e.internal())
        return EXIT_USAGE_ERROR

    if not paths:
        logger.warning("no ODF files found for profile %s", profile.name)

    try:
        result = encode_batch(
            files,
            preserve_comments=args.preserve_comments,
            filter_noise=filter_noise,
            noise_prefixes=args.noise_prefixes,
            skip_invalid=args.skip_invalid,
            max_workers=args.jobs,
        )
    except InvalidFormatError as e:
        logger.error("%s", e.internal())
        return EXIT_FORMAT_ERROR

    output = args.output or profile.output_name
    if output == "-":
        sys.stdout.write(result.json)
        sys.stdout.write("\n")
    else:
        Path(output).write_text(result.json, encoding="utf-8")
        logger.info("wrote %d files to %s", len(result.files), output)

    if result.skipped:
        logger.warning("skipped %d malformed files: %s", len(result.skipped), ", ".join(result.skipped))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
