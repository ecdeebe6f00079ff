"""Print the given versions that satisfy every range, sorted ascending.

Exits with status 1 when no version matches and 2 on invalid input or
settings.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .builder import IncrementType
from .config import ConfigError, load_settings
from .errors import IncrementOverflowError, InvalidRangeError
from .options import SemanticOptions
from .ranges import VersionRange
from .report import setup_report
from .version import SemanticVersion

LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="npm-semver", description=__doc__)
    parser.add_argument("versions", nargs="+", metavar="VERSION", help="Versions to check")
    parser.add_argument(
        "-r",
        "--range",
        dest="ranges",
        action="append",
        default=[],
        metavar="RANGE",
        help="Only print versions satisfying this range (repeatable; all must match)",
    )
    parser.add_argument(
        "-i",
        "--increment",
        choices=[kind.value for kind in IncrementType],
        default=None,
        help="Increment the printed versions by this level",
    )
    parser.add_argument("--preid", default=None, help="Identifier for pre* increments")
    parser.add_argument("-l", "--loose", action="store_true", help="Accept loose version syntax")
    parser.add_argument(
        "-p",
        "--include-prerelease",
        action="store_true",
        help="Let pre-release versions match any range",
    )
    parser.add_argument("-f", "--format", default=None, help="Output format, e.g. 'M.m.p'")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON settings file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_report(2 + args.verbose)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    options = settings.options
    if args.loose:
        options |= SemanticOptions.LOOSE
    include_pre_releases = settings.include_pre_releases or args.include_prerelease

    ranges: list[VersionRange] = []
    for text in args.ranges:
        try:
            ranges.append(VersionRange.parse(text, options))
        except InvalidRangeError as exc:
            print(f"ERROR: Invalid range {text!r}: {exc}", file=sys.stderr)
            return 2

    matching: list[SemanticVersion] = []
    for text in args.versions:
        version = SemanticVersion.try_parse(text, options)
        if version is None:
            LOGGER.info("Ignoring invalid version %r", text)
            continue
        if all(item.is_satisfied_by(version, include_pre_releases) for item in ranges):
            matching.append(version)

    if not matching:
        return 1

    for version in sorted(matching):
        if args.increment:
            try:
                builder = version.to_builder().increment(args.increment, args.preid)
            except (IncrementOverflowError, ValueError) as exc:
                print(f"ERROR: Cannot increment {version}: {exc}", file=sys.stderr)
                return 2
            version = builder.clear_build_metadata().to_version()
        print(version.format(args.format))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
