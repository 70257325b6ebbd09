"""
Command-line interface for simple_version.

Provides small commands for inspecting and ordering versions:
- show: Format a version with optional build number and qualifier
- compare: Compare two versions
- sort: Sort versions in ascending (or descending) order
- pkg: Print an installed distribution's version
- config: Print the effective configuration

Usage:
    simple-version show 1.2.3 [--build N] [--release | --beta N | --alpha N]
    simple-version compare 1.2.3 1.10.0
    simple-version sort 1.10.0 1.2.3 1.9.9 [--reverse]
    simple-version pkg simple_version
    simple-version config

Versions given on the command line are MAJOR.MINOR.PATCH, parsed with the
configured numeric type (``--numeric-type`` overrides it).

Environment Variables:
    SIMPLE_VERSION_NUMERIC_TYPE: Default component width (default: u32)
    SIMPLE_VERSION_LOG_LEVEL: Logging level (default: WARNING)
"""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError

from simple_version.config import config, get_config_status
from simple_version.metadata import version_from_package, version_from_string
from simple_version.version import Version

logger = logging.getLogger(__name__)

_LOG_FORMATS = {
    "simple": "%(levelname)s %(message)s",
    "detailed": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
}


def configure_logging() -> None:
    """Configure root logging from ``config.logging``."""
    logging.basicConfig(
        level=getattr(logging, config.logging.level, logging.WARNING),
        format=_LOG_FORMATS[config.logging.format],
    )


def parse_cli_version(text: str, args: argparse.Namespace) -> Version:
    """
    Parse a MAJOR.MINOR.PATCH argument into an untagged Version.

    Uses ``--numeric-type`` when given, otherwise the configured default.

    Raises:
        ParseError: If the text is not three in-range numeric parts.
    """
    return version_from_string(text, numeric_type=args.numeric_type)


def cmd_show(args: argparse.Namespace) -> int:
    """
    Print a version formatted with the requested build and qualifier.

    Returns:
        Exit code (0 = success)
    """
    parsed = parse_cli_version(args.version, args)
    if args.build is not None:
        parsed.with_build(args.build)
    if args.release:
        parsed.release()
    elif args.beta is not None:
        parsed.beta(args.beta)
    elif args.alpha is not None:
        parsed.alpha(args.alpha)
    print(parsed)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """
    Print how two versions relate (<, == or >).

    Returns:
        Exit code (0 = success)
    """
    left = parse_cli_version(args.left, args)
    right = parse_cli_version(args.right, args)
    if left < right:
        op = "<"
    elif left > right:
        op = ">"
    else:
        op = "=="
    print(f"{left} {op} {right}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """
    Print the given versions in order, one per line.

    Returns:
        Exit code (0 = success)
    """
    versions = [parse_cli_version(text, args) for text in args.versions]
    for item in sorted(versions, reverse=args.reverse):
        print(item)
    return 0


def cmd_pkg(args: argparse.Namespace) -> int:
    """
    Print the version of an installed distribution.

    Returns:
        Exit code (0 = success, 1 = distribution not installed)
    """
    try:
        found = version_from_package(args.distribution, numeric_type=args.numeric_type)
    except PackageNotFoundError:
        print(f"Error: distribution {args.distribution!r} is not installed.", file=sys.stderr)
        return 1
    print(found)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """
    Print the effective configuration.

    Returns:
        Exit code (0 = success)
    """
    status = get_config_status()
    print("=" * 60)
    print("SIMPLE_VERSION CONFIGURATION")
    print("=" * 60)
    print(f"Config file:      {status['config_file_path'] or '(none)'}")
    if status["using_example"]:
        print("WARNING: Using example config (copy to simple_version.ini to customise)")
    print(f"Numeric type:     {status['numeric_type']}")
    print(f"Log level:        {status['log_level']}")
    print(f"Log format:       {status['log_format']}")
    print("=" * 60)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``simple-version`` command."""
    parser = argparse.ArgumentParser(
        prog="simple-version",
        description="Format, compare and sort MAJOR.MINOR.PATCH versions",
    )
    parser.add_argument(
        "--numeric-type",
        "-n",
        help="Component width, e.g. u16 or u32 (default: SIMPLE_VERSION_NUMERIC_TYPE or u32)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Format a version",
        description="Format a version, optionally with a build number and a qualifier.",
    )
    show_parser.add_argument("version", help="MAJOR.MINOR.PATCH")
    show_parser.add_argument("--build", "-b", type=int, help="Build number")
    stage = show_parser.add_mutually_exclusive_group()
    stage.add_argument("--release", action="store_true", help="Tag as a release")
    stage.add_argument("--beta", type=int, metavar="N", help="Tag as beta N (0 = plain beta)")
    stage.add_argument("--alpha", type=int, metavar="N", help="Tag as alpha N (0 = plain alpha)")
    show_parser.set_defaults(func=cmd_show)

    # compare command
    compare_parser = subparsers.add_parser("compare", help="Compare two versions")
    compare_parser.add_argument("left", help="MAJOR.MINOR.PATCH")
    compare_parser.add_argument("right", help="MAJOR.MINOR.PATCH")
    compare_parser.set_defaults(func=cmd_compare)

    # sort command
    sort_parser = subparsers.add_parser("sort", help="Sort versions")
    sort_parser.add_argument("versions", nargs="+", help="MAJOR.MINOR.PATCH values")
    sort_parser.add_argument("--reverse", "-r", action="store_true", help="Descending order")
    sort_parser.set_defaults(func=cmd_sort)

    # pkg command
    pkg_parser = subparsers.add_parser(
        "pkg",
        help="Show an installed distribution's version",
        description="Read a distribution's MAJOR.MINOR.PATCH version from its metadata.",
    )
    pkg_parser.add_argument("distribution", help="Distribution name, e.g. simple_version")
    pkg_parser.set_defaults(func=cmd_pkg)

    # config command
    config_parser = subparsers.add_parser("config", help="Show the effective configuration")
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging()

    try:
        return args.func(args)
    except ValueError as e:  # VersionError, or a negative qualifier number
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
