"""jsworkspace CLI: inspect the npm package a directory belongs to."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

EXIT_FOUND = 0
EXIT_BROKEN = 1
EXIT_MISSING = 2


def _print_summary(report) -> None:
    if report.status == "found":
        package = report.package
        print("[OK] Found npm package")
        print(f"  Manifest: {report.manifest_path}")
        print(f"  Name: {package.true_name}")
        print(f"  Version: {package.version if package.version is not None else '(none)'}")
        print(f"  Binaries: {', '.join(package.binaries) if package.binaries else '(none)'}")
        if package.build_command:
            print(f"  Build command: {' '.join(package.build_command)}")
    elif report.status == "broken":
        print("[BROKEN] Found a package.json but couldn't use it")
        print(f"  Manifest: {report.manifest_path}")
        print(f"  Error ({report.error_code}): {report.error}")
    else:
        print("[MISSING] No npm package found")
        print(f"  {report.error}")


def main():
    """Main CLI entry point for jsworkspace commands."""
    try:
        jsworkspace_version = get_version("jsworkspace")
    except PackageNotFoundError:
        jsworkspace_version = "dev"

    parser = argparse.ArgumentParser(
        prog="jsworkspace",
        description="jsworkspace: find an npm package and describe it for release tooling"
    )
    parser.add_argument("--version", action="version", version=f"jsworkspace {jsworkspace_version}")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every directory searched and normalization step."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    discover_parser = subparsers.add_parser(
        "discover",
        help="Find the package.json for a directory and print the normalized package"
    )
    discover_parser.add_argument(
        "start_dir",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory to start searching from (defaults to the current directory)"
    )
    discover_parser.add_argument(
        "--clamp-to",
        dest="clamp_to_dir",
        type=Path,
        default=None,
        help="Don't search above this directory (usually the git repository root)"
    )
    discover_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full discovery report as JSON"
    )
    discover_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Print nothing; only set the exit code"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "discover":
        from ._internal.canonical_json import canonical_dumps
        from .api import discover

        try:
            report = discover(args.start_dir, args.clamp_to_dir)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)

        if args.json:
            print(canonical_dumps(report.model_dump(mode="json"), indent=2))
        elif not args.quiet:
            _print_summary(report)
        elif report.status == "broken":
            print(f"Error: {report.error}", file=sys.stderr)

        if report.status == "found":
            sys.exit(EXIT_FOUND)
        sys.exit(EXIT_BROKEN if report.status == "broken" else EXIT_MISSING)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
