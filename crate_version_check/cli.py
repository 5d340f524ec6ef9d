"""
Command-line interface for the crate version check.
"""

import argparse
import logging
import sys

from .client import DEFAULT_REGISTRY_URL, DEFAULT_TIMEOUT, RegistryClient
from .errors import QueryError
from .pipeline import VersionQuery
from .reporting import output, output_to_writer, render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check whether a crate version is behind the one published on crates.io"
    )

    parser.add_argument("package", help="Name of the crate to look up")
    parser.add_argument("current_version", help="Version currently in use (MAJOR.MINOR.PATCH)")

    parser.add_argument(
        "--registry-url",
        default=DEFAULT_REGISTRY_URL,
        help=f"Base URL of the registry. Default: {DEFAULT_REGISTRY_URL}"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Request timeout in seconds. Default: {DEFAULT_TIMEOUT}"
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Write a single uncoloured line to stdout"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 when the query fails and 2 when the crate is behind"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.timeout <= 0:
        print("Error: --timeout must be positive", file=sys.stderr)
        return 1

    with RegistryClient(base_url=args.registry_url, timeout=args.timeout) as client:
        pipeline = VersionQuery(client)

        if not args.strict:
            if args.plain:
                output_to_writer(args.package, args.current_version, sys.stdout, pipeline=pipeline)
            else:
                output(args.package, args.current_version, pipeline=pipeline)
            return 0

        try:
            status = pipeline.query(args.package, args.current_version)
        except QueryError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(render(args.package, args.current_version, status).text)
    return 2 if status.is_behind else 0


if __name__ == "__main__":
    sys.exit(main())
