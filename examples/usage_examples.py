#!/usr/bin/env python3
"""
Example script showing how to use crate-version-check.
"""

import sys

from crate_version_check import (
    QueryError,
    StatusKind,
    get,
    output,
    output_to_writer,
    query,
)


def example_query():
    """Example: Handle the comparison yourself."""
    print("="*60)
    print("Example 1: Query")
    print("="*60)

    try:
        status = query("papyrus", "0.3.1")
    except QueryError as e:
        print(f"Query failed: {e}")
        return

    if status.kind is StatusKind.BEHIND:
        print(f"papyrus is behind the version on crates.io {status.version}")
    elif status.kind is StatusKind.EQUAL:
        print(f"papyrus is equal to the version on crates.io {status.version}")
    else:
        print(f"papyrus is ahead of the version on crates.io {status.version}")


def example_get():
    """Example: Just fetch the latest version."""
    print("\n" + "="*60)
    print("Example 2: Latest version")
    print("="*60)

    version = get("serde")
    print(f"serde {version} (major={version.major}, pre-release={version.pre_release or 'none'})")


def example_output():
    """Example: Let the library render the status."""
    print("\n" + "="*60)
    print("Example 3: Rendered output")
    print("="*60)

    output("papyrus", "0.3.1")
    output_to_writer("papyrus", "0.3.1", sys.stderr)


if __name__ == "__main__":
    print("Crate Version Check - Example Usage")
    print("="*60)
    print("\nNOTE: These examples require network access to crates.io.")

    try:
        example_query()
        example_get()
        example_output()
    except QueryError as e:
        print(f"\nError running examples: {e}", file=sys.stderr)
        sys.exit(1)
