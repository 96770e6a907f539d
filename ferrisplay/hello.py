"""Print a greeting."""

from __future__ import annotations

import argparse

GREETING = "Hello, world!"


def main(argv: list[str] | None = None) -> int:
    """Print the greeting."""
    parser = argparse.ArgumentParser(
        prog="ferrisplay-hello",
        description="Print a greeting.",
    )
    parser.parse_args(argv)
    print(GREETING)
    return 0