from __future__ import annotations

import argparse

from nansi import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nansi",
        description="Run the commands listed in a NansiFile, in order.",
    )

    parser.add_argument(
        "nansi_file",
        help="Path to the NansiFile (.json, .yml/.yaml or .toml)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the items and their prerequisites without running anything",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser
