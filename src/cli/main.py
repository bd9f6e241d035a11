"""Molymod DMS CLI entry points.

This module exposes the ``mmod-dms-info`` command.
It maps argparse options onto SDK reads and prints the results.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Sequence

from cli.formatting import format_matrix, format_provenance_record, format_version
from core.config import DmsConfig
from core.errors import DmsError
from core.logging_config import configure_logging
from core.types import DmsInfo
from dms.dms_file import read_dms_info


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="mmod-dms-info",
        description="Print version, global cell, and provenance of a DMS file",
    )
    parser.add_argument("dms_path", help="Path to a DMS file")
    parser.add_argument(
        "--must-exist",
        action="store_true",
        help="Fail instead of creating an empty store when the file is missing",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Molymod DMS CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.must_exist)
        configure_logging(config.log_level)
        info = read_dms_info(args.dms_path, config)
    except DmsError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(render_dms_info(info))
    return 0


def render_dms_info(info: DmsInfo) -> str:
    """Render every section printed by the info command.

    Args:
        info: Values read from one DMS file.

    Returns:
        Multi-line report without a trailing newline.
    """
    lines = [
        format_version(info.version),
        "global cell:",
        format_matrix(info.global_cell.matrix),
        "provenance:",
    ]
    lines.extend(format_provenance_record(record) for record in info.provenance)
    return "\n".join(lines)


def _build_config(must_exist: bool) -> DmsConfig:
    """Build config with optional strict-open override.

    Args:
        must_exist: Whether a missing file should fail.

    Returns:
        Runtime configuration.
    """
    config = DmsConfig.from_env()
    if must_exist:
        config = replace(config, create_if_missing=False)
    return config
