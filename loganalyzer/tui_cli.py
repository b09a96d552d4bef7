#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Command line entry point for the system log analyzer.

Usage:
    log-analyzer                              # Full TUI mode
    log-analyzer view --tab warnings          # Start on the Warnings tab
    log-analyzer view --snapshot --query mem  # One-shot text frame (no TUI)
"""

import argparse
import sys

from loganalyzer._version import __version__
from loganalyzer.debug_logger import get_logger
from loganalyzer.log_store import LogStore
from loganalyzer.models import Category, FilterCriteria
from loganalyzer.tui.formatting import Theme, initial_tab_from_settings
from loganalyzer.tui.renderer import render_plain_frame
from loganalyzer.tui.view_model import ViewModel

DEFAULT_SNAPSHOT_WIDTH = 80


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="log-analyzer",
        description="System Log Analyzer - browse categorized logs in the terminal",
    )
    parser.add_argument(
        "--version", action="version", version=f"log-analyzer {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    view_parser = subparsers.add_parser("view", help="Browse logs (default)")
    view_parser.add_argument(
        "--tab",
        "-t",
        choices=[category.value for category in Category],
        help="Tab to open first (default: settings or errors)",
    )
    view_parser.add_argument("--query", "-q", default="", help="Initial search text")
    view_parser.add_argument("--start", default="", help="Initial start date (YYYY-MM-DD)")
    view_parser.add_argument("--end", default="", help="Initial end date (YYYY-MM-DD)")
    view_parser.add_argument(
        "--snapshot", action="store_true", help="Print one rendered frame and exit (no TUI)"
    )
    view_parser.add_argument(
        "--width",
        "-w",
        type=int,
        default=DEFAULT_SNAPSHOT_WIDTH,
        help="Frame width for --snapshot",
    )
    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to view (TUI) when no subcommand given
    if not args.command:
        args = parser.parse_args(["view"])

    initial_tab = Category.parse(args.tab) or initial_tab_from_settings()
    criteria = FilterCriteria(query=args.query, start_date=args.start, end_date=args.end)
    theme = Theme.from_settings()
    store = LogStore.sample()

    if args.snapshot:
        model = ViewModel(store, width=args.width, initial_tab=initial_tab, criteria=criteria)
        print(render_plain_frame(model.state, theme, total=model.total_rows))
        return 0

    from loganalyzer.tui.app import run_app

    try:
        return_code = run_app(store=store, initial_tab=initial_tab, theme=theme, criteria=criteria)
    except Exception as e:
        get_logger().error("run_app", str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return return_code or 0


if __name__ == "__main__":
    sys.exit(main())
