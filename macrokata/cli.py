"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

from .check import check_all
from .goal import goal
from .testing import BuildFailed, run_test
from .update_diff import update_diff

VERSION = "0.3.1"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="macrokata",
        description="MacroKata is a set of exercises to learn how to use macros well.",
    )
    parser.add_argument("--version", action="version", version=f"macrokata {VERSION}")
    parser.add_argument(
        "--root", default=None, help="Project directory holding the exercises."
    )
    commands = parser.add_subparsers(
        dest="command", required=True, metavar="COMMAND",
        help="Choose what MacroKata does.",
    )
    test = commands.add_parser("test", help="Compare your expansion with the solution.")
    test.add_argument("exercise", help="The name of the exercise to run.")
    goal_cmd = commands.add_parser("goal", help="Show the expected expansion.")
    goal_cmd.add_argument("exercise", help="The name of the exercise to run.")
    update = commands.add_parser("update-diff", help="Record the solution diff.")
    update.add_argument("exercise", help="The name of the exercise to create a diff for.")
    commands.add_parser("check-all", help="Check every exercise.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.command == "test":
            run_test(args.exercise, args.root)
        elif args.command == "goal":
            goal(args.exercise, args.root)
        elif args.command == "update-diff":
            update_diff(args.exercise, args.root)
        elif args.command == "check-all":
            return 0 if check_all(args.root) else 1
    except (BuildFailed, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())