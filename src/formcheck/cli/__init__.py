"""Formcheck CLI — validate JSON input against JSON rule sets.

Entry point registered as ``formcheck`` in ``pyproject.toml``::

    [project.scripts]
    formcheck = "formcheck.cli:main"
"""

import argparse
import logging
import sys


def _add_method_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--method",
        action="append",
        default=[],
        metavar="MODULE:ATTR",
        help="Register a custom validation method (repeatable)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``formcheck`` command."""
    parser = argparse.ArgumentParser(
        prog="formcheck",
        description="Formcheck — field-based input validation.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- formcheck check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate input against rules")
    check_parser.add_argument("input", help="JSON file with field values ('-' for stdin)")
    check_parser.add_argument("rules", help="JSON file with rules per field ('-' for stdin)")
    _add_method_option(check_parser)

    # -- formcheck methods ------------------------------------------------
    methods_parser = subparsers.add_parser("methods", help="List validation methods")
    _add_method_option(methods_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from formcheck.cli._check import run_check

        run_check(args)
    elif args.command == "methods":
        from formcheck.cli._methods import run_methods

        run_methods(args)
