"""``formcheck check`` — validate a JSON input file against JSON rules.

Prints the result tree as JSON to stdout. Exits with code 1 if any rule
failed and 2 if the input, rules or custom methods could not be used.
"""

import argparse
import json
import logging
import sys
from typing import Any, NoReturn

from formcheck.cli._resolve import resolve_method
from formcheck.errors import FormcheckError
from formcheck.validator import Validator

logger = logging.getLogger("formcheck.cli")


def _fail(exc: BaseException) -> NoReturn:
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(2) from exc


def _load_json(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def build_validator(import_strings: list[str]) -> Validator:
    """Create a validator with the custom methods named by *import_strings*."""
    validator = Validator()
    for import_string in import_strings:
        try:
            method = resolve_method(import_string)
            validator.register_custom_method(method)
        except (ImportError, AttributeError, TypeError, ValueError, FormcheckError) as exc:
            _fail(exc)
        else:
            logger.debug("Registered custom method %r from %s", method.name, import_string)
    return validator


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.input`` against ``args.rules``."""
    if args.input == "-" and args.rules == "-":
        _fail(ValueError("only one of INPUT and RULES can be read from stdin"))

    validator = build_validator(args.method)
    try:
        values = _load_json(args.input)
        rules = _load_json(args.rules)
        if not isinstance(values, dict) or not isinstance(rules, dict):
            msg = "INPUT and RULES must both contain a JSON object"
            raise TypeError(msg)
        validator.add_input(values)
        validator.add_rules(rules)
        result = validator.validate()
    except (OSError, ValueError, TypeError, FormcheckError) as exc:
        _fail(exc)

    print(json.dumps(result.to_dict(), indent=2))
    if not result:
        raise SystemExit(1)
