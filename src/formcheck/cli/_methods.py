"""``formcheck methods`` — list the registered validation methods."""

import argparse

from formcheck.cli._check import build_validator


def run_methods(args: argparse.Namespace) -> None:
    """Print ``name<TAB>origin`` for every known method."""
    validator = build_validator(args.method)
    for name, origin in validator.get_validation_methods().items():
        print(f"{name}\t{origin.value}")
