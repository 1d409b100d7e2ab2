"""Validator configuration.

ValidatorConfig is a frozen dataclass — immutable after creation, shared
safely between validators and the contexts they build.
"""

from dataclasses import dataclass

# Tried in order by ``mindate``/``maxdate``; the first format that parses wins.
# Dotted dates are day-first, slashed dates month-first.
DEFAULT_DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y/%m/%d",
    "%d.%m.%y",
    "%d.%m.%Y",
    "%d.%m.%y %H:%M",
    "%d.%m.%Y %H:%M",
    "%m/%d/%y",
    "%m/%d/%Y",
    "%d-%m-%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
)


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(date_formats=("%d/%m/%Y",))
    """

    # mindate / maxdate
    date_formats: tuple[str, ...] = DEFAULT_DATE_FORMATS

    # pattern — unwrap "/expr/flags" strings into a regex and flags; only a
    # slash delimits, so "@x@" stays a plain expression
    delimited_patterns: bool = True
