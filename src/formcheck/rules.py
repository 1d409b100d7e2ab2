"""Built-in validation rules.

Each rule is a plain function with the signature::

    def rule(value: str, rule: Any, context: ValidationContext) -> bool:
        '''Return True if value passes, False otherwise.'''

``rule`` is the parameter given in the rule set (``{"minlength": 3}``
passes ``3``). Every rule coerces its own parameter and raises
``InvalidTypeError`` when the parameter has the wrong shape.

``BUILTIN_RULES`` is the fixed name → function table the method registry
is built from. Names are the ones used in rule sets.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection
from typing import TYPE_CHECKING, Any, TypeAlias

from formcheck.dates import matches_format, parse_any
from formcheck.errors import InvalidTypeError

if TYPE_CHECKING:
    from datetime import datetime

    from formcheck.context import ValidationContext

BuiltinRule: TypeAlias = Callable[[str, Any, "ValidationContext"], bool]


def _int_param(rule: Any, name: str) -> int:
    try:
        return int(rule)
    except (TypeError, ValueError) as exc:
        msg = f"{name!r} expects an integer, got {rule!r}"
        raise InvalidTypeError(msg) from exc


def _float_param(rule: Any, name: str) -> float:
    try:
        return float(rule)
    except (TypeError, ValueError) as exc:
        msg = f"{name!r} expects a number, got {rule!r}"
        raise InvalidTypeError(msg) from exc


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def validate_required(value: str, rule: Any, context: ValidationContext) -> bool:
    """Field must be non-empty when the rule is true."""
    if rule:
        return value != ""
    return True


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def validate_minlength(value: str, rule: Any, context: ValidationContext) -> bool:
    """String must be at least *rule* characters (code points, not bytes)."""
    return len(value) >= _int_param(rule, "minlength")


def validate_maxlength(value: str, rule: Any, context: ValidationContext) -> bool:
    """String must be at most *rule* characters."""
    return len(value) <= _int_param(rule, "maxlength")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DIGITS_RE = re.compile(r"[0-9]+")


def _to_number(value: str) -> float | None:
    text = value.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def validate_min(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must be numeric and >= *rule*. ``"1e3"`` counts as 1000."""
    number = _to_number(value)
    return number is not None and number >= _float_param(rule, "min")


def validate_max(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must be numeric and <= *rule*."""
    number = _to_number(value)
    return number is not None and number <= _float_param(rule, "max")


def validate_digits(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must consist of ASCII digits only (no sign, no decimal point)."""
    if rule:
        return _DIGITS_RE.fullmatch(value) is not None
    return True


def validate_number(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must be an integer or decimal numeral, exponent allowed.

    Surrounding whitespace is ignored, as it is for ``min`` and ``max``.
    """
    if rule:
        return _to_number(value) is not None
    return True


# ---------------------------------------------------------------------------
# Pattern
# ---------------------------------------------------------------------------

_DELIMITED_RE = re.compile(
    r"/(?P<body>.*)/(?P<flags>[imsxu]*)",
    re.DOTALL,
)
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,  # str patterns are always unicode-aware
}


def compile_pattern(rule: Any, *, delimited: bool = True) -> re.Pattern[str]:
    """Compile a ``pattern`` parameter.

    Accepts an already compiled pattern, a plain expression, or (when
    *delimited* is true) an expression wrapped in slashes with
    trailing flags, e.g. ``"/^[a-z]+$/i"``.
    """
    if isinstance(rule, re.Pattern):
        return rule
    if not isinstance(rule, str):
        msg = f"'pattern' expects a regular expression, got {rule!r}"
        raise InvalidTypeError(msg)
    expression, flags = rule, 0
    if delimited:
        wrapped = _DELIMITED_RE.fullmatch(rule)
        if wrapped is not None:
            expression = wrapped.group("body")
            for flag in wrapped.group("flags"):
                flags |= _FLAG_MAP[flag]
    try:
        return re.compile(expression, flags)
    except re.error as exc:
        msg = f"'pattern' {rule!r} is not a valid regular expression: {exc}"
        raise InvalidTypeError(msg) from exc


def validate_pattern(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must contain a match for the expression (``re.search``)."""
    pattern = compile_pattern(rule, delimited=context.config.delimited_patterns)
    return pattern.search(value) is not None


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def validate_equal_to(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must equal the input of the field named by *rule*."""
    return value == context.get_input(rule)


def validate_not(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must differ from *rule*, or not be one of its members."""
    if isinstance(rule, str):
        return value != rule
    if not isinstance(rule, Collection):
        msg = f"'not' expects a string or a collection of strings, got {rule!r}"
        raise InvalidTypeError(msg)
    for forbidden in rule:
        if not isinstance(forbidden, str):
            msg = f"'not' must contain only strings, got {forbidden!r}"
            raise InvalidTypeError(msg)
    return value not in rule


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Basic email pattern — checks structure, not deliverability
_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}")

# Scheme + host, optional port, then path/query characters
_URL_RE = re.compile(
    r"(?:ht|f)tps?://[0-9a-zA-Z](?:[-.\w]*[0-9a-zA-Z])?(?::[0-9]+)?/?[\w\-.?,'/\\+&;%$#=~:@!*()]*"
)


def validate_email(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must look like an email address (basic format check)."""
    if rule:
        return _EMAIL_RE.fullmatch(value) is not None
    return True


def validate_url(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must be an http(s) or ftp(s) URL."""
    if rule:
        return _URL_RE.fullmatch(value) is not None
    return True


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def validate_date(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must match the date format *rule* exactly (see ``formcheck.dates``)."""
    if not isinstance(rule, str):
        msg = f"'date' expects a format string, got {rule!r}"
        raise InvalidTypeError(msg)
    return matches_format(value, rule)


def _boundary(rule: Any, name: str, context: ValidationContext) -> datetime:
    boundary = parse_any(str(rule), context.config.date_formats)
    if boundary is None:
        msg = f"{name!r} could not parse the date {rule!r}"
        raise InvalidTypeError(msg)
    return boundary


def validate_mindate(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must be a date on or after *rule*."""
    boundary = _boundary(rule, "mindate", context)
    moment = parse_any(value, context.config.date_formats)
    return moment is not None and moment >= boundary


def validate_maxdate(value: str, rule: Any, context: ValidationContext) -> bool:
    """Value must be a date on or before *rule*."""
    boundary = _boundary(rule, "maxdate", context)
    moment = parse_any(value, context.config.date_formats)
    return moment is not None and moment <= boundary


BUILTIN_RULES: dict[str, BuiltinRule] = {
    "required": validate_required,
    "minlength": validate_minlength,
    "maxlength": validate_maxlength,
    "min": validate_min,
    "max": validate_max,
    "digits": validate_digits,
    "number": validate_number,
    "pattern": validate_pattern,
    "equalTo": validate_equal_to,
    "not": validate_not,
    "email": validate_email,
    "url": validate_url,
    "date": validate_date,
    "mindate": validate_mindate,
    "maxdate": validate_maxdate,
}
