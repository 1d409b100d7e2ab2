"""Formcheck exception hierarchy.

Shared across the validator, the method registry and the built-in rules
so every module raises and catches the same types.
"""


class FormcheckError(Exception):
    """Base for all formcheck-specific errors."""


class UnknownIndexError(FormcheckError, LookupError):
    """Raised when a key is missing from the input, rule or method store.

    Also raised during ``validate()`` when a field has rules but no input,
    and by ``equalTo`` when the referenced field does not exist.
    """


class UnknownMethodError(FormcheckError, LookupError):
    """Raised at dispatch time when a rule name is not registered."""


class InvalidTypeError(FormcheckError, TypeError):
    """Raised when a rule set, input value or rule parameter has the wrong shape."""


class IllegalNameError(FormcheckError, ValueError):
    """Raised when a custom method tries to take the name of a built-in rule."""
