"""Formcheck — field-based input validation.

Register input values and per-field rules, then validate them all in one
call and get back a pass/fail tree shaped like the rules.

Basic usage::

    from formcheck import Validator

    validator = Validator()
    validator.add_input({"password": "s3cret", "confirm": "s3cret"})
    validator.add_rules({"confirm": {"required": True, "equalTo": "password"}})
    result = validator.validate()
    # result == {"confirm": {"required": True, "equalTo": True}}

Custom methods::

    from formcheck import custom_method

    @custom_method("even")
    def even(value, rule, context):
        return int(value) % 2 == 0

    validator.register_custom_method(even)
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "BUILTIN_RULES",
    "FormcheckError",
    "IllegalNameError",
    "InvalidTypeError",
    "Origin",
    "UnknownIndexError",
    "UnknownMethodError",
    "ValidationContext",
    "ValidationMethod",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
    "custom_method",
    "get_context",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "BUILTIN_RULES": "formcheck.rules",
    "FormcheckError": "formcheck.errors",
    "IllegalNameError": "formcheck.errors",
    "InvalidTypeError": "formcheck.errors",
    "Origin": "formcheck.registry",
    "UnknownIndexError": "formcheck.errors",
    "UnknownMethodError": "formcheck.errors",
    "ValidationContext": "formcheck.context",
    "ValidationMethod": "formcheck.methods",
    "ValidationResult": "formcheck.result",
    "Validator": "formcheck.validator",
    "ValidatorConfig": "formcheck.config",
    "custom_method": "formcheck.methods",
    "get_context": "formcheck.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formcheck`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
