"""Custom method resolution — resolves ``"module:attribute"`` strings.

Shared utility used by ``formcheck check`` and ``formcheck methods`` to
load custom validation methods named on the command line.
"""

import importlib

from formcheck.methods import ValidationMethod


def resolve_method(import_string: str) -> ValidationMethod:
    """Resolve an import string to a custom validation method.

    Accepts ``"module:attribute"`` format. Classes are instantiated with
    no arguments; other callables that are not methods themselves are
    treated as factories and called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a validation method.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        msg = f"{import_string!r} must have the form 'module:attribute'"
        raise TypeError(msg)

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if isinstance(obj, type) or (callable(obj) and not isinstance(obj, ValidationMethod)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, ValidationMethod):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a validation method"
        raise TypeError(msg)

    return obj
