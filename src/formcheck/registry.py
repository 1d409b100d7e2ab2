"""Method registry — rule name → origin, plus the custom method table.

Built-in entries come from the static ``BUILTIN_RULES`` table and never
change. Custom entries are added and removed at runtime; a custom method
may not take a built-in name.

Invariant: every ``Origin.CUSTOM`` entry has exactly one checker in the
custom table, and the custom table holds nothing else.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from formcheck.errors import (
    IllegalNameError,
    InvalidTypeError,
    UnknownIndexError,
    UnknownMethodError,
)
from formcheck.rules import BUILTIN_RULES

if TYPE_CHECKING:
    from formcheck.methods import Checker, ValidationMethod

logger = logging.getLogger("formcheck.registry")


class Origin(Enum):
    """Where a validation method comes from."""

    BUILT_IN = "built-in"
    CUSTOM = "custom"


class MethodRegistry:
    """Name table for built-in and custom validation methods."""

    __slots__ = ("_custom", "_origins")

    def __init__(self) -> None:
        self._origins: dict[str, Origin] = dict.fromkeys(BUILTIN_RULES, Origin.BUILT_IN)
        self._custom: dict[str, ValidationMethod] = {}

    def register(self, method: ValidationMethod) -> None:
        """Add or replace a custom method.

        Raises ``IllegalNameError`` if the name belongs to a built-in rule.
        """
        name = getattr(method, "name", None)
        if not isinstance(name, str) or not name:
            msg = f"Custom method {method!r} must have a non-empty string name"
            raise InvalidTypeError(msg)
        if self._origins.get(name) is Origin.BUILT_IN:
            msg = f"{name!r} is the name of a built-in method and cannot be used for a custom method"
            raise IllegalNameError(msg)
        if name in self._custom:
            logger.debug("Replacing custom method %r", name)
        self._custom[name] = method
        self._origins[name] = Origin.CUSTOM

    def get_custom(self, name: str) -> ValidationMethod:
        try:
            return self._custom[name]
        except KeyError:
            msg = f"There is no custom method {name!r}"
            raise UnknownIndexError(msg) from None

    def custom_methods(self) -> dict[str, ValidationMethod]:
        return dict(self._custom)

    def remove(self, name: str | None = None) -> None:
        """Remove one custom method, or all of them.

        The registry entry goes with it, so the name becomes unknown again.
        """
        names = list(self._custom) if name is None else [name]
        for key in names:
            if self._custom.pop(key, None) is not None:
                del self._origins[key]
                logger.debug("Removed custom method %r", key)

    def origins(self) -> dict[str, Origin]:
        return dict(self._origins)

    def resolve(self, name: str) -> Checker:
        """Return the callable that implements rule *name*.

        Raises ``UnknownMethodError`` if *name* is not registered.
        """
        origin = self._origins.get(name)
        if origin is Origin.BUILT_IN:
            return BUILTIN_RULES[name]
        if origin is Origin.CUSTOM:
            return self._custom[name].validate
        msg = f"Unknown validation method {name!r}"
        raise UnknownMethodError(msg)

    def __contains__(self, name: str) -> bool:
        return name in self._origins

    def __len__(self) -> int:
        return len(self._origins)
