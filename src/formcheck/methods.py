"""Custom validation methods.

A custom method is any object with a ``name`` and a ``validate`` method::

    class FiveMoreThan:
        name = "fiveMoreThan"

        def validate(self, value: str, rule: Any, context: ValidationContext) -> bool:
            return int(value) == int(context.get_input(rule)) + 5

Plain functions with the same ``(value, rule, context)`` signature can be
turned into methods with the ``custom_method`` decorator::

    @custom_method("even")
    def even(value, rule, context):
        return int(value) % 2 == 0
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from formcheck.context import ValidationContext

Checker: TypeAlias = Callable[[str, Any, "ValidationContext"], bool]


@runtime_checkable
class ValidationMethod(Protocol):
    """Protocol for checkers registered with ``Validator.register_custom_method``."""

    @property
    def name(self) -> str: ...

    def validate(self, value: str, rule: Any, context: ValidationContext) -> bool: ...


@dataclass(frozen=True, slots=True)
class FunctionMethod:
    """A ``ValidationMethod`` backed by a plain function."""

    name: str
    func: Checker

    def validate(self, value: str, rule: Any, context: ValidationContext) -> bool:
        return self.func(value, rule, context)


def custom_method(name: str) -> Callable[[Checker], FunctionMethod]:
    """Decorator that wraps a checker function as a named ``ValidationMethod``."""

    def decorator(func: Checker) -> FunctionMethod:
        return FunctionMethod(name=name, func=func)

    return decorator
