"""Run-scoped validation context.

Provides:
- ``ValidationContext``: an immutable snapshot handed to every checker.
- ``context_var``: the context of the run in progress for this task/thread.

The validator builds one context per ``validate()`` call, passes it to
each checker explicitly, and publishes it on ``context_var`` until the
run ends. Checkers that only need the value and parameter can ignore it;
cross-field checkers read sibling input through it.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local otherwise.
    Two validators running at once never see each other's context.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from formcheck.config import ValidatorConfig
from formcheck.errors import UnknownIndexError

if TYPE_CHECKING:
    from formcheck.methods import ValidationMethod


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Everything a checker might need. Built once per run.

    ``current_field`` names the field whose rules are being evaluated; it is
    ``None`` on the run-level context and set on the per-field copies
    returned by ``for_field()``.
    """

    inputs: Mapping[str, str]
    custom_methods: Mapping[str, ValidationMethod] = field(
        default_factory=lambda: MappingProxyType({})
    )
    config: ValidatorConfig = field(default_factory=ValidatorConfig)
    current_field: str | None = None

    @classmethod
    def snapshot(
        cls,
        inputs: Mapping[str, str],
        custom_methods: Mapping[str, ValidationMethod],
        config: ValidatorConfig,
    ) -> ValidationContext:
        """Copy the stores into read-only views so checkers cannot mutate them."""
        return cls(
            inputs=MappingProxyType(dict(inputs)),
            custom_methods=MappingProxyType(dict(custom_methods)),
            config=config,
        )

    def for_field(self, name: str) -> ValidationContext:
        return replace(self, current_field=name)

    def get_input(self, key: str) -> str:
        """Return the value of another field.

        Raises ``UnknownIndexError`` if the field is not in the input.
        """
        try:
            return self.inputs[key]
        except KeyError:
            msg = f"Unknown input field {key!r}"
            raise UnknownIndexError(msg) from None

    def get_custom_method(self, name: str) -> ValidationMethod:
        try:
            return self.custom_methods[name]
        except KeyError:
            msg = f"There is no custom method {name!r}"
            raise UnknownIndexError(msg) from None


context_var: ContextVar[ValidationContext] = ContextVar("formcheck_context")
"""The context of the run in progress. Set by ``Validator.validate()``."""


def get_context() -> ValidationContext:
    """Return the context of the validation run in progress.

    Raises ``LookupError`` if called outside a ``validate()`` call.
    """
    return context_var.get()
