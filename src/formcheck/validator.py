"""The validator — input store, rule store, method registry, dispatch.

Usage::

    from formcheck import Validator

    validator = Validator()
    validator.add_input({"name": "Joe", "age": "39"})
    validator.add_rules({
        "name": {"required": True, "not": "Homer"},
        "age": {"digits": True, "min": 15},
    })
    result = validator.validate()
    # result == {"name": {"required": True, "not": True},
    #            "age": {"digits": True, "min": True}}

Rules accumulate: a second ``add_rules`` call merges into the rule maps
of the fields it names instead of replacing them. The same holds for
``add_input``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from formcheck.config import ValidatorConfig
from formcheck.context import ValidationContext, context_var
from formcheck.errors import InvalidTypeError, UnknownIndexError
from formcheck.methods import ValidationMethod
from formcheck.registry import MethodRegistry, Origin
from formcheck.result import ValidationResult

logger = logging.getLogger("formcheck.validator")


class Validator:
    """Field-based input validator.

    Holds the input to check, the rules per field, and the registry of
    validation methods. ``validate()`` runs every rule against its field
    and returns a ``ValidationResult`` shaped like the rule store.
    """

    __slots__ = ("_config", "_input", "_registry", "_rules")

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self._config = config or ValidatorConfig()
        self._input: dict[str, str] = {}
        self._rules: dict[str, dict[str, Any]] = {}
        self._registry = MethodRegistry()

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    # -- Input store --

    def add_input(self, values: Mapping[str, str]) -> None:
        """Store input values, overwriting existing keys."""
        for key, value in values.items():
            if not isinstance(value, str):
                msg = f"Input for {key!r} must be a string, got {type(value).__name__}"
                raise InvalidTypeError(msg)
        self._input.update(values)

    def get_input(self, key: str | None = None) -> str | dict[str, str]:
        """Return all stored input, or the value for *key*.

        Raises ``UnknownIndexError`` if *key* is not stored.
        """
        if key is None:
            return dict(self._input)
        try:
            return self._input[key]
        except KeyError:
            msg = f"Unknown input key {key!r}"
            raise UnknownIndexError(msg) from None

    def remove_input(self, key: str | None = None) -> None:
        """Remove one input value, or all of them."""
        if key is None:
            self._input.clear()
        else:
            self._input.pop(key, None)

    # -- Rule store --

    def add_rules(self, rules: Mapping[str, Mapping[str, Any]]) -> None:
        """Merge rule sets into the rule store.

        Each value must be a mapping of rule name to parameter. The whole
        argument is checked first, so a malformed call changes nothing.

        Raises ``InvalidTypeError`` on a malformed rule set.
        """
        for field, field_rules in rules.items():
            if not isinstance(field_rules, Mapping):
                msg = f"The rules for each field must be a mapping; {field!r} has {field_rules!r}"
                raise InvalidTypeError(msg)
        for field, field_rules in rules.items():
            self._rules.setdefault(field, {}).update(field_rules)

    def get_rules(self, field: str | None = None) -> dict[str, Any]:
        """Return the whole rule store, or the rules for *field*.

        Raises ``UnknownIndexError`` if *field* has no rules.
        """
        if field is None:
            return {name: dict(field_rules) for name, field_rules in self._rules.items()}
        try:
            return dict(self._rules[field])
        except KeyError:
            msg = f"There are no rules for {field!r}"
            raise UnknownIndexError(msg) from None

    def remove_rules(self, field: str | None = None) -> None:
        """Remove the rules for one field, or all rules."""
        if field is None:
            self._rules.clear()
        else:
            self._rules.pop(field, None)

    # -- Methods --

    def register_custom_method(self, method: ValidationMethod) -> None:
        """Register a custom validation method under ``method.name``.

        Replaces an earlier custom method of the same name. Raises
        ``IllegalNameError`` if the name belongs to a built-in rule.
        """
        self._registry.register(method)

    def get_custom_method(
        self, name: str | None = None
    ) -> ValidationMethod | dict[str, ValidationMethod]:
        """Return all custom methods, or the one called *name*.

        Raises ``UnknownIndexError`` if there is no such custom method.
        """
        if name is None:
            return self._registry.custom_methods()
        return self._registry.get_custom(name)

    def remove_custom_method(self, name: str | None = None) -> None:
        """Unregister one custom method, or all of them."""
        self._registry.remove(name)

    def get_validation_methods(self) -> dict[str, Origin]:
        """Return every known rule name with its origin."""
        return self._registry.origins()

    # -- Dispatch --

    def validate(self) -> ValidationResult:
        """Run every rule against its field.

        Returns a result with exactly the fields and rule names of the
        rule store. The first error aborts the run; nothing partial is
        returned.

        Raises:
            UnknownIndexError: A field has rules but no input, or a
                cross-field rule names a missing field.
            UnknownMethodError: A rule name is not registered.
        """
        context = ValidationContext.snapshot(
            self._input, self._registry.custom_methods(), self._config
        )
        logger.debug(
            "Validating %d field(s) against %d input value(s)",
            len(self._rules),
            len(self._input),
        )
        token = context_var.set(context)
        try:
            results: dict[str, dict[str, bool]] = {}
            for field, field_rules in self._rules.items():
                value = context.get_input(field)
                field_context = context.for_field(field)
                results[field] = {
                    name: bool(self._registry.resolve(name)(value, rule, field_context))
                    for name, rule in field_rules.items()
                }
        finally:
            context_var.reset(token)

        result = ValidationResult(results)
        if not result:
            logger.debug("Validation failed: %r", result.failures())
        return result
