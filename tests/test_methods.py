"""Tests for formcheck.methods — the custom method protocol and decorator."""

from typing import Any

from formcheck.context import ValidationContext
from formcheck.methods import FunctionMethod, ValidationMethod, custom_method


class Shout:
    name = "shout"

    def validate(self, value: str, rule: Any, context: ValidationContext) -> bool:
        return value.isupper()


class TestValidationMethod:
    def test_class_satisfies_protocol(self) -> None:
        assert isinstance(Shout(), ValidationMethod)

    def test_plain_function_does_not(self) -> None:
        def check(value: str, rule: Any, context: ValidationContext) -> bool:
            return True

        assert not isinstance(check, ValidationMethod)


class TestCustomMethod:
    def test_decorator_wraps_function(self) -> None:
        @custom_method("even")
        def even(value: str, rule: Any, context: ValidationContext) -> bool:
            return int(value) % 2 == 0

        assert isinstance(even, FunctionMethod)
        assert isinstance(even, ValidationMethod)
        assert even.name == "even"
        ctx = ValidationContext(inputs={})
        assert even.validate("4", None, ctx) is True
        assert even.validate("3", None, ctx) is False

    def test_rule_and_context_are_passed_through(self) -> None:
        seen: list[tuple[str, Any, ValidationContext]] = []

        @custom_method("spy")
        def spy(value: str, rule: Any, context: ValidationContext) -> bool:
            seen.append((value, rule, context))
            return True

        ctx = ValidationContext(inputs={"a": "1"})
        spy.validate("1", {"x": 1}, ctx)
        assert seen == [("1", {"x": 1}, ctx)]
