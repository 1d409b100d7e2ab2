"""Tests for formcheck.context — per-run context and the active-context ContextVar."""

import threading
from typing import Any

import pytest

from formcheck.config import ValidatorConfig
from formcheck.context import ValidationContext, context_var, get_context
from formcheck.errors import UnknownIndexError
from formcheck.methods import custom_method
from formcheck.validator import Validator


class TestValidationContext:
    def test_get_input(self) -> None:
        ctx = ValidationContext(inputs={"a": "1"})
        assert ctx.get_input("a") == "1"

    def test_get_missing_input(self) -> None:
        ctx = ValidationContext(inputs={})
        with pytest.raises(UnknownIndexError, match="'a'"):
            ctx.get_input("a")

    def test_snapshot_is_detached(self) -> None:
        inputs = {"a": "1"}
        ctx = ValidationContext.snapshot(inputs, {}, ValidatorConfig())
        inputs["a"] = "2"
        assert ctx.get_input("a") == "1"

    def test_snapshot_is_read_only(self) -> None:
        ctx = ValidationContext.snapshot({"a": "1"}, {}, ValidatorConfig())
        with pytest.raises(TypeError):
            ctx.inputs["a"] = "2"  # type: ignore[index]

    def test_for_field(self) -> None:
        ctx = ValidationContext(inputs={"a": "1"})
        field_ctx = ctx.for_field("a")
        assert field_ctx.current_field == "a"
        assert ctx.current_field is None
        assert field_ctx.inputs is ctx.inputs

    def test_frozen(self) -> None:
        ctx = ValidationContext(inputs={})
        with pytest.raises(AttributeError):
            ctx.current_field = "a"  # type: ignore[misc]

    def test_get_custom_method(self) -> None:
        method = custom_method("noop")(lambda value, rule, context: True)
        ctx = ValidationContext.snapshot({}, {"noop": method}, ValidatorConfig())
        assert ctx.get_custom_method("noop") is method
        with pytest.raises(UnknownIndexError):
            ctx.get_custom_method("other")


class TestActiveContext:
    def test_get_context_raises_outside_run(self) -> None:
        with pytest.raises(LookupError):
            get_context()

    def test_set_and_get(self) -> None:
        ctx = ValidationContext(inputs={})
        token = context_var.set(ctx)
        try:
            assert get_context() is ctx
        finally:
            context_var.reset(token)

    def test_visible_during_validate(self) -> None:
        seen: list[ValidationContext] = []

        @custom_method("capture")
        def capture(value: str, rule: Any, context: ValidationContext) -> bool:
            active = get_context()
            seen.append(active)
            return active.inputs is context.inputs

        validator = Validator()
        validator.register_custom_method(capture)
        validator.add_input({"a": "1"})
        validator.add_rules({"a": {"capture": True}})
        assert validator.validate() == {"a": {"capture": True}}
        assert len(seen) == 1
        with pytest.raises(LookupError):
            get_context()

    def test_reset_after_error(self) -> None:
        validator = Validator()
        validator.add_rules({"missing": {"required": True}})
        with pytest.raises(UnknownIndexError):
            validator.validate()
        with pytest.raises(LookupError):
            get_context()

    def test_concurrent_runs_are_isolated(self) -> None:
        barrier = threading.Barrier(2, timeout=5)
        outcomes: dict[str, bool] = {}

        @custom_method("isolated")
        def isolated(value: str, rule: Any, context: ValidationContext) -> bool:
            # Both runs are inside validate() at this point
            barrier.wait()
            return get_context().get_input("id") == value

        def worker(name: str) -> None:
            validator = Validator()
            validator.register_custom_method(isolated)
            validator.add_input({"id": name})
            validator.add_rules({"id": {"isolated": True}})
            outcomes[name] = validator.validate()["id"]["isolated"]

        threads = [threading.Thread(target=worker, args=(name,)) for name in ("first", "second")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert outcomes == {"first": True, "second": True}
