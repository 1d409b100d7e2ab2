"""Tests for formcheck.result — the read-only result tree."""

import pytest

from formcheck.result import ValidationResult


@pytest.fixture
def mixed() -> ValidationResult:
    return ValidationResult(
        {
            "name": {"required": True, "not": True},
            "age": {"digits": False, "min": False},
            "date": {"date": True, "mindate": False},
        }
    )


class TestValidationResult:
    def test_equals_plain_dict(self, mixed: ValidationResult) -> None:
        assert mixed == {
            "name": {"required": True, "not": True},
            "age": {"digits": False, "min": False},
            "date": {"date": True, "mindate": False},
        }

    def test_mapping_access(self, mixed: ValidationResult) -> None:
        assert mixed["age"]["min"] is False
        assert list(mixed) == ["name", "age", "date"]
        assert len(mixed) == 3

    def test_read_only(self, mixed: ValidationResult) -> None:
        with pytest.raises(TypeError):
            mixed["name"]["required"] = False  # type: ignore[index]

    def test_detached_from_source(self) -> None:
        source = {"a": {"required": True}}
        result = ValidationResult(source)
        source["a"]["required"] = False
        assert result["a"]["required"] is True

    def test_is_valid(self, mixed: ValidationResult) -> None:
        assert mixed.is_valid is False
        assert ValidationResult({"a": {"required": True}}).is_valid is True

    def test_empty_is_valid(self) -> None:
        assert ValidationResult({}).is_valid is True

    def test_bool(self, mixed: ValidationResult) -> None:
        assert not mixed
        assert ValidationResult({"a": {"required": True}})

    def test_failures(self, mixed: ValidationResult) -> None:
        assert mixed.failures() == {"age": ["digits", "min"], "date": ["mindate"]}

    def test_to_dict(self, mixed: ValidationResult) -> None:
        plain = mixed.to_dict()
        assert type(plain) is dict
        assert type(plain["name"]) is dict
        assert plain["date"] == {"date": True, "mindate": False}

    def test_repr(self) -> None:
        assert repr(ValidationResult({"a": {"x": True}})) == "ValidationResult({'a': {'x': True}})"
