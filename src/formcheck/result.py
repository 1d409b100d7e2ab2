"""Validation result — immutable field → rule → bool tree."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class ValidationResult(Mapping[str, Mapping[str, bool]]):
    """The outcome of one ``Validator.validate()`` run.

    Behaves as a read-only mapping with the same shape as the rule set,
    and compares equal to the equivalent plain dict::

        result = validator.validate()
        result["age"]["min"]      # True / False
        result == {"age": {"min": True}}

    The result is falsy when any rule failed, so you can write::

        if not result:
            return render_form(errors=result.failures())
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Mapping[str, bool]]) -> None:
        self._fields: Mapping[str, Mapping[str, bool]] = MappingProxyType(
            {name: MappingProxyType(dict(rules)) for name, rules in fields.items()}
        )

    def __getitem__(self, field: str) -> Mapping[str, bool]:
        return self._fields[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def is_valid(self) -> bool:
        """True if every rule on every field passed."""
        return all(all(rules.values()) for rules in self._fields.values())

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid

    def failures(self) -> dict[str, list[str]]:
        """Failed rule names per field, for fields with at least one failure."""
        return {
            name: [rule for rule, passed in rules.items() if not passed]
            for name, rules in self._fields.items()
            if not all(rules.values())
        }

    def to_dict(self) -> dict[str, dict[str, bool]]:
        return {name: dict(rules) for name, rules in self._fields.items()}

    def __repr__(self) -> str:
        return f"ValidationResult({self.to_dict()!r})"
