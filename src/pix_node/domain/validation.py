"""Declarative per-field validation rules."""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlsplit

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_URL_SCHEMES = {"http", "https", "ftp"}


class Rule(Protocol):
    """Constraint applied to a single prepared field value."""

    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        """Return True when the value satisfies the constraint."""


def is_blank(value: object) -> bool:
    """Return True for values a form treats as not filled in."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list | tuple | set | frozenset):
        return not value
    return False


@dataclass(frozen=True)
class Required:
    """Value must be present."""

    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        return not is_blank(value)


@dataclass(frozen=True)
class EmailShape:
    """Value must look like local@domain.tld."""

    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        return isinstance(value, str) and bool(_EMAIL_PATTERN.match(value.strip()))


@dataclass(frozen=True)
class MinLength:
    """String value must have at least ``length`` characters."""

    length: int
    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        return isinstance(value, str) and len(value) >= self.length


@dataclass(frozen=True)
class MatchesField:
    """Value must equal another field's value."""

    other: str
    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        return value == values.get(self.other)


@dataclass(frozen=True)
class OneOf:
    """Value must be one of the allowed choices."""

    choices: frozenset[str]
    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        return value in self.choices


@dataclass(frozen=True)
class WellFormedUrl:
    """Value must be an absolute URL with a host."""

    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        if not isinstance(value, str) or any(ch.isspace() for ch in value.strip()):
            return False
        try:
            parts = urlsplit(value.strip())
        except ValueError:
            return False
        host = parts.hostname or ""
        return parts.scheme in _URL_SCHEMES and (
            "." in host or host == "localhost"
        )


@dataclass(frozen=True)
class Numeric:
    """Value must be a real number."""

    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        return isinstance(value, int | float) and not isinstance(value, bool)


@dataclass(frozen=True)
class WholeNumber:
    """Numeric value must have no fractional part."""

    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return False
        return float(value).is_integer()


@dataclass(frozen=True)
class Minimum:
    """Numeric value must be at least ``bound``."""

    bound: float
    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        return isinstance(value, int | float) and value >= self.bound


@dataclass(frozen=True)
class MinItems:
    """List value must hold at least ``count`` entries."""

    count: int
    message: str

    def check(self, value: object, values: Mapping[str, object]) -> bool:
        return isinstance(value, list | tuple) and len(value) >= self.count


Schema = Mapping[str, Sequence[Rule]]


def validate(schema: Schema, values: Mapping[str, object]) -> dict[str, str]:
    """Run a schema against prepared values and return field errors.

    Each field reports at most one message: the first rule that fails.
    Rules other than ``Required`` are skipped for blank values, so optional
    fields are only checked when something was entered.
    """
    errors: dict[str, str] = {}
    for field_name, rules in schema.items():
        value = values.get(field_name)
        for rule in rules:
            if not isinstance(rule, Required) and is_blank(value):
                continue
            if not rule.check(value, values):
                errors[field_name] = rule.message
                break
    return errors
