"""Attribute validators: enumerated values and size formats."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Protocol

from line_builder.errors import ValidationError


class Validator(Protocol):
    def validate(self, value: Any, field: str | None = None) -> None: ...


def _token(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _fail(field: str | None, value: Any, expected: str) -> ValidationError:
    prefix = f"{field}: " if field else ""
    return ValidationError(f"{prefix}invalid value {value!r}. {expected}")


class EnumValidator:
    """Accepts only values from a fixed set.

    ``None`` always passes: validators check domain membership, never presence.
    """

    def __init__(self, *allowed_values: str) -> None:
        self.allowed_values: tuple[str, ...] = allowed_values

    def validate(self, value: Any, field: str | None = None) -> None:
        if value is None:
            return
        if _token(value) in self.allowed_values:
            return
        allowed = ", ".join(str(v) for v in self.allowed_values)
        raise _fail(field, value, f"Allowed values are: {allowed}")


class SizeVariant(str, Enum):
    PIXEL = "pixel"
    KEYWORD = "keyword"
    IMAGE = "image"
    PERCENTAGE = "percentage"


KEYWORD_SIZES = frozenset({"none", "xs", "sm", "md", "lg", "xl", "xxl"})
IMAGE_SIZES = frozenset(
    {"xxs", "xs", "sm", "md", "lg", "xl", "xxl", "3xl", "4xl", "5xl", "full"}
)

_PIXEL_RE = re.compile(r"^\d+px$")
_PERCENTAGE_RE = re.compile(r"^\d+%$")


class SizeValidator:
    """Accepts a value matching any of the configured size formats."""

    def __init__(self, *variants: SizeVariant | str) -> None:
        self.variants: tuple[SizeVariant, ...] = tuple(SizeVariant(v) for v in variants)

    def is_valid(self, value: Any) -> bool:
        token = _token(value)
        return any(self._matches(variant, token) for variant in self.variants)

    def validate(self, value: Any, field: str | None = None) -> None:
        if value is None or self.is_valid(value):
            return
        expected = ", ".join(v.value for v in self.variants)
        raise _fail(field, value, f"Expected one of: {expected}")

    @staticmethod
    def _matches(variant: SizeVariant, token: str) -> bool:
        if variant is SizeVariant.PIXEL:
            return bool(_PIXEL_RE.match(token))
        if variant is SizeVariant.PERCENTAGE:
            return bool(_PERCENTAGE_RE.match(token))
        if variant is SizeVariant.KEYWORD:
            return token in KEYWORD_SIZES
        return token in IMAGE_SIZES
