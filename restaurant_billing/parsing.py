"""Parsing of raw prompt input into typed values.

Each parser returns a ``ParseResult`` instead of raising, so prompts can keep
asking until the result is ``ok``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> ParseResult[T]:
        return cls(error=error)


Parser = Callable[[str], ParseResult]


def parse_int(raw: str) -> ParseResult[int]:
    text = raw.strip()
    if not text:
        return ParseResult.failure("A number is required.")
    try:
        return ParseResult.success(int(text))
    except ValueError:
        return ParseResult.failure("Invalid number. Try again.")


def parse_price(raw: str) -> ParseResult[float]:
    """Parse a non-negative, finite price."""
    text = raw.strip()
    if not text:
        return ParseResult.failure("A price is required.")
    try:
        value = float(text)
    except ValueError:
        return ParseResult.failure("Invalid number. Try again.")
    if not math.isfinite(value):
        return ParseResult.failure("Invalid number. Try again.")
    if value < 0:
        return ParseResult.failure("Price must not be negative.")
    return ParseResult.success(value)


def parse_text(raw: str) -> ParseResult[str]:
    text = raw.strip()
    if not text:
        return ParseResult.failure("Text is required.")
    return ParseResult.success(text)


def parse_yes(raw: str) -> bool:
    """Only ``y`` (any case) counts as yes."""
    return raw.strip().lower() == "y"
