"""Tests for prompt input parsing."""

from __future__ import annotations

import pytest

from restaurant_billing.parsing import parse_int, parse_price, parse_text, parse_yes


@pytest.mark.parametrize(("raw", "expected"), [("3", 3), (" 12 ", 12), ("0", 0), ("-2", -2)])
def test_parse_int_accepts_integers(raw: str, expected: int) -> None:
    result = parse_int(raw)
    assert result.ok
    assert result.value == expected


@pytest.mark.parametrize("raw", ["", "  ", "abc", "1.5", "-"])
def test_parse_int_rejects_malformed(raw: str) -> None:
    result = parse_int(raw)
    assert not result.ok
    assert result.value is None
    assert result.error


@pytest.mark.parametrize(("raw", "expected"), [("99", 99.0), ("12.5", 12.5), ("0", 0.0)])
def test_parse_price_accepts_non_negative(raw: str, expected: float) -> None:
    assert parse_price(raw).value == expected


@pytest.mark.parametrize("raw", ["", "x", "-1", "nan", "inf", "1.2.3"])
def test_parse_price_rejects_invalid(raw: str) -> None:
    assert not parse_price(raw).ok


def test_parse_text_trims_and_requires_content() -> None:
    assert parse_text("  Masala Dosa ").value == "Masala Dosa"
    assert not parse_text("   ").ok


@pytest.mark.parametrize(("raw", "expected"), [("y", True), ("Y", True), (" y ", True), ("n", False), ("yes", False), ("", False)])
def test_parse_yes(raw: str, expected: bool) -> None:
    assert parse_yes(raw) is expected
