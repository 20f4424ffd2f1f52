from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

D = Decimal

_CENT = D("0.01")
ZERO = D("0")


@dataclass(frozen=True)
class TaxBracket:
    upper_limit: D | None
    rate: D

    @property
    def unbounded(self) -> bool:
        return self.upper_limit is None


def to_decimal(value: int | float | str | D) -> D:
    return value if isinstance(value, D) else D(str(value))


def round_cents(value: D) -> D:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def calculate_progressive_tax(income: int | float | D, brackets: Sequence[TaxBracket]) -> D:
    """Tax owing on ``income`` under an ascending bracket schedule.

    Each bracket taxes the slice between the previous limit and its own
    upper limit. The result is rounded half-up to cents; anything at or
    below zero owes nothing.
    """
    ti = to_decimal(income)
    if ti <= ZERO:
        return round_cents(ZERO)
    tax = ZERO
    previous = ZERO
    for bracket in brackets:
        upper = ti if bracket.upper_limit is None else min(ti, bracket.upper_limit)
        span = upper - previous
        if span <= ZERO:
            break
        tax += span * bracket.rate
        if bracket.upper_limit is None or ti <= bracket.upper_limit:
            break
        previous = bracket.upper_limit
    return round_cents(tax)


def bracket_rate(income: int | float | D, brackets: Sequence[TaxBracket]) -> D:
    ti = to_decimal(income)
    for bracket in brackets:
        if bracket.upper_limit is None or ti <= bracket.upper_limit:
            return bracket.rate
    return brackets[-1].rate


def first_bracket_rate(brackets: Sequence[TaxBracket]) -> D:
    return brackets[0].rate


__all__ = [
    "ZERO",
    "TaxBracket",
    "bracket_rate",
    "calculate_progressive_tax",
    "first_bracket_rate",
    "round_cents",
    "to_decimal",
]
