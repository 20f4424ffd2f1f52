from __future__ import annotations

from decimal import Decimal

from taxengine.core.progressive import ZERO, to_decimal
from taxengine.core.rules import TaxRules

D = Decimal

Amount = int | float | D


def rrsp_room(rules: TaxRules, earned_income: Amount, tax_year: int) -> D:
    params = rules.table(tax_year).payroll
    return min(max(ZERO, to_decimal(earned_income)) * params.rrsp_rate, params.rrsp_dollar_limit)


def rrsp_limit(
    rules: TaxRules,
    previous_year_earned_income: Amount,
    tax_year: int,
    pension_adjustment: Amount = 0,
    unused_room: Amount = 0,
) -> D:
    """Deduction limit: new room plus carried-forward room, less the pension adjustment."""
    new_room = rrsp_room(rules, previous_year_earned_income, tax_year)
    total = new_room + to_decimal(unused_room) - to_decimal(pension_adjustment)
    return max(ZERO, total)


def rrsp_carryforward(room: Amount, contribution: Amount) -> D:
    return max(ZERO, to_decimal(room) - max(ZERO, to_decimal(contribution)))


def taxable_income(total_income: Amount, rrsp_deduction: Amount = 0) -> D:
    return to_decimal(total_income) - max(ZERO, to_decimal(rrsp_deduction))


__all__ = ["rrsp_carryforward", "rrsp_limit", "rrsp_room", "taxable_income"]
