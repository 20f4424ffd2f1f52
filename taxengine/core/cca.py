from __future__ import annotations

from decimal import Decimal

from taxengine.core.progressive import ZERO, to_decimal
from taxengine.core.rules import TaxRules

D = Decimal


def capital_cost_allowance(
    rules: TaxRules,
    amount: int | float | D,
    rate: int | float | D,
    tax_year: int,
    *,
    first_year: bool,
    accelerated: bool = False,
) -> D:
    """CCA claim on a class balance.

    First-year additions get the half-year rule, or the accelerated
    investment incentive when ``accelerated`` is set; later years claim the
    full class rate on the undepreciated balance. Both first-year factors
    come from the year's table.
    """
    base = max(ZERO, to_decimal(amount)) * to_decimal(rate)
    if not first_year:
        return base
    params = rules.table(tax_year).capital_cost
    return base * (params.accelerated_factor if accelerated else params.half_year_factor)


__all__ = ["capital_cost_allowance"]
