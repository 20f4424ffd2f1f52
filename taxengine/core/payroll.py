from __future__ import annotations

from decimal import Decimal

from taxengine.core.progressive import ZERO, to_decimal
from taxengine.core.rules import TaxRules

D = Decimal


def cpp_contribution(rules: TaxRules, salary: int | float | D, tax_year: int) -> D:
    params = rules.table(tax_year).payroll
    pensionable = min(to_decimal(salary), params.cpp_ympe) - params.cpp_basic_exemption
    return max(ZERO, pensionable) * params.cpp_rate


def cpp_max_pensionable_earnings(rules: TaxRules, tax_year: int) -> D:
    return rules.table(tax_year).payroll.cpp_ympe


__all__ = ["cpp_contribution", "cpp_max_pensionable_earnings"]
