from __future__ import annotations

import logging
from decimal import Decimal

from taxengine.core.models import TaxResult
from taxengine.core.progressive import (
    ZERO,
    bracket_rate,
    calculate_progressive_tax,
    first_bracket_rate,
    to_decimal,
)
from taxengine.core.rules import FEDERAL, TaxRules

D = Decimal

logger = logging.getLogger("taxengine.personal")

Amount = int | float | D


def federal_tax(rules: TaxRules, taxable_income: Amount, tax_year: int) -> D:
    return calculate_progressive_tax(taxable_income, rules.table(tax_year).federal)


def provincial_tax(rules: TaxRules, taxable_income: Amount, province: str, tax_year: int) -> D:
    brackets = rules.table(tax_year).provincial_brackets(province)
    return calculate_progressive_tax(taxable_income, brackets)


def marginal_rate(rules: TaxRules, income: Amount, province: str, tax_year: int) -> D:
    table = rules.table(tax_year)
    return bracket_rate(income, table.federal) + bracket_rate(income, table.provincial_brackets(province))


def calculate_personal_tax(
    rules: TaxRules,
    taxable_income: Amount,
    province: str,
    tax_year: int,
) -> TaxResult:
    """Net federal and provincial tax after the basic personal amount credits.

    Each credit is the jurisdiction's basic personal amount at its lowest
    bracket rate and can only reduce that jurisdiction's tax to zero.
    """
    table = rules.table(tax_year)
    income = to_decimal(taxable_income)
    provincial_brackets = table.provincial_brackets(province)

    gross_federal = federal_tax(rules, income, tax_year)
    gross_provincial = provincial_tax(rules, income, province, tax_year)

    federal_credit = table.basic_personal_amount(FEDERAL) * first_bracket_rate(table.federal)
    provincial_credit = table.basic_personal_amount(province) * first_bracket_rate(provincial_brackets)

    net_federal = max(ZERO, gross_federal - federal_credit)
    net_provincial = max(ZERO, gross_provincial - provincial_credit)
    total = net_federal + net_provincial

    effective = total / income if income > ZERO else ZERO
    logger.debug(
        "Personal tax computed",
        extra={"tax_year": tax_year, "province": province.upper(), "total_tax": str(total)},
    )
    return TaxResult(
        federal_tax=net_federal,
        provincial_tax=net_provincial,
        total_tax=total,
        effective_rate=effective,
        marginal_rate=marginal_rate(rules, income, province, tax_year),
    )


__all__ = [
    "calculate_personal_tax",
    "federal_tax",
    "marginal_rate",
    "provincial_tax",
]
