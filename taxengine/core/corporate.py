from __future__ import annotations

import logging
from decimal import Decimal

from taxengine.core.models import CCPCTaxResult, SmallBusinessDeduction
from taxengine.core.progressive import ZERO, to_decimal
from taxengine.core.rules import TaxRules

D = Decimal

logger = logging.getLogger("taxengine.corporate")

Amount = int | float | D


def sbd_limit(rules: TaxRules, passive_income: Amount, tax_year: int) -> D:
    """Business limit after the passive-income grind.

    Every dollar of passive income above the threshold removes
    ``grind_factor`` dollars of limit; the limit never goes below zero.
    """
    params = rules.table(tax_year).corporate
    passive = to_decimal(passive_income)
    if passive <= params.passive_threshold:
        return params.sbd_base_limit
    reduction = (passive - params.passive_threshold) * params.grind_factor
    return max(ZERO, params.sbd_base_limit - reduction)


def small_business_deduction(
    rules: TaxRules,
    active_business_income: Amount,
    tax_year: int,
    passive_income: Amount = 0,
) -> SmallBusinessDeduction:
    params = rules.table(tax_year).corporate
    limit = sbd_limit(rules, passive_income, tax_year)
    income = min(max(ZERO, to_decimal(active_business_income)), limit)
    return SmallBusinessDeduction(sbd_limit=limit, sbd_income=income, sbd_tax=income * params.sbd_rate)


def provincial_corporate_rate(rules: TaxRules, province: str, tax_year: int) -> D:
    params = rules.table(tax_year).corporate
    code = (province or "").upper()
    rate = params.provincial_rates.get(code)
    if rate is None:
        logger.warning(
            "No corporate rate for %s in %s; using %s rate",
            code or "<blank>",
            tax_year,
            params.default_province,
        )
        rate = params.provincial_rates[params.default_province]
    return rate


def calculate_ccpc_tax(
    rules: TaxRules,
    active_business_income: Amount,
    investment_income: Amount,
    province: str,
    tax_year: int,
    passive_income: Amount | None = None,
) -> CCPCTaxResult:
    """Corporate tax for a CCPC.

    Active business income up to the (ground) business limit is taxed at the
    small business rate and the excess at the general rate; the provincial
    rate applies to all active business income and investment income carries
    its own combined rate. The grind is driven by ``investment_income`` unless
    a separate ``passive_income`` figure is given.
    """
    params = rules.table(tax_year).corporate
    abi = max(ZERO, to_decimal(active_business_income))
    investment = max(ZERO, to_decimal(investment_income))
    passive = investment if passive_income is None else to_decimal(passive_income)

    sbd = small_business_deduction(rules, abi, tax_year, passive_income=passive)
    general_income = max(ZERO, abi - sbd.sbd_limit)
    general_tax = general_income * params.general_rate
    prov_tax = abi * provincial_corporate_rate(rules, province, tax_year)
    investment_tax = investment * params.investment_rate

    total = sbd.sbd_tax + general_tax + prov_tax + investment_tax
    total_income = abi + investment
    return CCPCTaxResult(
        active_business_income=abi,
        sbd_limit=sbd.sbd_limit,
        sbd_tax=sbd.sbd_tax,
        general_rate_tax=general_tax,
        provincial_tax=prov_tax,
        investment_tax=investment_tax,
        total_tax=total,
        effective_rate=total / total_income if total_income > ZERO else ZERO,
    )


__all__ = [
    "calculate_ccpc_tax",
    "provincial_corporate_rate",
    "sbd_limit",
    "small_business_deduction",
]
