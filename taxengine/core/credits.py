from __future__ import annotations

from decimal import Decimal
from enum import Enum

from taxengine.core.errors import UnsupportedJurisdiction
from taxengine.core.progressive import ZERO, first_bracket_rate, to_decimal
from taxengine.core.rules import FEDERAL, DividendRates, TaxRules

D = Decimal

Amount = int | float | D


class DividendType(str, Enum):
    ELIGIBLE = "eligible"
    NON_ELIGIBLE = "non-eligible"


# ------------------------------ basic personal amount ----------------


def basic_personal_credit(rules: TaxRules, province: str, tax_year: int) -> D:
    table = rules.table(tax_year)
    federal = table.basic_personal_amount(FEDERAL) * table.credits.federal_credit_rate
    provincial = table.basic_personal_amount(province) * first_bracket_rate(
        table.provincial_brackets(province)
    )
    return federal + provincial


# ------------------------------ medical expenses ---------------------


def medical_expense_threshold(rules: TaxRules, net_income: Amount, tax_year: int) -> D:
    params = rules.table(tax_year).credits
    income = max(ZERO, to_decimal(net_income))
    return min(income * params.medical_income_fraction, params.medical_threshold)


def medical_expense_claimable(
    rules: TaxRules, expenses: Amount, net_income: Amount, tax_year: int
) -> D:
    threshold = medical_expense_threshold(rules, net_income, tax_year)
    return max(ZERO, to_decimal(expenses) - threshold)


def medical_expense_credit(
    rules: TaxRules, expenses: Amount, net_income: Amount, tax_year: int
) -> D:
    claimable = medical_expense_claimable(rules, expenses, net_income, tax_year)
    return claimable * rules.table(tax_year).credits.federal_credit_rate


# ------------------------------ donations ----------------------------


def charitable_donation_credit(
    rules: TaxRules, donations: Amount, tax_year: int, *, first_time: bool = False
) -> D:
    """Federal donation credit, two tiers plus the optional first-time donor top-up.

    The super credit is a one-time allowance on the first ``first_time_donor_cap``
    dollars and sits on top of the regular tiers.
    """
    amount = to_decimal(donations)
    if amount <= ZERO:
        return ZERO
    params = rules.table(tax_year).credits
    low = min(amount, params.donation_low_tier_limit) * params.donation_low_rate
    high = max(ZERO, amount - params.donation_low_tier_limit) * params.donation_high_rate
    credit = low + high
    if first_time:
        credit += min(amount, params.first_time_donor_cap) * params.first_time_donor_rate
    return credit


def total_donations_available(current_year: Amount, carried_forward: Amount = 0) -> D:
    return max(ZERO, to_decimal(current_year)) + max(ZERO, to_decimal(carried_forward))


# ------------------------------ dividends ----------------------------


def _dividend_rates(rules: TaxRules, kind: DividendType | str, tax_year: int) -> DividendRates:
    params = rules.table(tax_year).dividends
    return params.eligible if DividendType(kind) is DividendType.ELIGIBLE else params.non_eligible


def dividend_gross_up(
    rules: TaxRules, amount: Amount, kind: DividendType | str, tax_year: int
) -> D:
    rates = _dividend_rates(rules, kind, tax_year)
    return max(ZERO, to_decimal(amount)) * (1 + rates.gross_up)


def provincial_dividend_credit_rate(
    rules: TaxRules, province: str, kind: DividendType | str, tax_year: int
) -> D:
    code = (province or "").upper()
    try:
        eligible, non_eligible = rules.table(tax_year).dividends.provincial_credit[code]
    except KeyError as exc:
        raise UnsupportedJurisdiction(code, tax_year) from exc
    return eligible if DividendType(kind) is DividendType.ELIGIBLE else non_eligible


def dividend_tax_credit(
    rules: TaxRules,
    amount: Amount,
    kind: DividendType | str,
    province: str,
    tax_year: int,
) -> D:
    grossed_up = dividend_gross_up(rules, amount, kind, tax_year)
    federal = grossed_up * _dividend_rates(rules, kind, tax_year).federal_credit
    provincial = grossed_up * provincial_dividend_credit_rate(rules, province, kind, tax_year)
    return federal + provincial


def eligible_dividend_credit(rules: TaxRules, amount: Amount, province: str, tax_year: int) -> D:
    return dividend_tax_credit(rules, amount, DividendType.ELIGIBLE, province, tax_year)


def non_eligible_dividend_credit(rules: TaxRules, amount: Amount, province: str, tax_year: int) -> D:
    return dividend_tax_credit(rules, amount, DividendType.NON_ELIGIBLE, province, tax_year)


__all__ = [
    "DividendType",
    "basic_personal_credit",
    "charitable_donation_credit",
    "dividend_gross_up",
    "dividend_tax_credit",
    "eligible_dividend_credit",
    "medical_expense_claimable",
    "medical_expense_credit",
    "medical_expense_threshold",
    "non_eligible_dividend_credit",
    "provincial_dividend_credit_rate",
    "total_donations_available",
]
