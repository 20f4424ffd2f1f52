from __future__ import annotations

from decimal import Decimal

from taxengine.core.models import RDTOHAccount
from taxengine.core.progressive import ZERO, to_decimal
from taxengine.core.rules import TaxRules

D = Decimal

Amount = int | float | D


def rdtoh_addition(rules: TaxRules, investment_income: Amount, tax_year: int) -> D:
    rate = rules.table(tax_year).corporate.rdtoh_addition_rate
    return max(ZERO, to_decimal(investment_income)) * rate


def rdtoh_refund(rules: TaxRules, balance: Amount, dividends_paid: Amount, tax_year: int) -> D:
    # the refund can never exceed what is on hand
    rate = rules.table(tax_year).corporate.rdtoh_refund_rate
    available = max(ZERO, to_decimal(balance))
    return min(available, max(ZERO, to_decimal(dividends_paid)) * rate)


def roll_rdtoh_account(
    rules: TaxRules,
    opening_balance: Amount,
    investment_income: Amount,
    dividends_paid: Amount,
    tax_year: int,
) -> RDTOHAccount:
    """One year of the RDTOH ledger.

    Dividends paid in the year draw on the opening balance only; the year's
    addition is available from the following year.
    """
    opening = max(ZERO, to_decimal(opening_balance))
    addition = rdtoh_addition(rules, investment_income, tax_year)
    refund = rdtoh_refund(rules, opening, dividends_paid, tax_year)
    return RDTOHAccount(
        opening_balance=opening,
        addition=addition,
        refund=refund,
        closing_balance=opening + addition - refund,
    )


__all__ = ["rdtoh_addition", "rdtoh_refund", "roll_rdtoh_account"]
