from decimal import Decimal as D

import hypothesis.strategies as st
import pytest
from hypothesis import given

from taxengine.core.rdtoh import rdtoh_addition, rdtoh_refund, roll_rdtoh_account
from taxengine.core.rules import load_default_rules

RULES = load_default_rules()

amounts = st.decimals(min_value=0, max_value=10_000_000, places=2)


def test_addition(rules):
    assert rdtoh_addition(rules, 10000, 2025) == D("3067")
    assert rdtoh_addition(rules, 100000, 2025) == D("30670")
    assert rdtoh_addition(rules, 0, 2025) == 0


def test_refund_on_dividends(rules):
    assert rdtoh_refund(rules, 10000, 20000, 2025) == D("7666")


def test_refund_capped_at_balance(rules):
    assert rdtoh_refund(rules, 5000, 50000, 2025) == D("5000")
    assert rdtoh_refund(rules, 0, 50000, 2025) == 0


def test_roll_forward_ledger(rules):
    account = roll_rdtoh_account(rules, 5000, 10000, 20000, 2025)
    assert account.opening_balance == D("5000")
    assert account.addition == D("3067")
    assert account.refund == D("5000")
    assert account.closing_balance == D("3067")


def test_roll_forward_without_dividends(rules):
    account = roll_rdtoh_account(rules, 1000, 10000, 0, 2025)
    assert account.refund == 0
    assert account.closing_balance == D("4067")


@given(amounts, amounts)
def test_refund_never_exceeds_balance(balance, paid):
    assert rdtoh_refund(RULES, balance, paid, 2025) <= balance


@given(amounts, amounts, amounts)
def test_ledger_balances(opening, income, paid):
    account = roll_rdtoh_account(RULES, opening, income, paid, 2025)
    assert account.closing_balance == account.opening_balance + account.addition - account.refund
    assert account.closing_balance >= 0


def test_account_is_immutable(rules):
    account = roll_rdtoh_account(rules, 0, 100, 0, 2025)
    with pytest.raises(AttributeError):
        account.refund = D("1")  # type: ignore[misc]
