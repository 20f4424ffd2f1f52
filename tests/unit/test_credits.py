from decimal import Decimal as D

import pytest

from taxengine.core.credits import (
    DividendType,
    basic_personal_credit,
    charitable_donation_credit,
    dividend_gross_up,
    dividend_tax_credit,
    eligible_dividend_credit,
    medical_expense_claimable,
    medical_expense_credit,
    medical_expense_threshold,
    non_eligible_dividend_credit,
    total_donations_available,
)
from taxengine.core.errors import UnsupportedJurisdiction


def test_basic_personal_credit_ontario(rules):
    credit = basic_personal_credit(rules, "ON", 2025)
    assert credit == D("2355.75") + D("599.1825")
    assert round(credit) == 2955


def test_medical_threshold_is_lesser_of_fraction_and_cap(rules):
    assert medical_expense_threshold(rules, 50000, 2025) == D("1500")
    assert medical_expense_threshold(rules, 150000, 2025) == D("2635")
    assert medical_expense_threshold(rules, -100, 2025) == 0


def test_medical_claimable(rules):
    assert medical_expense_claimable(rules, 3000, 50000, 2025) == D("1500")
    assert medical_expense_claimable(rules, 4000, 150000, 2025) == D("1365")
    assert medical_expense_claimable(rules, 1000, 50000, 2025) == 0


def test_medical_credit(rules):
    assert medical_expense_credit(rules, 1000, 50000, 2025) == 0
    assert medical_expense_credit(rules, 5000, 50000, 2025) == D("525")
    assert medical_expense_credit(rules, 4000, 100000, 2025) == D("204.75")


@pytest.mark.parametrize(
    "donations,expected",
    [
        (0, D("0")),
        (-50, D("0")),
        (100, D("15")),
        (150, D("22.50")),
        (200, D("30")),
        (500, D("117")),
        (1000, D("262")),
    ],
)
def test_donation_credit_tiers(rules, donations, expected):
    assert charitable_donation_credit(rules, donations, 2025) == expected


def test_first_time_donor_super_credit(rules):
    assert charitable_donation_credit(rules, 500, 2025, first_time=True) == D("242")
    # super credit stops at the first 1000 dollars
    assert charitable_donation_credit(rules, 2000, 2025, first_time=True) == D("30") + D("522") + D("250")


def test_donation_carryforward_pool():
    assert total_donations_available(500, 2000) == D("2500")
    assert total_donations_available(500) == D("500")


def test_gross_up(rules):
    assert dividend_gross_up(rules, 10000, DividendType.ELIGIBLE, 2025) == D("13800")
    assert dividend_gross_up(rules, 10000, "non-eligible", 2025) == D("11500")


def test_eligible_dividend_credit(rules):
    credit = eligible_dividend_credit(rules, 10000, "ON", 2025)
    assert credit == D("3452.76") + D("1380")
    assert eligible_dividend_credit(rules, 0, "ON", 2025) == 0


def test_non_eligible_dividend_credit(rules):
    credit = non_eligible_dividend_credit(rules, 10000, "ON", 2025)
    assert credit == D("1377.70")
    assert credit == dividend_tax_credit(rules, 10000, DividendType.NON_ELIGIBLE, "on", 2025)


def test_dividend_credit_unknown_province(rules):
    with pytest.raises(UnsupportedJurisdiction):
        eligible_dividend_credit(rules, 10000, "BC", 2025)
