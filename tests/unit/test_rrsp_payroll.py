from dataclasses import replace
from decimal import Decimal as D

import pytest

from taxengine.core.cca import capital_cost_allowance
from taxengine.core.payroll import cpp_contribution, cpp_max_pensionable_earnings
from taxengine.core.rrsp import rrsp_carryforward, rrsp_limit, rrsp_room, taxable_income
from tests.fixtures.rules import FIXTURE_YEAR, make_fixture_table


def test_rrsp_room_is_eighteen_percent(rules):
    assert rrsp_room(rules, 75000, 2025) == D("13500")
    assert rrsp_room(rules, 200000, 2025) == D("31560")
    assert rrsp_room(rules, 0, 2025) == 0


@pytest.mark.parametrize(
    "income,pension_adjustment,unused,expected",
    [
        (50000, 0, 0, D("9000")),
        (200000, 0, 0, D("31560")),
        (50000, 0, 5000, D("14000")),
        (50000, 3000, 0, D("6000")),
        (50000, 15000, 0, D("0")),
    ],
)
def test_rrsp_limit(rules, income, pension_adjustment, unused, expected):
    assert rrsp_limit(rules, income, 2025, pension_adjustment=pension_adjustment, unused_room=unused) == expected


def test_rrsp_carryforward_and_taxable_income():
    assert rrsp_carryforward(15000, 8000) == D("7000")
    assert rrsp_carryforward(5000, 8000) == 0
    assert taxable_income(75000, 10000) == D("65000")
    assert taxable_income(75000) == D("75000")


def test_cpp_contribution(rules):
    assert cpp_max_pensionable_earnings(rules, 2025) == D("68500")
    assert cpp_contribution(rules, 100000, 2025) == D("3867.50")
    assert cpp_contribution(rules, 68500, 2025) == D("3867.50")
    assert cpp_contribution(rules, 50000, 2025) == D("2766.75")
    assert cpp_contribution(rules, 3000, 2025) == 0
    assert cpp_contribution(rules, 0, 2025) == 0


def test_cca_half_year_rule(rules):
    assert capital_cost_allowance(rules, 50000, D("0.30"), 2025, first_year=True) == D("7500")


def test_cca_accelerated_investment_incentive(rules):
    assert capital_cost_allowance(rules, 50000, D("0.30"), 2025, first_year=True, accelerated=True) == D("22500")


def test_cca_subsequent_years(rules):
    assert capital_cost_allowance(rules, 30000, 0.30, 2025, first_year=False) == D("9000")


def test_cca_factors_follow_the_tax_year(rules):
    table = make_fixture_table()
    table = replace(table, capital_cost=replace(table.capital_cost, accelerated_factor=D("1")))
    extended = rules.with_table(table)
    assert capital_cost_allowance(extended, 10000, D("0.2"), FIXTURE_YEAR, first_year=True, accelerated=True) == D("2000")
    assert capital_cost_allowance(extended, 10000, D("0.2"), 2025, first_year=True, accelerated=True) == D("3000")
