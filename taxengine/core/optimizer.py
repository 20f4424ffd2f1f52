from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum

from taxengine.core.corporate import calculate_ccpc_tax
from taxengine.core.credits import DividendType, dividend_gross_up, non_eligible_dividend_credit
from taxengine.core.models import CompensationScenario
from taxengine.core.payroll import cpp_contribution, cpp_max_pensionable_earnings
from taxengine.core.personal import calculate_personal_tax
from taxengine.core.progressive import ZERO, to_decimal
from taxengine.core.rrsp import rrsp_room
from taxengine.core.rules import TaxRules

D = Decimal

logger = logging.getLogger("taxengine.optimizer")

Amount = int | float | D


class CompensationStrategy(str, Enum):
    ALL_SALARY = "all-salary"
    ALL_DIVIDEND = "all-dividend"
    BALANCED_TO_CPP_MAX = "balanced-to-cpp-max"


def split_compensation(
    rules: TaxRules,
    total_compensation: Amount,
    strategy: CompensationStrategy | str,
    tax_year: int,
) -> tuple[D, D]:
    total = max(ZERO, to_decimal(total_compensation))
    strategy = CompensationStrategy(strategy)
    if strategy is CompensationStrategy.ALL_SALARY:
        return total, ZERO
    if strategy is CompensationStrategy.ALL_DIVIDEND:
        return ZERO, total
    salary = min(total, cpp_max_pensionable_earnings(rules, tax_year))
    return salary, total - salary


def evaluate_compensation(
    rules: TaxRules,
    salary: Amount,
    dividend: Amount,
    province: str,
    tax_year: int,
    strategy: CompensationStrategy | str | None = None,
) -> CompensationScenario:
    """Combined corporate, personal and CPP cost of one salary/dividend split.

    Salary is deductible to the corporation. The dividend share is first taxed
    as active business income in the corporation and the after-tax remainder
    is paid out as a non-eligible dividend, grossed up on the personal return
    and offset by the dividend tax credit.
    """
    salary_amt = max(ZERO, to_decimal(salary))
    dividend_pool = max(ZERO, to_decimal(dividend))

    corporate_tax = ZERO
    if dividend_pool > ZERO:
        corporate_tax = calculate_ccpc_tax(rules, dividend_pool, ZERO, province, tax_year).total_tax
    net_dividend = max(ZERO, dividend_pool - corporate_tax)

    grossed_up = dividend_gross_up(rules, net_dividend, DividendType.NON_ELIGIBLE, tax_year)
    personal = calculate_personal_tax(rules, salary_amt + grossed_up, province, tax_year)
    credit = non_eligible_dividend_credit(rules, net_dividend, province, tax_year) if net_dividend > ZERO else ZERO
    personal_tax = max(ZERO, personal.total_tax - credit)

    cpp = cpp_contribution(rules, salary_amt, tax_year)
    total_tax = corporate_tax + personal_tax + cpp
    total_comp = salary_amt + dividend_pool
    if strategy is None:
        label = "custom"
    else:
        label = CompensationStrategy(strategy).value

    return CompensationScenario(
        strategy=label,
        total_compensation=total_comp,
        salary=salary_amt,
        dividend=dividend_pool,
        corporate_tax=corporate_tax,
        personal_tax=personal_tax,
        cpp_contribution=cpp,
        total_tax=total_tax,
        effective_rate=total_tax / total_comp if total_comp > ZERO else ZERO,
        rrsp_room=rrsp_room(rules, salary_amt, tax_year),
    )


def optimize_compensation(
    rules: TaxRules,
    total_compensation: Amount,
    strategy: CompensationStrategy | str,
    province: str,
    tax_year: int,
) -> CompensationScenario:
    salary, dividend = split_compensation(rules, total_compensation, strategy, tax_year)
    scenario = evaluate_compensation(rules, salary, dividend, province, tax_year, strategy=strategy)
    logger.debug(
        "Compensation scenario %s: salary=%s dividend=%s total_tax=%s",
        scenario.strategy,
        salary,
        dividend,
        scenario.total_tax,
    )
    return scenario


def compare_strategies(
    rules: TaxRules,
    total_compensation: Amount,
    province: str,
    tax_year: int,
) -> dict[str, CompensationScenario]:
    return {
        strategy.value: optimize_compensation(rules, total_compensation, strategy, province, tax_year)
        for strategy in CompensationStrategy
    }


def best_strategy(
    rules: TaxRules,
    total_compensation: Amount,
    province: str,
    tax_year: int,
) -> CompensationScenario:
    scenarios = compare_strategies(rules, total_compensation, province, tax_year)
    return min(scenarios.values(), key=lambda s: s.total_tax)


__all__ = [
    "CompensationStrategy",
    "best_strategy",
    "compare_strategies",
    "evaluate_compensation",
    "optimize_compensation",
    "split_compensation",
]
