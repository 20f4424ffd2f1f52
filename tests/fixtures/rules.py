from decimal import Decimal

from taxengine.core.progressive import TaxBracket
from taxengine.core.rules import JurisdictionTaxTable, TaxRules
from taxengine.core.rules.y2025 import (
  CAPITAL_COST_2025,
  CORPORATE_2025,
  CREDITS_2025,
  DIVIDENDS_2025,
  PAYROLL_2025,
)

D = Decimal

FIXTURE_YEAR = 2030

FIXTURE_FEDERAL = (
  TaxBracket(D("50000"), D("0.10")),
  TaxBracket(None, D("0.20")),
)

FIXTURE_ZZ = (
  TaxBracket(D("40000"), D("0.05")),
  TaxBracket(None, D("0.10")),
)


def make_fixture_table(year: int = FIXTURE_YEAR) -> JurisdictionTaxTable:
  return JurisdictionTaxTable(
    tax_year=year,
    federal=FIXTURE_FEDERAL,
    provincial={"zz": FIXTURE_ZZ},
    basic_personal_amounts={"federal": D("10000"), "zz": D("8000")},
    credits=CREDITS_2025,
    dividends=DIVIDENDS_2025,
    corporate=CORPORATE_2025,
    payroll=PAYROLL_2025,
    capital_cost=CAPITAL_COST_2025,
  )


def make_fixture_rules() -> TaxRules:
  return TaxRules([make_fixture_table()])
