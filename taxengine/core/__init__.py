from __future__ import annotations

from taxengine.core.cca import capital_cost_allowance
from taxengine.core.corporate import (
    calculate_ccpc_tax,
    provincial_corporate_rate,
    sbd_limit,
    small_business_deduction,
)
from taxengine.core.credits import (
    DividendType,
    basic_personal_credit,
    charitable_donation_credit,
    dividend_gross_up,
    dividend_tax_credit,
    eligible_dividend_credit,
    medical_expense_claimable,
    medical_expense_credit,
    non_eligible_dividend_credit,
    total_donations_available,
)
from taxengine.core.errors import (
    InvalidBracketSchedule,
    TaxEngineError,
    UnsupportedJurisdiction,
    UnsupportedTaxYear,
)
from taxengine.core.models import (
    CCPCTaxResult,
    CompensationScenario,
    RDTOHAccount,
    SmallBusinessDeduction,
    TaxResult,
)
from taxengine.core.optimizer import (
    CompensationStrategy,
    best_strategy,
    compare_strategies,
    evaluate_compensation,
    optimize_compensation,
    split_compensation,
)
from taxengine.core.payroll import cpp_contribution
from taxengine.core.personal import calculate_personal_tax, federal_tax, marginal_rate, provincial_tax
from taxengine.core.progressive import TaxBracket, bracket_rate, calculate_progressive_tax
from taxengine.core.rdtoh import rdtoh_addition, rdtoh_refund, roll_rdtoh_account
from taxengine.core.rrsp import rrsp_carryforward, rrsp_limit, rrsp_room, taxable_income
from taxengine.core.rules import JurisdictionTaxTable, TaxRules, load_default_rules

__all__ = [
    "CCPCTaxResult",
    "CompensationScenario",
    "CompensationStrategy",
    "DividendType",
    "InvalidBracketSchedule",
    "JurisdictionTaxTable",
    "RDTOHAccount",
    "SmallBusinessDeduction",
    "TaxBracket",
    "TaxEngineError",
    "TaxResult",
    "TaxRules",
    "UnsupportedJurisdiction",
    "UnsupportedTaxYear",
    "basic_personal_credit",
    "best_strategy",
    "bracket_rate",
    "calculate_ccpc_tax",
    "calculate_personal_tax",
    "calculate_progressive_tax",
    "capital_cost_allowance",
    "charitable_donation_credit",
    "compare_strategies",
    "cpp_contribution",
    "dividend_gross_up",
    "dividend_tax_credit",
    "eligible_dividend_credit",
    "evaluate_compensation",
    "federal_tax",
    "load_default_rules",
    "marginal_rate",
    "medical_expense_claimable",
    "medical_expense_credit",
    "non_eligible_dividend_credit",
    "optimize_compensation",
    "provincial_corporate_rate",
    "provincial_tax",
    "rdtoh_addition",
    "rdtoh_refund",
    "roll_rdtoh_account",
    "rrsp_carryforward",
    "rrsp_limit",
    "rrsp_room",
    "sbd_limit",
    "small_business_deduction",
    "split_compensation",
    "taxable_income",
    "total_donations_available",
]
