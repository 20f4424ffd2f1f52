from __future__ import annotations

from decimal import Decimal

from taxengine.core.progressive import TaxBracket
from taxengine.core.rules.tables import (
    CapitalCostParameters,
    CorporateParameters,
    CreditParameters,
    DividendParameters,
    DividendRates,
    JurisdictionTaxTable,
    PayrollParameters,
)

D = Decimal

# ------------------------------ personal -----------------------------
FEDERAL_BRACKETS_2025 = (
    TaxBracket(D("55867"),  D("0.15")),
    TaxBracket(D("111733"), D("0.205")),
    TaxBracket(D("173205"), D("0.26")),
    TaxBracket(D("246752"), D("0.29")),
    TaxBracket(None,        D("0.33")),
)

ON_BRACKETS_2025 = (
    TaxBracket(D("51446"),  D("0.0505")),
    TaxBracket(D("102894"), D("0.0915")),
    TaxBracket(D("150000"), D("0.1116")),
    TaxBracket(D("220000"), D("0.1216")),
    TaxBracket(None,        D("0.1316")),
)

FED_BPA_2025 = D("15705")
ON_BPA_2025 = D("11865")

CREDITS_2025 = CreditParameters(
    federal_credit_rate=D("0.15"),
    medical_income_fraction=D("0.03"),
    medical_threshold=D("2635"),
    donation_low_tier_limit=D("200"),
    donation_low_rate=D("0.15"),
    donation_high_rate=D("0.29"),
    first_time_donor_rate=D("0.25"),
    first_time_donor_cap=D("1000"),
)

DIVIDENDS_2025 = DividendParameters(
    eligible=DividendRates(gross_up=D("0.38"), federal_credit=D("0.2502")),
    non_eligible=DividendRates(gross_up=D("0.15"), federal_credit=D("0.0903")),
    provincial_credit={
        "ON": (D("0.10"), D("0.0295")),
    },
)

# ------------------------------ corporate ----------------------------
CORPORATE_2025 = CorporateParameters(
    sbd_base_limit=D("500000"),
    sbd_rate=D("0.09"),
    passive_threshold=D("50000"),
    grind_factor=D("5"),
    general_rate=D("0.15"),
    investment_rate=D("0.3867"),
    rdtoh_addition_rate=D("0.3067"),
    rdtoh_refund_rate=D("0.3833"),
    provincial_rates={
        "ON": D("0.035"),
        "BC": D("0.02"),
        "AB": D("0.02"),
    },
    default_province="ON",
)

# ------------------------------ payroll ------------------------------
PAYROLL_2025 = PayrollParameters(
    cpp_ympe=D("68500"),
    cpp_basic_exemption=D("3500"),
    cpp_rate=D("0.0595"),
    rrsp_rate=D("0.18"),
    rrsp_dollar_limit=D("31560"),
)

# ------------------------------ capital cost -------------------------
CAPITAL_COST_2025 = CapitalCostParameters(
    half_year_factor=D("0.5"),
    accelerated_factor=D("1.5"),
)


def build_table_2025() -> JurisdictionTaxTable:
    return JurisdictionTaxTable(
        tax_year=2025,
        federal=FEDERAL_BRACKETS_2025,
        provincial={"ON": ON_BRACKETS_2025},
        basic_personal_amounts={"federal": FED_BPA_2025, "ON": ON_BPA_2025},
        credits=CREDITS_2025,
        dividends=DIVIDENDS_2025,
        corporate=CORPORATE_2025,
        payroll=PAYROLL_2025,
        capital_cost=CAPITAL_COST_2025,
    )
