from __future__ import annotations

from importlib import import_module
from typing import Callable, Tuple

from taxengine.core.rules.tables import (
    FEDERAL,
    CapitalCostParameters,
    CorporateParameters,
    CreditParameters,
    DividendParameters,
    DividendRates,
    JurisdictionTaxTable,
    PayrollParameters,
    TaxRules,
    validate_brackets,
)

# (tax year, data module) pairs shipped with the engine
_YEAR_MODULES: Tuple[Tuple[int, str], ...] = (
    (2025, "y2025"),
)


def _builder(year: int, module: str) -> Callable[[], JurisdictionTaxTable]:
    return getattr(import_module(f"{__name__}.{module}"), f"build_table_{year}")


def load_default_rules() -> TaxRules:
    return TaxRules(_builder(year, module)() for year, module in _YEAR_MODULES)


__all__ = [
    "FEDERAL",
    "CapitalCostParameters",
    "CorporateParameters",
    "CreditParameters",
    "DividendParameters",
    "DividendRates",
    "JurisdictionTaxTable",
    "PayrollParameters",
    "TaxRules",
    "load_default_rules",
    "validate_brackets",
]
