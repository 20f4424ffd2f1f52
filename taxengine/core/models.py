from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

D = Decimal


@dataclass(frozen=True)
class TaxResult:
    federal_tax: D
    provincial_tax: D
    total_tax: D
    effective_rate: D
    marginal_rate: D


@dataclass(frozen=True)
class SmallBusinessDeduction:
    sbd_limit: D
    sbd_income: D
    sbd_tax: D


@dataclass(frozen=True)
class CCPCTaxResult:
    active_business_income: D
    sbd_limit: D
    sbd_tax: D
    general_rate_tax: D
    provincial_tax: D
    investment_tax: D
    total_tax: D
    effective_rate: D


@dataclass(frozen=True)
class RDTOHAccount:
    opening_balance: D
    addition: D
    refund: D
    closing_balance: D


@dataclass(frozen=True)
class CompensationScenario:
    strategy: str
    total_compensation: D
    salary: D
    dividend: D
    corporate_tax: D
    personal_tax: D
    cpp_contribution: D
    total_tax: D
    effective_rate: D
    rrsp_room: D
