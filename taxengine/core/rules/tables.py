from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from taxengine.core.errors import InvalidBracketSchedule, UnsupportedJurisdiction, UnsupportedTaxYear
from taxengine.core.progressive import TaxBracket

D = Decimal

FEDERAL = "federal"

logger = logging.getLogger("taxengine.rules")


def validate_brackets(brackets: Sequence[TaxBracket], *, label: str = "schedule") -> tuple[TaxBracket, ...]:
    if not brackets:
        raise InvalidBracketSchedule(f"{label}: bracket schedule is empty")
    previous: D | None = None
    for index, bracket in enumerate(brackets):
        if bracket.rate < 0:
            raise InvalidBracketSchedule(f"{label}: negative rate {bracket.rate} in bracket {index}")
        last = index == len(brackets) - 1
        if bracket.upper_limit is None:
            if not last:
                raise InvalidBracketSchedule(f"{label}: unbounded bracket {index} is not the top bracket")
            continue
        if last:
            raise InvalidBracketSchedule(f"{label}: top bracket must be unbounded")
        if bracket.upper_limit <= 0 or (previous is not None and bracket.upper_limit <= previous):
            raise InvalidBracketSchedule(
                f"{label}: limits must be strictly ascending (bracket {index} at {bracket.upper_limit})"
            )
        previous = bracket.upper_limit
    return tuple(brackets)


def _frozen_codes(mapping: Mapping[str, object]) -> Mapping[str, object]:
    return MappingProxyType({code.upper(): value for code, value in mapping.items()})


@dataclass(frozen=True)
class CreditParameters:
    federal_credit_rate: D
    medical_income_fraction: D
    medical_threshold: D
    donation_low_tier_limit: D
    donation_low_rate: D
    donation_high_rate: D
    first_time_donor_rate: D
    first_time_donor_cap: D


@dataclass(frozen=True)
class DividendRates:
    gross_up: D
    federal_credit: D


@dataclass(frozen=True)
class DividendParameters:
    eligible: DividendRates
    non_eligible: DividendRates
    # province code -> (eligible, non-eligible) credit rate on the grossed-up amount
    provincial_credit: Mapping[str, tuple[D, D]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "provincial_credit", _frozen_codes(self.provincial_credit))


@dataclass(frozen=True)
class CorporateParameters:
    sbd_base_limit: D
    sbd_rate: D
    passive_threshold: D
    grind_factor: D
    general_rate: D
    investment_rate: D
    rdtoh_addition_rate: D
    rdtoh_refund_rate: D
    provincial_rates: Mapping[str, D]
    default_province: str = "ON"

    def __post_init__(self) -> None:
        object.__setattr__(self, "provincial_rates", _frozen_codes(self.provincial_rates))
        object.__setattr__(self, "default_province", self.default_province.upper())
        if self.default_province not in self.provincial_rates:
            raise InvalidBracketSchedule(f"no corporate rate for default province {self.default_province}")


@dataclass(frozen=True)
class PayrollParameters:
    cpp_ympe: D
    cpp_basic_exemption: D
    cpp_rate: D
    rrsp_rate: D
    rrsp_dollar_limit: D


@dataclass(frozen=True)
class CapitalCostParameters:
    half_year_factor: D
    accelerated_factor: D


@dataclass(frozen=True)
class JurisdictionTaxTable:
    """A single tax year's schedules and parameters.

    Bracket lists are validated on construction; an invalid schedule is a
    load-time failure rather than something each calculation re-checks.
    """

    tax_year: int
    federal: tuple[TaxBracket, ...]
    provincial: Mapping[str, tuple[TaxBracket, ...]]
    basic_personal_amounts: Mapping[str, D]
    credits: CreditParameters
    dividends: DividendParameters
    corporate: CorporateParameters
    payroll: PayrollParameters
    capital_cost: CapitalCostParameters
    provinces: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        federal = validate_brackets(self.federal, label=f"{self.tax_year} federal")
        provincial = {
            code.upper(): validate_brackets(brackets, label=f"{self.tax_year} {code.upper()}")
            for code, brackets in self.provincial.items()
        }
        amounts = {
            (code if code == FEDERAL else code.upper()): amount
            for code, amount in self.basic_personal_amounts.items()
        }
        if FEDERAL not in amounts:
            raise InvalidBracketSchedule(f"{self.tax_year}: missing federal basic personal amount")
        object.__setattr__(self, "federal", federal)
        object.__setattr__(self, "provincial", MappingProxyType(provincial))
        object.__setattr__(self, "basic_personal_amounts", MappingProxyType(amounts))
        object.__setattr__(self, "provinces", tuple(sorted(provincial)))

    def provincial_brackets(self, province: str) -> tuple[TaxBracket, ...]:
        code = (province or "").upper()
        try:
            return self.provincial[code]
        except KeyError as exc:
            raise UnsupportedJurisdiction(code or str(province), self.tax_year) from exc

    def basic_personal_amount(self, jurisdiction: str) -> D:
        code = jurisdiction if jurisdiction == FEDERAL else (jurisdiction or "").upper()
        try:
            return self.basic_personal_amounts[code]
        except KeyError as exc:
            raise UnsupportedJurisdiction(code, self.tax_year) from exc


class TaxRules:
    """Versioned rule book: tax year -> :class:`JurisdictionTaxTable`.

    Built once and handed to every calculation; swapping a year's table
    means building a new ``TaxRules`` rather than editing calculation code.
    """

    def __init__(self, tables: Iterable[JurisdictionTaxTable]) -> None:
        by_year: dict[int, JurisdictionTaxTable] = {}
        for table in tables:
            if table.tax_year in by_year:
                raise InvalidBracketSchedule(f"Duplicate tax table registered for {table.tax_year}")
            by_year[table.tax_year] = table
        self._tables: Mapping[int, JurisdictionTaxTable] = MappingProxyType(by_year)
        logger.debug("Loaded tax rules for years %s", sorted(by_year))

    @property
    def years(self) -> tuple[int, ...]:
        return tuple(sorted(self._tables))

    def table(self, tax_year: int) -> JurisdictionTaxTable:
        try:
            return self._tables[int(tax_year)]
        except KeyError as exc:
            raise UnsupportedTaxYear(tax_year) from exc

    def provinces(self, tax_year: int) -> tuple[str, ...]:
        return self.table(tax_year).provinces

    def with_table(self, table: JurisdictionTaxTable) -> "TaxRules":
        tables = {year: existing for year, existing in self._tables.items()}
        tables[table.tax_year] = table
        return TaxRules(tables.values())

    def __contains__(self, tax_year: object) -> bool:
        return tax_year in self._tables


__all__ = [
    "FEDERAL",
    "CorporateParameters",
    "CreditParameters",
    "DividendParameters",
    "DividendRates",
    "JurisdictionTaxTable",
    "PayrollParameters",
    "TaxRules",
    "validate_brackets",
]
