import logging
from dataclasses import asdict
from decimal import Decimal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from taxengine.config import get_settings
from taxengine.core.corporate import calculate_ccpc_tax
from taxengine.core.credits import (
    basic_personal_credit,
    charitable_donation_credit,
    eligible_dividend_credit,
    medical_expense_credit,
    non_eligible_dividend_credit,
)
from taxengine.core.errors import UnsupportedJurisdiction
from taxengine.core.optimizer import CompensationStrategy, compare_strategies
from taxengine.core.personal import calculate_personal_tax
from taxengine.core.rdtoh import roll_rdtoh_account
from taxengine.core.rules import TaxRules
from taxengine.lifespan import build_application_lifespan

logger = logging.getLogger("taxengine")


async def _announce_rules(app: FastAPI) -> None:
    settings = get_settings()
    logger.info(
        "Tax engine ready; default_tax_year=%s default_province=%s build=%s",
        settings.default_tax_year,
        settings.default_province,
        settings.build_version,
    )


app = FastAPI(
    title="Canadian Tax Engine",
    description="Personal (T1) and CCPC corporate tax calculations. Default year: 2025.",
    lifespan=build_application_lifespan("engine", startup_hook=_announce_rules),
)


class _Request(BaseModel):
    model_config = ConfigDict(extra="forbid")


class PersonalTaxRequest(_Request):
    taxable_income: Decimal
    province: str | None = None


class CreditsRequest(_Request):
    province: str | None = None
    net_income: Decimal = Decimal("0")
    medical_expenses: Decimal = Field(default=Decimal("0"), ge=0)
    donations: Decimal = Field(default=Decimal("0"), ge=0)
    first_time_donor: bool = False
    eligible_dividends: Decimal = Field(default=Decimal("0"), ge=0)
    non_eligible_dividends: Decimal = Field(default=Decimal("0"), ge=0)


class CCPCTaxRequest(_Request):
    active_business_income: Decimal
    investment_income: Decimal = Decimal("0")
    passive_income: Decimal | None = None
    province: str | None = None


class RDTOHRequest(_Request):
    opening_balance: Decimal = Field(default=Decimal("0"), ge=0)
    investment_income: Decimal = Decimal("0")
    dividends_paid: Decimal = Field(default=Decimal("0"), ge=0)


class CompensationRequest(_Request):
    total_compensation: Decimal = Field(..., ge=0)
    strategy: CompensationStrategy = CompensationStrategy.BALANCED_TO_CPP_MAX
    province: str | None = None


def _rules() -> TaxRules:
    rules = getattr(app.state, "rules", None)
    if rules is None:
        raise HTTPException(status_code=503, detail="Tax rules not loaded")
    return rules


def _province(value: str | None) -> str:
    return (value or get_settings().default_province).upper()


def _unsupported(exc: UnsupportedJurisdiction) -> HTTPException:
    logger.info(
        "Rejected calculation for unsupported jurisdiction",
        extra={"jurisdiction": exc.jurisdiction, "tax_year": exc.tax_year},
    )
    return HTTPException(status_code=400, detail=str(exc))


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", get_settings())
    rules = getattr(app.state, "rules", None)
    return {
        "status": "ok",
        "default_tax_year": settings.default_tax_year,
        "tax_years": list(rules.years) if rules is not None else [],
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


@app.post("/tax/{year}/personal")
def personal(year: int, req: PersonalTaxRequest):
    rules = _rules()
    try:
        result = calculate_personal_tax(rules, req.taxable_income, _province(req.province), year)
    except UnsupportedJurisdiction as exc:
        raise _unsupported(exc) from exc
    return {"tax_year": year, "result": asdict(result)}


@app.post("/tax/{year}/credits")
def credits(year: int, req: CreditsRequest):
    rules = _rules()
    province = _province(req.province)
    try:
        breakdown = {
            "basic_personal": basic_personal_credit(rules, province, year),
            "medical": medical_expense_credit(rules, req.medical_expenses, req.net_income, year),
            "donations": charitable_donation_credit(
                rules, req.donations, year, first_time=req.first_time_donor
            ),
            "eligible_dividends": eligible_dividend_credit(rules, req.eligible_dividends, province, year),
            "non_eligible_dividends": non_eligible_dividend_credit(
                rules, req.non_eligible_dividends, province, year
            ),
        }
    except UnsupportedJurisdiction as exc:
        raise _unsupported(exc) from exc
    return {"tax_year": year, "province": province, "credits": breakdown, "total": sum(breakdown.values())}


@app.post("/tax/{year}/ccpc")
def ccpc(year: int, req: CCPCTaxRequest):
    rules = _rules()
    try:
        result = calculate_ccpc_tax(
            rules,
            req.active_business_income,
            req.investment_income,
            _province(req.province),
            year,
            passive_income=req.passive_income,
        )
    except UnsupportedJurisdiction as exc:
        raise _unsupported(exc) from exc
    return {"tax_year": year, "result": asdict(result)}


@app.post("/tax/{year}/rdtoh")
def rdtoh(year: int, req: RDTOHRequest):
    rules = _rules()
    try:
        account = roll_rdtoh_account(rules, req.opening_balance, req.investment_income, req.dividends_paid, year)
    except UnsupportedJurisdiction as exc:
        raise _unsupported(exc) from exc
    return {"tax_year": year, "account": asdict(account)}


@app.post("/tax/{year}/compensation")
def compensation(year: int, req: CompensationRequest):
    rules = _rules()
    try:
        scenarios = compare_strategies(rules, req.total_compensation, _province(req.province), year)
    except UnsupportedJurisdiction as exc:
        raise _unsupported(exc) from exc
    selected = scenarios[req.strategy.value]
    return {
        "tax_year": year,
        "scenario": asdict(selected),
        "alternatives": {name: asdict(s) for name, s in scenarios.items() if name != req.strategy.value},
    }
