from __future__ import annotations


class TaxEngineError(Exception):
    pass


class UnsupportedJurisdiction(TaxEngineError, KeyError):
    """No schedule is registered for the requested jurisdiction and year."""

    def __init__(self, jurisdiction: str, tax_year: int | None = None) -> None:
        self.jurisdiction = jurisdiction
        self.tax_year = tax_year
        if tax_year is None:
            message = f"Jurisdiction {jurisdiction} not supported"
        else:
            message = f"Jurisdiction {jurisdiction} not supported for tax year {tax_year}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError repr-quotes its argument; keep the plain message.
        return str(self.args[0])


class UnsupportedTaxYear(UnsupportedJurisdiction):
    def __init__(self, tax_year: int) -> None:
        TaxEngineError.__init__(self, f"No tax rules registered for tax year {tax_year}")
        self.jurisdiction = "federal"
        self.tax_year = tax_year


class InvalidBracketSchedule(TaxEngineError, ValueError):
    pass


__all__ = [
    "TaxEngineError",
    "UnsupportedJurisdiction",
    "UnsupportedTaxYear",
    "InvalidBracketSchedule",
]
