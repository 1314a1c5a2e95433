"""Tax engine: bracket lookup, result records and input validation per fiscal year."""

import logging
from collections.abc import Mapping
from decimal import Decimal

from taxcalc.calculators.income_tax import calculate_effective_rate, calculate_income_tax
from taxcalc.calculators.tax_data import TAX_YEARS, TaxBracket, check_brackets
from taxcalc.calculators.validation import validate_income, validate_year
from taxcalc.models import TaxResult, ValidationOutcome

logger = logging.getLogger(__name__)


class InvalidTaxYearError(ValueError):
    """Raised when a calculation is requested for a year with no bracket table."""

    def __init__(self, year: str) -> None:
        super().__init__(f"Invalid tax year: {year}")
        self.year = year


class TaxService:
    """Calculates and validates against a fixed set of bracket tables.

    Holds no mutable state; one instance can serve any number of requests.
    """

    def __init__(
        self,
        tax_years: Mapping[str, tuple[TaxBracket, ...]] = TAX_YEARS,
    ) -> None:
        for year, brackets in tax_years.items():
            check_brackets(year, brackets)
        self._tax_years = tax_years

    def get_available_years(self) -> tuple[str, ...]:
        """Year keys in table order."""
        return tuple(self._tax_years)

    def calculate_tax(self, year: str, income: Decimal) -> Decimal:
        """Tax payable on income for the given year, rounded to the cent.

        Raises:
            InvalidTaxYearError: year has no bracket table. Callers are
                expected to run validate_year first.
        """
        brackets = self._tax_years.get(year)
        if brackets is None:
            raise InvalidTaxYearError(year)
        return calculate_income_tax(Decimal(str(income)), brackets)

    def calculate_result(self, year: str, income: Decimal) -> TaxResult:
        """Full result record: tax, after-tax income and effective rate."""
        income = Decimal(str(income))
        tax = self.calculate_tax(year, income)
        result = TaxResult(
            year=year,
            income=income,
            tax=tax,
            after_tax=income - tax,
            effective_rate=calculate_effective_rate(tax, income),
        )
        logger.info("Calculated %s tax on %s: %s", year, income, tax)
        return result

    def validate_year(self, text: str) -> ValidationOutcome[str]:
        return validate_year(text, self.get_available_years())

    def validate_income(self, text: str) -> ValidationOutcome[Decimal]:
        return validate_income(text)
