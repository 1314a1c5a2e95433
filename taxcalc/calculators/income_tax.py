"""Income tax calculator: single-bracket lookup against precomputed bases."""

from decimal import ROUND_HALF_UP, Decimal

from taxcalc.calculators.tax_data import TaxBracket

CENT = Decimal("0.01")


def find_bracket(
    income: Decimal,
    brackets: tuple[TaxBracket, ...],
) -> TaxBracket | None:
    """Return the last bracket whose lower bound is strictly below income.

    Returns None when income does not exceed the first lower bound, i.e. for
    zero income.
    """
    for bracket in reversed(brackets):
        if income > bracket.lower:
            return bracket
    return None


def calculate_income_tax(
    income: Decimal,
    brackets: tuple[TaxBracket, ...],
) -> Decimal:
    """Calculate tax owed on income, rounded half-up to the cent.

    Args:
        income: Taxable income (>= 0).
        brackets: Contiguous bracket table for one fiscal year.

    Returns:
        Tax payable as a Decimal with two decimal places.
    """
    bracket = find_bracket(income, brackets)
    if bracket is None:
        return Decimal("0.00")

    tax = bracket.base + (income - bracket.lower) * bracket.rate
    return tax.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_effective_rate(tax: Decimal, income: Decimal) -> Decimal:
    """Tax as a percentage of income, unrounded. Zero when income is zero."""
    if income > 0:
        return tax / income * 100
    return Decimal("0")
