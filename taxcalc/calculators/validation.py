"""Validation of raw year and income strings entered by a user.

Failures are returned as ValidationOutcome values, never raised, so a caller
can show the message and ask again.
"""

import re
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from taxcalc.calculators.tax_data import MAX_INCOME
from taxcalc.models import ValidationOutcome

_YEAR_PATTERN = re.compile(r"[0-9]{4}-[0-9]{4}")


def validate_year(text: str, available_years: Sequence[str]) -> ValidationOutcome[str]:
    """Check a fiscal year key such as "2023-2024" against the known years.

    The text is matched as given; only the emptiness check ignores
    surrounding whitespace.
    """
    if not text.strip():
        return ValidationOutcome[str].failure("Year cannot be empty")

    if not _YEAR_PATTERN.fullmatch(text):
        example = available_years[0] if available_years else "2023-2024"
        return ValidationOutcome[str].failure(
            f"Year must be in format YYYY-YYYY (e.g., {example})"
        )

    if text not in available_years:
        return ValidationOutcome[str].failure(
            f'Year "{text}" not available. Choose from: {", ".join(available_years)}'
        )

    return ValidationOutcome[str].success(text)


def validate_income(text: str) -> ValidationOutcome[Decimal]:
    """Parse a non-negative income amount, decimals allowed."""
    text = text.strip()
    if not text:
        return ValidationOutcome[Decimal].failure("Income cannot be empty")

    # Decimal() accepts digit-group underscores ("50_000"); plain numbers only.
    try:
        income = Decimal(text) if "_" not in text else None
    except InvalidOperation:
        income = None
    if income is None or income.is_nan():
        return ValidationOutcome[Decimal].failure("Please enter a valid numeric income")

    if income < 0:
        return ValidationOutcome[Decimal].failure("Income cannot be negative")

    if income > MAX_INCOME:
        return ValidationOutcome[Decimal].failure("Income exceeds maximum allowed value")

    return ValidationOutcome[Decimal].success(income)
