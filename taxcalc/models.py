"""Pydantic models for calculation results and input validation outcomes."""

from decimal import Decimal
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class TaxResult(BaseModel):
    """Outcome of one tax calculation for a fiscal year and income."""

    model_config = ConfigDict(frozen=True)

    year: str
    income: Decimal
    tax: Decimal
    after_tax: Decimal
    effective_rate: Decimal  # percent, unrounded


class ValidationOutcome(BaseModel, Generic[T]):
    """Either a validated value or a user-facing error message, never both.

    Build with ``ValidationOutcome[str].success(...)`` or
    ``ValidationOutcome[str].failure(...)`` rather than the constructor.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: T | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> "ValidationOutcome[T]":
        if self.ok and self.error is not None:
            raise ValueError("successful outcome cannot carry an error")
        if not self.ok and (self.error is None or self.value is not None):
            raise ValueError("failed outcome needs an error and no value")
        return self

    @classmethod
    def success(cls, value: T) -> "ValidationOutcome[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ValidationOutcome[T]":
        return cls(ok=False, error=error)
