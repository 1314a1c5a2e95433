"""Interactive driver: prompt until year and income are valid, then calculate."""

import asyncio
import logging
from decimal import Decimal

from config.settings import settings
from taxcalc.models import TaxResult
from taxcalc.providers import (
    ConsoleInputProvider,
    ConsoleOutputProvider,
    InputProvider,
    OutputProvider,
)
from taxcalc.service import TaxService

logger = logging.getLogger(__name__)

YEAR_PROMPT = "Please enter the income year (e.g., 2023-2024): "
INCOME_PROMPT = "Please enter your total taxable income: $"


class TaxCalculator:
    """Coordinates the prompts, the tax engine and the result display."""

    def __init__(
        self,
        input_provider: InputProvider | None = None,
        output_provider: OutputProvider | None = None,
        tax_service: TaxService | None = None,
        prompt_timeout: float | None = None,
    ) -> None:
        self._input = input_provider or ConsoleInputProvider()
        self._output = output_provider or ConsoleOutputProvider()
        self._tax_service = tax_service or TaxService()
        self._prompt_timeout = (
            prompt_timeout if prompt_timeout is not None else settings.prompt_timeout
        )

    async def _ask(self, question: str) -> str:
        # wait_for with timeout=None waits indefinitely
        return await asyncio.wait_for(
            self._input.prompt(question), timeout=self._prompt_timeout
        )

    async def get_valid_year(self) -> str:
        """Prompt for a fiscal year until one with a bracket table is entered."""
        attempts = 0
        while True:
            attempts += 1
            validation = self._tax_service.validate_year(await self._ask(YEAR_PROMPT))
            if validation.ok:
                logger.debug("Accepted year %s after %d attempt(s)", validation.value, attempts)
                return validation.value

            logger.debug("Rejected year input: %s", validation.error)
            self._output.log(validation.error)

    async def get_valid_income(self) -> Decimal:
        """Prompt for income until a non-negative amount within range is entered."""
        attempts = 0
        while True:
            attempts += 1
            validation = self._tax_service.validate_income(await self._ask(INCOME_PROMPT))
            if validation.ok:
                logger.debug("Accepted income after %d attempt(s)", attempts)
                return validation.value

            logger.debug("Rejected income input: %s", validation.error)
            self._output.log(validation.error)

    async def run(self) -> TaxResult:
        """Collect both inputs, calculate, display and return the result."""
        year = await self.get_valid_year()
        income = await self.get_valid_income()
        result = self._tax_service.calculate_result(year, income)

        self._output.show_result(result)
        return result
