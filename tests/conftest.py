"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from taxcalc.service import TaxService


@pytest.fixture
def tax_service() -> TaxService:
    """TaxService over the built-in bracket tables."""
    return TaxService()


@pytest.fixture
def mock_input() -> AsyncMock:
    """Async mock of an InputProvider; set prompt.side_effect per test."""
    provider = AsyncMock()
    provider.prompt.return_value = ""
    return provider


@pytest.fixture
def mock_output() -> MagicMock:
    """Mock of an OutputProvider recording log() and show_result() calls."""
    return MagicMock()
