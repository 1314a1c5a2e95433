"""Tests for the console input/output providers."""

import asyncio
import threading
from decimal import Decimal

import pytest

from taxcalc.models import TaxResult
from taxcalc.providers import ConsoleInputProvider, ConsoleOutputProvider


@pytest.mark.asyncio
async def test_console_input_strips_answer(monkeypatch: pytest.MonkeyPatch) -> None:
    questions: list[str] = []

    def fake_input(question: str) -> str:
        questions.append(question)
        return "  2023-2024 \n"

    monkeypatch.setattr("builtins.input", fake_input)

    answer = await ConsoleInputProvider().prompt("Year? ")

    assert answer == "2023-2024"
    assert questions == ["Year? "]


@pytest.mark.asyncio
async def test_console_input_propagates_eof(monkeypatch: pytest.MonkeyPatch) -> None:
    def closed_stdin(question: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)

    with pytest.raises(EOFError):
        await ConsoleInputProvider().prompt("Year? ")


@pytest.mark.asyncio
async def test_console_input_timeout_does_not_wait_for_reader(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A timed-out prompt returns at once; the late answer is discarded."""
    release = threading.Event()
    finished = threading.Event()

    def slow_input(question: str) -> str:
        release.wait(5)
        finished.set()
        return "2023-2024"

    monkeypatch.setattr("builtins.input", slow_input)

    with pytest.raises(TimeoutError):
        await asyncio.wait_for(ConsoleInputProvider().prompt("Year? "), timeout=0.05)
    assert not finished.is_set()

    release.set()
    assert finished.wait(5)
    await asyncio.sleep(0.05)


@pytest.mark.asyncio
async def test_console_input_answers_in_turn(monkeypatch: pytest.MonkeyPatch) -> None:
    answers = iter(["invalid", " 50000 "])
    monkeypatch.setattr("builtins.input", lambda question: next(answers))

    provider = ConsoleInputProvider()

    assert await provider.prompt("Year? ") == "invalid"
    assert await provider.prompt("Income? ") == "50000"


def test_console_log(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleOutputProvider().log("Income cannot be empty")
    assert capsys.readouterr().out == "Income cannot be empty\n"


def test_console_show_result(capsys: pytest.CaptureFixture[str]) -> None:
    result = TaxResult(
        year="2023-2024",
        income=Decimal("50000"),
        tax=Decimal("6717.00"),
        after_tax=Decimal("43283.00"),
        effective_rate=Decimal("13.434"),
    )

    ConsoleOutputProvider().show_result(result)

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "",
        "--- Tax Calculation Result ---",
        "Year:           2023-2024",
        "Income:         $50,000.00",
        "Tax Payable:    $6,717.00",
        "After Tax:      $43,283.00",
        "Effective Rate: 13.43%",
        "",
    ]


def test_console_show_result_zero_income(capsys: pytest.CaptureFixture[str]) -> None:
    result = TaxResult(
        year="2024-2025",
        income=Decimal("0"),
        tax=Decimal("0.00"),
        after_tax=Decimal("0"),
        effective_rate=Decimal("0"),
    )

    ConsoleOutputProvider().show_result(result)

    out = capsys.readouterr().out
    assert "Tax Payable:    $0.00" in out
    assert "Effective Rate: 0.00%" in out
