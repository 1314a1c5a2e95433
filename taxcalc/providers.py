"""Input and output collaborators for the interactive calculator."""

import asyncio
import logging
import threading
from typing import Protocol

from taxcalc.models import TaxResult

logger = logging.getLogger(__name__)


class InputProvider(Protocol):
    """Source of user answers."""

    async def prompt(self, question: str) -> str:
        """Show question and return the answer without surrounding whitespace."""
        ...


class OutputProvider(Protocol):
    """Sink for messages and the final result."""

    def log(self, message: str) -> None:
        ...

    def show_result(self, result: TaxResult) -> None:
        ...


def _resolve(
    future: "asyncio.Future[str]",
    answer: str | None,
    error: Exception | None,
) -> None:
    # A timed-out prompt has already cancelled its future.
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(answer or "")


class ConsoleInputProvider:
    """Reads answers from stdin.

    The blocking input() call runs in a daemon thread that hands the answer
    back through a loop future. Cancelling the awaiting coroutine (a prompt
    timeout) leaves no executor worker behind for asyncio.run() to join, and
    the abandoned reader does not keep the process alive.
    """

    async def prompt(self, question: str) -> str:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[str] = loop.create_future()

        def read() -> None:
            answer: str | None = None
            error: Exception | None = None
            try:
                answer = input(question)
            except Exception as exc:
                error = exc
            try:
                loop.call_soon_threadsafe(_resolve, future, answer, error)
            except RuntimeError:
                logger.debug("Discarding console answer: event loop already closed")

        threading.Thread(target=read, name="console-prompt", daemon=True).start()
        answer = await future
        return answer.strip()


class ConsoleOutputProvider:
    """Writes messages and a result summary to stdout."""

    def log(self, message: str) -> None:
        print(message)

    def show_result(self, result: TaxResult) -> None:
        print()
        print("--- Tax Calculation Result ---")
        print(f"Year:           {result.year}")
        print(f"Income:         ${result.income:,.2f}")
        print(f"Tax Payable:    ${result.tax:,.2f}")
        print(f"After Tax:      ${result.after_tax:,.2f}")
        print(f"Effective Rate: {result.effective_rate:.2f}%")
        print()
