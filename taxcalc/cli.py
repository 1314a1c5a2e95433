"""Command-line entry point for the interactive tax calculator.

Usage:
    python -m taxcalc.cli

    # Diagnostic logging on stderr
    python -m taxcalc.cli -v

The log level can also be set with TAXCALC_LOG_LEVEL, and a per-prompt
timeout in seconds with TAXCALC_PROMPT_TIMEOUT.
"""

import argparse
import asyncio
import logging
import sys

from config.settings import settings
from taxcalc.driver import TaxCalculator

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate income tax for a fiscal year")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        asyncio.run(TaxCalculator().run())
    except TimeoutError:
        logger.error("No input received within %s seconds", settings.prompt_timeout)
        return 1
    except (EOFError, KeyboardInterrupt):
        logger.warning("Input closed before a result was calculated")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
