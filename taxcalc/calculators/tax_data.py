"""Income tax bracket tables, keyed by fiscal year.

Hardcoded Python constants (not loaded from files). Each table is contiguous
from $0 with an uncapped top bracket, and each bracket carries the base tax
owed at its lower bound so a lookup never has to walk the lower brackets.
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import NamedTuple


class TaxBracket(NamedTuple):
    """A single income tax bracket."""

    lower: Decimal  # exclusive, see BOUNDARY_RULE
    upper: Decimal | None  # None = no cap
    rate: Decimal
    base: Decimal  # tax owed at `lower` from all lower brackets


# Lower bounds are exclusive and bases are whole dollars: income exactly on a
# boundary is taxed in the bracket below it. The other published variant of
# these tables shifts each lower bound by $1 and carries cents in the base
# ($5,091.81 instead of $5,092); it is not used here.
BOUNDARY_RULE = "exclusive-lower"

MAX_INCOME = Decimal("999999999.99")

_BRACKETS_2023_24 = (
    TaxBracket(Decimal("0"), Decimal("18200"), Decimal("0"), Decimal("0")),
    TaxBracket(Decimal("18200"), Decimal("45000"), Decimal("0.19"), Decimal("0")),
    TaxBracket(Decimal("45000"), Decimal("120000"), Decimal("0.325"), Decimal("5092")),
    TaxBracket(Decimal("120000"), Decimal("180000"), Decimal("0.37"), Decimal("29467")),
    TaxBracket(Decimal("180000"), None, Decimal("0.45"), Decimal("51667")),
)

# Stage 3 changes from 1 July 2024
_BRACKETS_2024_25 = (
    TaxBracket(Decimal("0"), Decimal("18200"), Decimal("0"), Decimal("0")),
    TaxBracket(Decimal("18200"), Decimal("45000"), Decimal("0.16"), Decimal("0")),
    TaxBracket(Decimal("45000"), Decimal("135000"), Decimal("0.30"), Decimal("4288")),
    TaxBracket(Decimal("135000"), Decimal("190000"), Decimal("0.37"), Decimal("31288")),
    TaxBracket(Decimal("190000"), None, Decimal("0.45"), Decimal("51638")),
)

TAX_YEARS: Mapping[str, tuple[TaxBracket, ...]] = MappingProxyType({
    "2023-2024": _BRACKETS_2023_24,
    "2024-2025": _BRACKETS_2024_25,
})


def check_brackets(year: str, brackets: tuple[TaxBracket, ...]) -> None:
    """Raise ValueError unless the brackets cover $0 to infinity without gaps.

    Also checks that each base equals the tax owed on the full brackets below
    it, which keeps the tax function continuous at every boundary.
    """
    if not brackets:
        raise ValueError(f"Tax year {year} has no brackets")
    if brackets[0].lower != 0:
        raise ValueError(f"Tax year {year}: first bracket must start at 0")
    if brackets[-1].upper is not None:
        raise ValueError(f"Tax year {year}: last bracket must be uncapped")

    for current, following in zip(brackets, brackets[1:]):
        if current.upper != following.lower:
            raise ValueError(
                f"Tax year {year}: bracket ending at {current.upper} is not "
                f"followed by one starting there (got {following.lower})"
            )
        expected_base = current.base + (current.upper - current.lower) * current.rate
        if following.base != expected_base:
            raise ValueError(
                f"Tax year {year}: base at {following.lower} is {following.base}, "
                f"brackets below it sum to {expected_base}"
            )
