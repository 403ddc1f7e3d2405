"""
DecimalAmount - Monetary Arithmetic
Exact decimal operations for billing, ledger and invoicing code.

Every function builds fresh Decimals from its inputs, never touches the
thread's decimal context, and returns a Decimal (or str for formatting).
Rounding to `p` decimal places uses Settings.ROUNDING_MODE (ROUND_HALF_UP,
ties away from zero, unless configured otherwise).
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from decimal_amount.core.decimal_utils import (
    DecimalInput,
    divide,
    exact_context,
    resolve_places,
    round_places,
    to_decimal,
)
from decimal_amount.core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

__all__ = [
    "plus",
    "minus",
    "mul",
    "div",
    "muldiv",
    "divmul",
    "distribute",
    "total",
    "cmp",
    "to_fixed_string",
    "to_fixed_number",
]


# ─── Addition / subtraction ───────────────────────────────────────────────────


def plus(x: DecimalInput, y: DecimalInput) -> Decimal:
    """x + y, exact."""
    return exact_context().add(to_decimal(x), to_decimal(y))


def minus(x: DecimalInput, y: DecimalInput) -> Decimal:
    """x - y, exact."""
    return exact_context().subtract(to_decimal(x), to_decimal(y))


# ─── Multiplication / division ────────────────────────────────────────────────


def mul(x: DecimalInput, y: DecimalInput, p: Optional[int] = None) -> Decimal:
    """x * y rounded to p decimal places."""
    places = resolve_places(p)
    product = exact_context().multiply(to_decimal(x), to_decimal(y))
    return round_places(product, places)


def div(x: DecimalInput, y: DecimalInput, p: Optional[int] = None) -> Decimal:
    """
    x / y rounded to p decimal places.
    Raises DivisionError when y is zero.
    """
    places = resolve_places(p)
    return round_places(divide(to_decimal(x), to_decimal(y), places), places)


def muldiv(
    x: DecimalInput, y: DecimalInput, z: DecimalInput, p: Optional[int] = None
) -> Decimal:
    """
    (x * y) / z rounded to p decimal places.
    The product is exact, so the quotient is rounded only once. Prefer this
    order over divmul when x / y may not terminate.
    """
    places = resolve_places(p)
    product = exact_context().multiply(to_decimal(x), to_decimal(y))
    return round_places(divide(product, to_decimal(z), places), places)


def divmul(
    x: DecimalInput, y: DecimalInput, z: DecimalInput, p: Optional[int] = None
) -> Decimal:
    """
    (x / y) * z rounded to p decimal places.
    x / y is rounded to DIVISION_PRECISION decimal places before the
    multiply, so divmul(1, 3, 3, 28) gives 0.99..9 where muldiv gives 1.
    """
    places = resolve_places(p)
    quotient = divide(to_decimal(x), to_decimal(y))
    return round_places(exact_context().multiply(quotient, to_decimal(z)), places)


# ─── Allocation ───────────────────────────────────────────────────────────────


def distribute(s: DecimalInput, n: int, p: Optional[int] = None) -> List[Decimal]:
    """
    Split `s` into `n` shares rounded to p decimal places.

    The first n-1 shares are s / n rounded; the last share is whatever is
    left, s - share * (n - 1), so the shares always add back up to s.

        distribute(100, 3) -> [Decimal('33.33'), Decimal('33.33'), Decimal('33.34')]

    Raises InvalidInputError unless n is an integer >= 2.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError("n", n, "share count must be an integer")
    if n < 2:
        raise InvalidInputError("n", n, "share count must be >= 2")
    places = resolve_places(p)

    amount = to_decimal(s)
    ctx = exact_context()
    share = round_places(divide(amount, Decimal(n), places), places)
    remainder = ctx.subtract(amount, ctx.multiply(share, Decimal(n - 1)))
    logger.debug(
        "distribute %s into %d shares of %s, remainder share %s",
        amount,
        n,
        share,
        remainder,
    )
    return [share] * (n - 1) + [remainder]


def total(values: Iterable[DecimalInput]) -> Decimal:
    """
    Exact sum of a non-empty sequence, added left to right.
    Raises InvalidInputError when `values` is empty or not a sequence.
    """
    if isinstance(values, (str, bytes)):
        raise InvalidInputError("values", values, "expected a sequence of amounts")
    try:
        items = list(values)
    except TypeError as exc:
        raise InvalidInputError(
            "values", values, "expected a sequence of amounts"
        ) from exc
    if not items:
        raise InvalidInputError("values", items, "cannot sum an empty sequence")

    ctx = exact_context()
    result = to_decimal(items[0])
    for item in items[1:]:
        result = ctx.add(result, to_decimal(item))
    return result


# ─── Comparison / formatting ──────────────────────────────────────────────────


def cmp(x: DecimalInput, y: DecimalInput) -> int:
    """Return -1, 0 or 1 as x is less than, equal to or greater than y."""
    a, b = to_decimal(x), to_decimal(y)
    return (a > b) - (a < b)


def to_fixed_string(x: DecimalInput, p: Optional[int] = None) -> str:
    """
    Render x with exactly p digits after the decimal point.
    Never uses scientific notation: to_fixed_string(1, 2) == "1.00".
    """
    places = resolve_places(p)
    return format(round_places(to_decimal(x), places), "f")


def to_fixed_number(x: DecimalInput, p: Optional[int] = None) -> Decimal:
    """Same rounding as to_fixed_string, returned as a Decimal."""
    return round_places(to_decimal(x), resolve_places(p))
