"""
DecimalAmount - Decimal Utilities
Input conversion, arithmetic contexts and rounding helpers.
Never let a float reach the arithmetic: every input becomes a Decimal first.
"""

from __future__ import annotations

import re
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_05UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Optional, Union

from decimal_amount.config import get_settings
from decimal_amount.core.exceptions import DivisionError, InvalidInputError, ParseError

DecimalInput = Union[str, int, float, Decimal]

# Optional sign, digits with an optional fractional part (or a bare fraction).
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)


def to_decimal(value: DecimalInput) -> Decimal:
    """
    Convert a DecimalInput to a finite Decimal.
    Floats go through their shortest repr so 1.005 stays 1.005.
    Raises ParseError on anything that is not a plain base-10 number.
    """
    if isinstance(value, bool):
        raise ParseError(value, "booleans are not amounts")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ParseError(value, "value is not finite")
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise ParseError(value, "value is not finite")
        return Decimal(repr(value))
    if isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_PATTERN.fullmatch(text):
            raise ParseError(value)
        return Decimal(text)
    raise ParseError(value, f"unsupported type {type(value).__name__}")


def exact_context() -> Context:
    """Context wide enough that +, - and * never round."""
    return Context(
        prec=MAX_PREC,
        rounding=get_settings().ROUNDING_MODE,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )


def divide(
    dividend: Decimal, divisor: Decimal, places: Optional[int] = None
) -> Decimal:
    """
    Quotient rounded to `places` decimal places, capped at DIVISION_PRECISION.
    The precision grows with the integer part so large amounts keep their cents.
    Raises DivisionError when the divisor is zero.
    """
    if is_zero(divisor):
        raise DivisionError(dividend, divisor)
    limit = get_settings().DIVISION_PRECISION
    places = limit if places is None else min(places, limit)
    # ROUND_05UP with spare digits keeps the final rounding exact
    integer_digits = max(dividend.adjusted() - divisor.adjusted() + 1, 0)
    ctx = Context(
        prec=integer_digits + places + 4,
        rounding=ROUND_05UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )
    return round_places(ctx.divide(dividend, divisor), places)


def resolve_places(places: Optional[int]) -> int:
    """Return `places`, or the configured default when None. Must be an int >= 0."""
    if places is None:
        return get_settings().DEFAULT_PRECISION
    if isinstance(places, bool) or not isinstance(places, int):
        raise InvalidInputError("p", places, "precision must be an integer")
    if places < 0:
        raise InvalidInputError("p", places, "precision must be >= 0")
    return places


def round_places(amount: Decimal, places: int) -> Decimal:
    """Round to exactly `places` decimal places with the configured rounding mode."""
    quantizer = Decimal((0, (1,), -places))
    # quantize() fails when the result needs more digits than the context holds
    digits = max(amount.adjusted(), 0) + places + 2
    ctx = Context(
        prec=digits,
        rounding=get_settings().ROUNDING_MODE,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation],
    )
    rounded = amount.quantize(quantizer, context=ctx)
    # -0.001 rounds to 0.00, not -0.00
    return rounded.copy_abs() if rounded.is_zero() else rounded


def is_zero(amount: Decimal) -> bool:
    return amount == Decimal("0")
