"""
DecimalAmount - Custom Exceptions
Each exception carries: message, error_code, optional detail dict.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

# ─────────────────────────────────────────────────────────────────────────────
# BASE
# ─────────────────────────────────────────────────────────────────────────────


class DecimalAmountError(Exception):
    """Root exception for all DecimalAmount errors."""

    error_code: str = "DECIMAL_AMOUNT_ERROR"

    def __init__(self, message: str, detail: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.detail = detail or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "detail": self.detail,
        }


# ─────────────────────────────────────────────────────────────────────────────
# VALUE CONSTRUCTION
# ─────────────────────────────────────────────────────────────────────────────


class ParseError(DecimalAmountError, ValueError):
    """Raised when an input cannot be read as a finite base-10 number."""

    error_code = "PARSE_ERROR"

    def __init__(self, value: Any, reason: str = "not a valid decimal number") -> None:
        self.value = value
        self.reason = reason
        super().__init__(
            message=f"Cannot parse {value!r} as a decimal amount: {reason}",
            detail={"value": repr(value), "reason": reason},
        )


# ─────────────────────────────────────────────────────────────────────────────
# ARITHMETIC
# ─────────────────────────────────────────────────────────────────────────────


class DivisionError(DecimalAmountError, ZeroDivisionError):
    error_code = "DIVISION_BY_ZERO"

    def __init__(self, dividend: Any, divisor: Any) -> None:
        self.dividend = dividend
        self.divisor = divisor
        super().__init__(
            message=f"Cannot divide {dividend} by zero divisor {divisor}",
            detail={"dividend": str(dividend), "divisor": str(divisor)},
        )


class InvalidInputError(DecimalAmountError, ValueError):
    """Raised when a structural precondition (count, sequence, precision) fails."""

    error_code = "INVALID_INPUT"

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(
            message=f"Invalid {argument}={value!r}: {reason}",
            detail={"argument": argument, "value": repr(value), "reason": reason},
        )
