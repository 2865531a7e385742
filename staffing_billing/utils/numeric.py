"""Numeric safety helpers shared by the billing calculators.

Form values arrive as ints, floats, strings or ``None``. These helpers turn
them into ``Decimal`` values so that billing sums stay exact, and format
results for display.

Example:
    >>> to_safe_decimal("")
    Decimal('0')
    >>> to_decimal("65.50")
    Decimal('65.50')
    >>> format_currency(Decimal("584"))
    '$584.00'
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional, Union

from staffing_billing.exceptions import NonNumericInputError

NumberLike = Union[str, int, float, Decimal]

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Convert a value to a finite Decimal.

    Args:
        value: Number or numeric string

    Returns:
        The value as a Decimal

    Raises:
        NonNumericInputError: If the value is missing, non-numeric, NaN or infinite
    """
    if isinstance(value, bool) or value is None:
        raise NonNumericInputError(value)
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as e:
            raise NonNumericInputError(value) from e
    if not result.is_finite():
        raise NonNumericInputError(value)
    return result


def to_safe_decimal(value: Any, fallback: NumberLike = ZERO) -> Decimal:
    """Convert a value to Decimal, using a fallback for blank or bad input.

    ``None``, empty strings and anything that is not a finite number resolve
    to ``fallback``.
    """
    if not has_value(value):
        return to_decimal(fallback)
    return to_decimal(value)


def has_value(value: Any) -> bool:
    """Check whether a value was explicitly provided and is numeric.

    Example:
        >>> has_value(0)
        True
        >>> has_value("")
        False
        >>> has_value("abc")
        False
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return False
    try:
        to_decimal(value)
    except NonNumericInputError:
        return False
    return True


def is_zero_or_absent(value: Any) -> bool:
    """Return True for ``None``, blank, non-numeric or zero values."""
    return not has_value(value) or to_decimal(value) == ZERO


def round_currency(value: Decimal) -> Decimal:
    """Round a Decimal to cents using ROUND_HALF_UP."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Optional[NumberLike]) -> str:
    """Format a value as dollars, or ``-`` when there is no value.

    Example:
        >>> format_currency(Decimal("13.999"))
        '$14.00'
        >>> format_currency(None)
        '-'
    """
    if value is None:
        return "-"
    amount = round_currency(to_decimal(value))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_hours(value: NumberLike) -> str:
    """Format an hour count with two decimals (``"2.50"``)."""
    return f"{round_currency(to_decimal(value)):.2f}"
