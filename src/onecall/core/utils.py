"""Common utilities."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation, localcontext


def to_decimal(value: Decimal | int | str | float) -> Decimal:
    """Convert a coordinate-like value to an exact decimal.

    Floats go through their shortest repr so ``3.14`` becomes ``Decimal("3.14")``
    rather than the full binary expansion.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, float):
        value = repr(value)
    try:
        result = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def format_decimal(value: Decimal) -> str:
    """Render a decimal in canonical fixed-point form.

    Trailing zeros are dropped and exponents expanded:
    ``3.140`` -> ``3.14``, ``1E+2`` -> ``100``.
    """
    with localcontext() as ctx:
        # Enough precision that normalize only strips zeros, never rounds
        ctx.prec = max(len(value.as_tuple().digits), 1)
        text = format(value.normalize(), "f")
    return "0" if text == "-0" else text


def from_timestamp(ts: int, offset_seconds: int = 0) -> datetime:
    """Convert a Unix timestamp to an aware datetime at a fixed UTC offset."""
    return datetime.fromtimestamp(ts, timezone(timedelta(seconds=offset_seconds)))
