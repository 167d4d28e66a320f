"""Decimal rounding shared by every figure the API reports."""

from decimal import ROUND_HALF_UP, Decimal, localcontext


def to_decimal(value: float | int | Decimal) -> Decimal:
    """Convert a number through its shortest decimal representation."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _quantize(value: float | int | Decimal, digits: int) -> Decimal:
    number = to_decimal(value)
    with localcontext() as context:
        # The rounded result must fit in the context precision.
        context.prec = max(context.prec, number.adjusted() + digits + 2)
        return number.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def round_half_up(value: float | int | Decimal, digits: int = 0) -> float:
    """Round half away from zero to the given number of decimal places."""
    return float(_quantize(value, digits))


def round_half_up_int(value: float | int | Decimal) -> int:
    """Round half away from zero to an integer."""
    return int(_quantize(value, 0))
