"""Satoshi/coin unit conversions.

Arithmetic goes through Decimal built from the shortest repr of the input,
so binary float drift never leaks into the last digit.
"""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

SATOSHI_PER_COIN = 10**8
SATOSHI_PER_MILLICOIN = 10**5
SATOSHI_PER_MICROCOIN = 10**2

Number = int | float | str | Decimal


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _whole_satoshi(satoshi: Number) -> Decimal:
    return _to_decimal(satoshi).to_integral_value(rounding=ROUND_DOWN)


def to_btc(satoshi: Number) -> float:
    """Convert satoshi to coin units, dropping fractions of a satoshi."""
    return float(_whole_satoshi(satoshi) / SATOSHI_PER_COIN)


def to_mbtc(satoshi: Number) -> float:
    """Convert satoshi to milli-coin units."""
    return float(_whole_satoshi(satoshi) / SATOSHI_PER_MILLICOIN)


def to_ubtc(satoshi: Number) -> float:
    """Convert satoshi to micro-coin units (bits)."""
    return float(_whole_satoshi(satoshi) / SATOSHI_PER_MICROCOIN)


def to_satoshi(btc: Number) -> int:
    """Convert coin units to satoshi, rounding half away from zero."""
    amount = _to_decimal(btc) * SATOSHI_PER_COIN
    return int(amount.to_integral_value(rounding=ROUND_HALF_UP))


def to_fixed(value: Number, precision: int = 8) -> str:
    """Render value with exactly ``precision`` decimals, truncating the rest.

    >>> to_fixed(1.2345678910, 4)
    '1.2345'
    """
    if precision < 0:
        raise ValueError("precision must be >= 0")
    exponent = Decimal(1).scaleb(-precision)
    truncated = _to_decimal(value).quantize(exponent, rounding=ROUND_DOWN)
    return f"{truncated:f}"
