"""Fixed18 helpers.

Prices are carried as integers scaled by ``10 ** 18``. Conversions to and from
floats follow the exact steps the pricing engine has always used, including
the lossy float hop in :func:`price_a_in_b`, so results match existing
consumers digit for digit.
"""

from __future__ import annotations

from decimal import Decimal

MAX_DECIMALS_18 = 18
ONE_FIXED18 = 10**MAX_DECIMALS_18


def parse_price_string_to_fixed18(price: str, decimals: int = MAX_DECIMALS_18) -> int:
    """Convert a decimal price string into a Fixed18 integer.

    The fractional part is right-padded with zeros or truncated to exactly
    ``decimals`` digits and appended to the integer part. A string without a
    dot is always scaled by ``10 ** decimals``.

    Examples:
        >>> parse_price_string_to_fixed18("1980.861883676755965")
        1980861883676755965000
        >>> parse_price_string_to_fixed18("0.1234567890123456789")
        123456789012345678
    """
    integer_part, _, fractional_part = price.partition(".")
    adjusted_fraction = fractional_part.ljust(decimals, "0")[:decimals]
    return int(integer_part + adjusted_fraction)


def price_as_float(value: int) -> float:
    """Fixed18 integer as a float number of units."""
    return float(value) / 1e18


def div_trunc(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero.

    Fixed18 amounts may go negative (a fee larger than the reward); the
    quotient keeps the magnitude of the positive case: ``div_trunc(-1, 2) == 0``
    while ``-1 // 2 == -1``.
    """
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def number_to_string(value: float) -> str:
    """Shortest round-trip positional rendering of a float.

    Integral values carry no fractional part (``1.0 -> "1"``) and no
    exponent is ever used, so the result can be fed back into
    :func:`parse_price_string_to_fixed18`.
    """
    if value == 0:
        return "0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def price_a_in_b(price_a: int, price_b: int, decimals: int = MAX_DECIMALS_18) -> int:
    """Price of A expressed in B, Fixed18.

    A zero denominator yields 0. Otherwise the integer ratio is computed
    first, converted to a float, rendered as a string and re-parsed; the
    float hop limits the result to ~17 significant digits.
    """
    if price_b == 0:
        return 0
    ratio = price_a * 10**decimals // price_b
    return parse_price_string_to_fixed18(number_to_string(price_as_float(ratio)), decimals)


def to_fixed_string(value: float, decimals: int = MAX_DECIMALS_18) -> str:
    """Float rendered with exactly ``decimals`` fractional digits."""
    return f"{value:.{decimals}f}"


def scale_factor(ratio: float) -> int:
    """``10 ** n`` where ``n`` is the number of fractional digits of ``ratio``."""
    _, _, fraction = number_to_string(ratio).partition(".")
    return 10 ** len(fraction)


def format_ether(value: int, decimals: int = MAX_DECIMALS_18) -> str:
    """Fixed18 integer as a human-readable decimal string.

    Examples:
        >>> format_ether(1020220000000000000)
        '1.02022'
        >>> format_ether(0)
        '0.0'
    """
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)
    fraction_text = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction_text}"
