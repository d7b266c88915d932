from __future__ import annotations

from decimal import Decimal, InvalidOperation


def parse_units(text: str, decimals: int) -> int:
    """Parse a decimal amount into a fixed-point integer.

    Args:
        text: Decimal amount, e.g. ``"10000"`` or ``"0.25"``.
        decimals: Number of decimal places of the target representation.

    Returns:
        ``value * 10**decimals`` as an exact integer.

    Raises:
        ValueError: If the text is not a finite, non-negative decimal number
            or carries more fractional digits than ``decimals``.

    Notes:
        - Scaling is done on the decimal digits with integer arithmetic, so
          large amounts are never rounded by a Decimal context.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    if not text.isascii():
        raise ValueError(f"not a decimal number: {text!r}")
    try:
        value = Decimal(text.strip())
    except InvalidOperation as e:
        raise ValueError(f"not a decimal number: {text!r}") from e

    _, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int):
        raise ValueError(f"not a finite number: {text!r}")
    if value.is_zero():
        return 0
    if value.is_signed():
        raise ValueError(f"amount must be non-negative: {text!r}")

    # "1.50" is as precise as "1.5"
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1

    if -exponent > decimals:
        raise ValueError(f"{text!r} has more than {decimals} fractional digit(s)")

    mantissa = int("".join(str(d) for d in digits))
    return mantissa * 10 ** (decimals + exponent)


def format_units(value: int, decimals: int) -> str:
    """Render a fixed-point integer as a plain decimal string."""
    if decimals == 0:
        return str(value)
    whole, frac = divmod(abs(value), 10**decimals)
    sign = "-" if value < 0 else ""
    frac_text = str(frac).rjust(decimals, "0").rstrip("0")
    return f"{sign}{whole}.{frac_text}" if frac_text else f"{sign}{whole}"
