"""Human-readable byte sizes."""

from decimal import ROUND_HALF_UP, Decimal

_UNITS = ("Bytes", "KB", "MB", "GB")
_STEP = 1024
_TWO_PLACES = Decimal("0.01")


def format_bytes(size_bytes: int) -> str:
    """
    Format a byte count with base-1024 units.

    Values are rounded half-up to two decimals with trailing zeros
    dropped, e.g. 1536 -> "1.5 KB", 1152 -> "1.13 KB", 524288 -> "512 KB".
    Zero is "0 Bytes".
    """
    if size_bytes == 0:
        return "0 Bytes"

    exponent = 0
    while exponent < len(_UNITS) - 1 and abs(size_bytes) >= _STEP ** (exponent + 1):
        exponent += 1

    quotient = Decimal(size_bytes) / Decimal(_STEP ** exponent)
    rounded = quotient.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    value = f"{rounded:f}".rstrip("0").rstrip(".")
    return f"{value} {_UNITS[exponent]}"
