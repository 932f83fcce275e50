"""Helpers for Decimal normalization."""

from decimal import Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_cents(value: Decimal) -> int:
    """Convert a money amount to integer minor units.

    Args:
        value: Amount with at most two fractional digits.

    Returns:
        int: Amount expressed in cents.
    """
    return int(coerce_decimal(value).quantize(CENT).scaleb(2))


def from_cents(cents) -> Decimal:
    """Convert integer minor units back to a two-digit Decimal.

    Args:
        cents: Stored amount in cents, or None.

    Returns:
        Decimal: Amount with exactly two fractional digits.
    """
    if cents is None:
        return Decimal("0.00")
    return Decimal(int(cents)).scaleb(-2).quantize(CENT)


def optional_from_cents(cents) -> Decimal | None:
    """Like from_cents, but keep missing values missing."""
    if cents is None:
        return None
    return from_cents(cents)


def optional_to_cents(value: Decimal | None) -> int | None:
    """Like to_cents, but keep missing values missing."""
    if value is None:
        return None
    return to_cents(value)


__all__ = [
    "CENT",
    "coerce_decimal",
    "to_cents",
    "from_cents",
    "optional_from_cents",
    "optional_to_cents",
]
