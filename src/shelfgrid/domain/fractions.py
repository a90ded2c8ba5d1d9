"""Fractional-inch formatting and lumber measures."""

from __future__ import annotations

import math

# Cubic inches per board foot
BOARD_FOOT_CUBIC_INCHES = 144.0


def to_fraction_32(value_inches: float) -> str:
    """Format decimal inches to the nearest 1/32" as a reduced fraction.

    Examples:
        >>> to_fraction_32(28.65625)
        '28 21/32"'
        >>> to_fraction_32(0.71875)
        '23/32"'
        >>> to_fraction_32(12.0)
        '12"'
    """
    whole = math.floor(value_inches)
    # Round half up to the nearest 32nd
    thirty_seconds = math.floor((value_inches - whole) * 32 + 0.5)

    if thirty_seconds == 0:
        return f'{whole}"'
    if thirty_seconds == 32:
        return f'{whole + 1}"'

    divisor = math.gcd(thirty_seconds, 32)
    numerator = thirty_seconds // divisor
    denominator = 32 // divisor

    if whole == 0:
        return f'{numerator}/{denominator}"'
    return f'{whole} {numerator}/{denominator}"'


def format_dimensions(length: float, width: float, thickness: float) -> str:
    """Format L x W x T with 1/32" fractions."""
    return (
        f"{to_fraction_32(length)} x {to_fraction_32(width)} x "
        f"{to_fraction_32(thickness)}"
    )


def board_feet(
    length_in: float, width_in: float, thickness_in: float, qty: int = 1
) -> float:
    """Board feet for a rectangular piece (144 cubic inches each)."""
    return (length_in * width_in * thickness_in * qty) / BOARD_FOOT_CUBIC_INCHES
