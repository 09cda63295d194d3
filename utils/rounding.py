"""
Deterministic rounding utilities.

This module provides the round_half_up function and the bounded score
helpers shared by the category scorer and the aggregator, so that the
same content item always produces the same numbers.
"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float) -> int:
    """
    Round a number to an integer using "round half up" strategy.

    0.5 always rounds up, avoiding Python's default banker's rounding.

    Args:
        value: Number to round

    Returns:
        Rounded integer

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(7.5)
        8
        >>> round_half_up(2.4)
        2
    """
    # Convert through str so float noise like 6.499999999999999 stays below .5
    d = Decimal(str(value))
    rounded = d.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(rounded)


def compute_percentage(part: int, total: int) -> int:
    """
    Compute an integer percentage.

    Formula:
        percentage = round_half_up(part / total × 100), or 0 when total is 0

    Examples:
        >>> compute_percentage(1, 3)
        33
        >>> compute_percentage(0, 0)
        0
    """
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)


def compute_bounded_score(raw_score: float, max_score: int) -> int:
    """
    Round a raw score and clamp it to [0, max_score].

    Examples:
        >>> compute_bounded_score(7.5, 15)
        8
        >>> compute_bounded_score(20.000000000000004, 20)
        20
    """
    score = round_half_up(raw_score)
    return max(0, min(score, max_score))
