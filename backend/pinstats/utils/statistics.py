"""Statistical utility functions for safe calculations."""

from typing import Optional


def safe_ratio(numerator: float, denominator: float) -> Optional[float]:
    """
    Divide two numbers, returning None if the denominator is not positive.

    Args:
        numerator: The numerator
        denominator: The denominator

    Returns:
        Result of division or None
    """
    return numerator / denominator if denominator > 0 else None


def win_rate(wins: int, losses: int) -> Optional[float]:
    """Win rate over decisive games only; None when there are none."""
    return safe_ratio(wins, wins + losses)
