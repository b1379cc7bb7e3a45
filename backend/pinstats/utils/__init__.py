"""Utility modules for the pinstats application."""

from .parsing import parse_number, parse_int, parse_count
from .statistics import safe_ratio, win_rate

__all__ = [
    "parse_number",
    "parse_int",
    "parse_count",
    "safe_ratio",
    "win_rate",
]
