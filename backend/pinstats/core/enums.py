"""Shared enums used across features."""

from enum import Enum


class Provider(str, Enum):
    """Upstream ranking services the dashboard aggregates."""

    IFPA = "ifpa"
    MATCHPLAY = "matchplay"

    @property
    def display_name(self) -> str:
        """Human-readable provider name for warnings and error text."""
        return "IFPA" if self is Provider.IFPA else "Match Play"
