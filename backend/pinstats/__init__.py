"""pinstats - pinball player stats aggregator (IFPA + Match Play)."""

__version__ = "0.1.0"
