"""Electricity billing records, charges, binary storage and a menu-driven console."""

__version__ = "0.1.0"
__all__ = ["models", "registry", "formatting", "storage", "cli"]