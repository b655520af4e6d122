"""Diagnostics package.

Light-weight, printable checks over the registered engines.
"""

__all__ = ["pretty_month", "new_years_table", "round_trip"]
