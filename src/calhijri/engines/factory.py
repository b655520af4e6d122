"""
calhijri.engines.factory
------------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from calhijri.core.types import HijriCalendarSpec
from calhijri.engines.tabular import TabularHijriEngine


def make_engine(spec: HijriCalendarSpec) -> TabularHijriEngine:
    """The universal entry point."""
    if spec.id.family not in ("table", "custom"):
        raise TypeError(f"Unknown engine family: {spec.id.family}")
    return TabularHijriEngine(spec)
