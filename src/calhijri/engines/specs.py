from __future__ import annotations

from datetime import date
from typing import Dict

from ..core.types import EngineId, HijriCalendarSpec, HijriDate


# ============================================================
# TABLES
# ============================================================

# Alternating 30/29 layout: Muharram 30, Safar 29, ..., Dhu al-Hijjah 29.
# Sum is 354, the common Hijri year.
ALTERNATING_TABLE = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29)

# Same layout with a 30-day Dhu al-Hijjah (355-day year).
ALTERNATING_TABLE_LONG = ALTERNATING_TABLE[:11] + (30,)


# ============================================================
# EPOCH PAIRS
# ============================================================

# 1 Muharram 1446 AH per the Umm al-Qura calendar = Sunday 2024-07-07.
EPOCH_1446_HIJRI = HijriDate(day=1, month=1, year=1446)
EPOCH_1446_GREGORIAN = date(2024, 7, 7)


UMM_ALQURA = HijriCalendarSpec(
    id=EngineId(family="table", name="umm_alqura", version="1"),
    month_lengths=ALTERNATING_TABLE,
    epoch_hijri=EPOCH_1446_HIJRI,
    epoch_gregorian=EPOCH_1446_GREGORIAN,
    locale="ar",
    meta=(("source", "Umm al-Qura 1 Muharram 1446 anchor, alternating month table"),),
)

UMM_ALQURA_EN = UMM_ALQURA.tweak(
    id=EngineId(family="table", name="umm_alqura_en", version="1"),
    locale="en",
)

ALL_SPECS: Dict[str, HijriCalendarSpec] = {
    "umm_alqura": UMM_ALQURA,
    "umm_alqura_en": UMM_ALQURA_EN,
}

DEFAULT_ENGINE = "umm_alqura"
