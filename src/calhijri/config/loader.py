"""Load alternative engine specs from TOML.

Sparse contract: every key is optional and falls back to the default
Umm al-Qura spec. Example::

    name = "local_table"
    month_lengths = [30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 30]
    locale = "en"

    [epoch]
    hijri = [1, 1, 1446]
    gregorian = "2024-07-07"
"""

from __future__ import annotations

import logging
import os
import tomllib
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

from calhijri.core.errors import SpecError
from calhijri.core.types import EngineId, HijriCalendarSpec, HijriDate
from calhijri.engines.specs import UMM_ALQURA

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CALHIJRI_CONFIG"


def spec_from_dict(data: Dict[str, Any], *, base: HijriCalendarSpec = UMM_ALQURA) -> HijriCalendarSpec:
    name = data.get("name", "custom")
    if not isinstance(name, str) or not name:
        raise SpecError(f"name must be a non-empty string, got {name!r}")

    lengths = data.get("month_lengths", base.month_lengths)
    if not isinstance(lengths, (list, tuple)) or not all(isinstance(n, int) for n in lengths):
        raise SpecError(f"month_lengths must be a list of integers, got {lengths!r}")

    epoch = data.get("epoch", {})
    if not isinstance(epoch, dict):
        raise SpecError("[epoch] must be a table")

    epoch_hijri = base.epoch_hijri
    if "hijri" in epoch:
        raw = epoch["hijri"]
        if not isinstance(raw, list) or len(raw) != 3 or not all(isinstance(v, int) for v in raw):
            raise SpecError(f"epoch.hijri must be [day, month, year], got {raw!r}")
        epoch_hijri = HijriDate(day=raw[0], month=raw[1], year=raw[2])

    epoch_gregorian = base.epoch_gregorian
    if "gregorian" in epoch:
        raw = epoch["gregorian"]
        if isinstance(raw, date):
            epoch_gregorian = raw
        else:
            try:
                epoch_gregorian = date.fromisoformat(str(raw))
            except ValueError as exc:
                raise SpecError(f"epoch.gregorian must be YYYY-MM-DD, got {raw!r}") from exc

    locale = data.get("locale", base.locale)
    if not isinstance(locale, str):
        raise SpecError(f"locale must be a string, got {locale!r}")

    return HijriCalendarSpec(
        id=EngineId(family="custom", name=name, version=str(data.get("version", "1"))),
        month_lengths=tuple(lengths),
        epoch_hijri=epoch_hijri,
        epoch_gregorian=epoch_gregorian,
        locale=locale,
        meta=(("source", str(data.get("source", "config"))),),
    )


def load_spec(path: Path) -> HijriCalendarSpec:
    if not path.is_file():
        raise SpecError(f"Config file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise SpecError(f"Invalid TOML in {path}: {exc}") from exc
    spec = spec_from_dict(data)
    logger.debug("Loaded engine spec %s from %s", spec.id.name, path)
    return spec


def find_config(explicit: Optional[str] = None) -> Optional[Path]:
    """Explicit path first, then the CALHIJRI_CONFIG environment variable."""
    if explicit:
        return Path(explicit)
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return None
