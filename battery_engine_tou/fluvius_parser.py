# battery_engine_tou/fluvius_parser.py

from __future__ import annotations
import logging
import math
from datetime import datetime
from typing import Dict, List

from .types import EnergyInterval

logger = logging.getLogger(__name__)

BOM = "\ufeff"
DELIMITER = ";"
MIN_COLUMNS = 9

# Kolommen in de kwartierexport
COL_START_DATE = 0
COL_START_TIME = 1
COL_END_DATE = 2
COL_END_TIME = 3
COL_REGISTER = 7
COL_VOLUME = 8


def _parse_timestamp(date_str: str, time_str: str) -> datetime:
    """Datum DD-MM-YYYY, tijd HH:MM:SS (lokale tijd)."""
    return datetime.strptime(f"{date_str.strip()} {time_str.strip()}", "%d-%m-%Y %H:%M:%S")


def _parse_volume(raw: str) -> float:
    """
    Komma als decimaalteken. Lege waarden (bv. "Geen verbruik") en
    onleesbare waarden tellen als 0.0.
    """
    if raw is None or raw.strip() == "":
        return 0.0
    try:
        value = float(raw.strip().replace(",", "."))
    except ValueError:
        return 0.0
    # float() aanvaardt ook "nan" en "inf"
    return value if math.isfinite(value) else 0.0


def parse_fluvius_csv(raw: str) -> List[EnergyInterval]:
    """
    Zet een Fluvius kwartierexport om naar EnergyIntervals.

    Elke tijdstap staat twee keer in het bestand: één rij per register
    (Afname / Injectie). Beide rijen worden samengevoegd tot één interval.
    """
    if raw is None:
        return []

    raw = str(raw)
    if raw.startswith(BOM):
        raw = raw[len(BOM):]

    lines = [ln for ln in raw.strip().splitlines() if ln.strip() != ""]
    if len(lines) < 2:
        return []

    # header overslaan
    rows: Dict[datetime, dict] = {}
    skipped = 0

    for ln in lines[1:]:
        cols = ln.split(DELIMITER)
        if len(cols) < MIN_COLUMNS:
            skipped += 1
            continue

        try:
            start = _parse_timestamp(cols[COL_START_DATE], cols[COL_START_TIME])
        except ValueError:
            skipped += 1
            continue

        # sleutel op het tijdstip zelf, niet op de schrijfwijze
        row = rows.get(start)
        if row is None:
            try:
                end = _parse_timestamp(cols[COL_END_DATE], cols[COL_END_TIME])
            except ValueError:
                skipped += 1
                continue

            row = rows[start] = {
                "start_time": start,
                "end_time": end,
                "consumption_kwh": 0.0,
                "injection_kwh": 0.0,
            }

        register = cols[COL_REGISTER].lower()
        volume = _parse_volume(cols[COL_VOLUME])

        if "afname" in register:
            row["consumption_kwh"] = volume
        elif "injectie" in register:
            row["injection_kwh"] = volume

    if skipped:
        logger.warning("Fluvius CSV: skipped %d unreadable rows", skipped)

    intervals = [EnergyInterval(**row) for row in rows.values()]
    intervals.sort(key=lambda iv: iv.start_time)
    return intervals
