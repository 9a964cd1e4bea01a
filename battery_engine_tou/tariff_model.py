# battery_engine_tou/tariff_model.py

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List

from .types import RateSchedule, TariffTierDefinition, TierId

logger = logging.getLogger(__name__)

# Sentinel voor een uur dat in het schema ontbreekt
UNKNOWN_TIER: TierId = ""


# ============================================================
# Standaard tariefschema (piek / dal / superdal)
# ============================================================

DEFAULT_RATE_SCHEDULE = RateSchedule(
    tiers=[
        TariffTierDefinition(id="peak", name="Peak", rate=0.35, color="#FF6B6B"),
        TariffTierDefinition(id="dal", name="Dal", rate=0.28, color="#4DABF7"),
        TariffTierDefinition(id="superDal", name="Super-Dal", rate=0.19, color="#51CF66"),
    ],
    weekday_schedule={
        0: "dal",
        1: "superDal", 2: "superDal", 3: "superDal",
        4: "superDal", 5: "superDal", 6: "superDal",
        7: "peak", 8: "peak", 9: "peak", 10: "peak",
        11: "dal", 12: "dal", 13: "dal", 14: "dal", 15: "dal", 16: "dal",
        17: "peak", 18: "peak", 19: "peak", 20: "peak", 21: "peak",
        22: "dal", 23: "dal",
    },
    # Weekend: nooit piek, middag zakt naar superdal
    weekend_schedule={
        0: "dal",
        1: "superDal", 2: "superDal", 3: "superDal",
        4: "superDal", 5: "superDal", 6: "superDal",
        7: "dal", 8: "dal", 9: "dal", 10: "dal",
        11: "superDal", 12: "superDal", 13: "superDal",
        14: "superDal", 15: "superDal", 16: "superDal",
        17: "dal", 18: "dal", 19: "dal", 20: "dal",
        21: "dal", 22: "dal", 23: "dal",
    },
    injection_rate=0.05,
)


def is_weekend(timestamp: datetime) -> bool:
    # weekday(): maandag = 0 ... zaterdag = 5, zondag = 6
    return timestamp.weekday() >= 5


def classify_rate(timestamp: datetime, schedule: RateSchedule = DEFAULT_RATE_SCHEDULE) -> TierId:
    """
    Geeft het tijdsblok (tier id) voor een tijdstip.
    Ontbrekend uur in het schema → UNKNOWN_TIER, nooit een exception.
    """
    table = schedule.weekend_schedule if is_weekend(timestamp) else schedule.weekday_schedule
    return table.get(timestamp.hour, UNKNOWN_TIER)


def get_consumption_rate(timestamp: datetime, schedule: RateSchedule = DEFAULT_RATE_SCHEDULE) -> float:
    """
    Afnameprijs (€/kWh) voor een tijdstip.
    Een onbekend tijdsblok geldt bewust als gratis (0.0).
    """
    tier = schedule.find_tier(classify_rate(timestamp, schedule))
    return tier.rate if tier is not None else 0.0


@dataclass
class TariffModel:
    """Abstraheert alle tarieflogica van één RateSchedule."""
    schedule: RateSchedule

    def classify(self, timestamp: datetime) -> TierId:
        return classify_rate(timestamp, self.schedule)

    def get_import_price(self, timestamp: datetime) -> float:
        return get_consumption_rate(timestamp, self.schedule)

    def get_export_price(self) -> float:
        """Injectievergoeding: één vlak tarief, ongeacht het tijdsblok."""
        return self.schedule.injection_rate

    def validate(self) -> List[str]:
        """
        Sanity-check: elk uur 0–23 moet naar een bekend tijdsblok verwijzen.
        Geeft de gevonden problemen terug; gooit nooit.
        """
        problems: List[str] = []
        tables = (
            ("weekday", self.schedule.weekday_schedule),
            ("weekend", self.schedule.weekend_schedule),
        )
        for label, table in tables:
            for hour in range(24):
                tier_id = table.get(hour)
                if tier_id is None:
                    problems.append(f"{label} hour {hour}: no tier assigned")
                elif self.schedule.find_tier(tier_id) is None:
                    problems.append(f"{label} hour {hour}: unknown tier '{tier_id}'")

        for problem in problems:
            logger.warning("Rate schedule: %s (rate falls back to 0.0)", problem)

        return problems
