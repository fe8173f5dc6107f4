import logging
from dataclasses import replace
from typing import List, Optional

from .models import Train, RailwayConfig, Minutes

logger = logging.getLogger(__name__)


def compute_duration(section_length_km: float, speed_kmh: Optional[float]) -> Optional[Minutes]:
    """Minutes needed to traverse the section at a constant speed.

    Returns None when the speed is missing, zero or negative; such a train
    cannot be scheduled and is skipped by every later stage.
    """
    if speed_kmh is None or speed_kmh <= 0:
        return None
    return section_length_km * 60.0 / speed_kmh


def prepare_trains(trains: List[Train], config: RailwayConfig) -> List[Train]:
    # copies only; callers keep their train list untouched
    prepared = []
    for t in trains:
        duration = compute_duration(config.section_length, t.speed)
        if duration is None:
            logger.warning("Train %s has invalid speed %s; it will not be scheduled", t.id, t.speed)
        prepared.append(replace(t, duration=duration))
    return prepared
