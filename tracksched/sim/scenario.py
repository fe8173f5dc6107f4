import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from tracksched.core.models import Train, RailwayConfig, Schedule, Disruption

DATA_DIR = Path(__file__).parents[1] / "data"
SAMPLE_SCENARIO = DATA_DIR / "sample_scenario.json"


def load_scenario(path: Optional[Path] = None) -> Tuple[List[Train], RailwayConfig, Disruption]:
    data = json.loads((path or SAMPLE_SCENARIO).read_text(encoding="utf-8"))
    trains = [Train(**t) for t in data["trains"]]
    config = RailwayConfig(**data["config"])
    disruption = Disruption(**data["disruption"])
    return trains, config, disruption


def gantt_json(schedule: Schedule, trains: List[Train]) -> List[Dict[str, Any]]:
    # Convert to a simple Gantt format: one row per assignment, grouped by track
    by_id = {t.id: t for t in trains}
    rows = []
    for a in schedule.assignments:
        t = by_id.get(a.train_id)
        if t is None or t.duration is None:
            continue
        rows.append({
            "train": a.train_id,
            "track": a.track_id,
            "start": a.actual_arrival,
            "end": a.actual_arrival + t.duration,
            "delay": a.delay,
            "priority": t.priority,
        })
    rows.sort(key=lambda r: (r["track"], r["start"]))
    return rows
