"""Summary statistics over the whole project collection."""
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from app.models.analytics.analytics import EnergyShare, PercentageChanges, ProjectStats
from app.services.errors import CapacityParseError

OPERATIONAL_STATUS = "operational"


def round_half_up(value: float) -> int:
    # 12.5 -> 13, unlike the builtin round()
    return int(math.floor(value + 0.5))


def parse_capacity(record: Mapping[str, Any]) -> float:
    value = record.get("capacity")
    if isinstance(value, bool):
        raise CapacityParseError(record.get("_id"), value)
    try:
        capacity = float(value)
    except (TypeError, ValueError) as exc:
        raise CapacityParseError(record.get("_id"), value) from exc
    if math.isnan(capacity):
        raise CapacityParseError(record.get("_id"), value)
    return capacity


def compute_stats(
    projects: Sequence[Mapping[str, Any]],
    percentage_changes: Optional[Mapping[str, float]] = None,
) -> ProjectStats:
    total_capacity = math.fsum(parse_capacity(p) for p in projects)
    return ProjectStats(
        total_projects=len(projects),
        total_capacity=total_capacity,
        active_locations=len({p.get("location") for p in projects}),
        operational=sum(1 for p in projects if str(p.get("status", "")).lower() == OPERATIONAL_STATUS),
        percentage_changes=PercentageChanges(**(percentage_changes or {})),
    )


def energy_distribution(projects: Sequence[Mapping[str, Any]]) -> List[EnergyShare]:
    """Share of projects per energy type, in order of first appearance.

    Each share is rounded on its own, so the total can drift from 100.
    """
    counts: Dict[str, int] = {}
    for project in projects:
        energy_type = str(project.get("energy_type"))
        counts[energy_type] = counts.get(energy_type, 0) + 1

    total = len(projects)
    return [
        EnergyShare(type=energy_type, percentage=round_half_up(100 * count / total) if total else 0)
        for energy_type, count in counts.items()
    ]
