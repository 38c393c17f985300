from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# ---------- Analytics Models ----------#

class PercentageChanges(BaseModel):
    projects: float = 0
    capacity: float = 0
    locations: float = 0
    operational: float = 0


class ProjectStats(BaseModel):
    total_projects: int = Field(..., alias="totalProjects")
    total_capacity: float = Field(..., alias="totalCapacity")
    active_locations: int = Field(..., alias="activeLocations")
    operational: int
    percentage_changes: PercentageChanges = Field(..., alias="percentageChanges")
    model_config = ConfigDict(populate_by_name=True)


class EnergyShare(BaseModel):
    type: str
    percentage: int
    color: Optional[str] = None


class CapacityTrend(BaseModel):
    month: str
    capacity: float


class ChartData(BaseModel):
    capacity_trends: List[CapacityTrend] = Field(..., alias="capacityTrends")
    energy_distribution: List[EnergyShare] = Field(..., alias="energyDistribution")
    model_config = ConfigDict(populate_by_name=True)
