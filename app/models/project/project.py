from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------- Project Models ----------#

class EnergyType(str, Enum):
    SOLAR = "solar"
    WIND = "wind"
    HYDRO = "hydro"
    BIOMASS = "biomass"
    GEOTHERMAL = "geothermal"
    OTHER = "other"


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    OPERATIONAL = "operational"
    DECOMMISSIONED = "decommissioned"


class Project(BaseModel):
    name: str = Field(..., min_length=1)
    owner: str = Field(..., min_length=1)
    energy_type: EnergyType = Field(..., alias="energyType")
    capacity: float = Field(..., ge=0, description="Capacity in MW")
    location: str = Field(..., min_length=1)
    status: ProjectStatus
    year: int
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class ProjectUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    owner: Optional[str] = Field(None, min_length=1)
    energy_type: Optional[EnergyType] = Field(None, alias="energyType")
    capacity: Optional[float] = Field(None, ge=0)
    location: Optional[str] = Field(None, min_length=1)
    status: Optional[ProjectStatus] = None
    year: Optional[int] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="forbid")

    @model_validator(mode="after")
    def required_fields_not_null(self):
        cleared = sorted(
            name for name in self.model_fields_set
            if name not in ("latitude", "longitude") and getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self


class ProjectOut(Project):
    id: str = Field(..., alias="_id")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    model_config = ConfigDict(protected_namespaces=(), populate_by_name=True)


class ProjectFilters(BaseModel):
    """Query-string filters for project listings."""

    energy_type: Optional[str] = Field(None, alias="energyType")
    status: Optional[str] = None
    location: Optional[str] = None
    search: Optional[str] = None
    sort_by: Optional[str] = Field(None, alias="sortBy")
    sort_order: Optional[Literal["asc", "desc"]] = Field(None, alias="sortOrder")
    page: int = 1
    limit: int = 10
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ProjectPage(BaseModel):
    projects: List[ProjectOut]
    total: int
    page: int
    limit: int


class SyncOut(BaseModel):
    message: str
    projects: List[ProjectOut]
