"""Import of renewable projects from the NREL developer API."""
from typing import Any, Dict, List, Optional

import httpx
from fastapi import HTTPException, status
from pydantic import ValidationError

from app.database.store import EntityStore
from app.models.project.project import EnergyType, Project, ProjectOut, ProjectStatus, SyncOut
from app.utils.logger_utils import logger
from config import ENERGY_API_CONFIG


def normalize_energy_type(value: Optional[str]) -> EnergyType:
    lowered = (value or "").lower()
    for energy_type in EnergyType:
        if energy_type is not EnergyType.OTHER and energy_type.value in lowered:
            return energy_type
    return EnergyType.OTHER


def normalize_status(value: Optional[str]) -> ProjectStatus:
    lowered = (value or "").lower()
    if "operational" in lowered or "operating" in lowered:
        return ProjectStatus.OPERATIONAL
    if "construction" in lowered or "building" in lowered or "progress" in lowered:
        return ProjectStatus.IN_PROGRESS
    if "planning" in lowered or "proposed" in lowered:
        return ProjectStatus.PLANNING
    if "cancel" in lowered or "decommission" in lowered or "retired" in lowered:
        return ProjectStatus.DECOMMISSIONED
    return ProjectStatus.OPERATIONAL


def _first(item: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = item.get(key)
        if value not in (None, ""):
            return value
    return None


def transform_record(item: Dict[str, Any]) -> Project:
    """Map one upstream record (turbine database or project feed) onto a Project."""
    state = _first(item, "t_state", "state") or "Unknown"
    return Project(
        name=_first(item, "project_name", "p_name") or f"Project {item.get('case_id', 'unknown')}",
        owner=_first(item, "owner") or "Unknown Owner",
        energy_type=normalize_energy_type(_first(item, "energy_type") or "wind"),
        capacity=float(_first(item, "capacity_mw", "p_cap", "t_cap") or 0),
        location=f"{state}, USA",
        status=normalize_status(_first(item, "status") or "operational"),
        year=int(_first(item, "year", "p_year") or 2023),
        latitude=_first(item, "ylat", "latitude"),
        longitude=_first(item, "xlong", "longitude"),
    )


def transform_records(data: Any) -> List[Project]:
    if not isinstance(data, list):
        raise ValueError("Expected a JSON list of projects from the energy API")
    projects: List[Project] = []
    for item in data:
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object upstream record: {item!r}")
            continue
        try:
            projects.append(transform_record(item))
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning(f"Skipping upstream record {item.get('case_id')}: {e}")
    return projects


class EnergyAPIService:
    def __init__(self, base_url: str | None = None, api_key: str | None = None, limit: int | None = None, timeout: float | None = None):
        self.base_url = (base_url or ENERGY_API_CONFIG["BASE_URL"]).rstrip("/")
        self.api_key = api_key or ENERGY_API_CONFIG["API_KEY"]
        self.limit = limit or ENERGY_API_CONFIG["LIMIT"]
        self.timeout = timeout or ENERGY_API_CONFIG["TIMEOUT_SECONDS"]

    async def fetch_renewable_projects(self) -> List[Project]:
        url = f"{self.base_url}/uswtdb/v1/turbines"
        params = {"api_key": self.api_key, "format": "json", "limit": self.limit}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            return transform_records(response.json())


def get_energy_api_service() -> EnergyAPIService:
    return EnergyAPIService()


async def sync_external_projects_helper(store: EntityStore, service: EnergyAPIService) -> SyncOut:
    try:
        projects = await service.fetch_renewable_projects()
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"External energy API sync failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"External energy API error: {e}")

    added: List[ProjectOut] = []
    for project in projects:
        doc = await store.create(project.model_dump(mode="json"))
        added.append(ProjectOut(**doc))
    logger.info(f"Synced {len(added)} projects from external energy API")
    return SyncOut(message=f"Successfully synced {len(added)} projects", projects=added)
