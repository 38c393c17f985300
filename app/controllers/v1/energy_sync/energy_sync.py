from fastapi import APIRouter, Depends

from app.database.store import EntityStore, get_project_store
from app.models.auth.auth import AuthUser
from app.models.project.project import SyncOut
from app.services.auth.auth_utils import require_admin
from app.services.energy_sync.energy_api import EnergyAPIService, get_energy_api_service, sync_external_projects_helper

router = APIRouter(prefix="/api/sync")


@router.post("/external", response_model=SyncOut)
async def sync_external(
    store: EntityStore = Depends(get_project_store),
    service: EnergyAPIService = Depends(get_energy_api_service),
    _: AuthUser = Depends(require_admin),
):
    """Import projects from the external energy API."""
    return await sync_external_projects_helper(store, service)
