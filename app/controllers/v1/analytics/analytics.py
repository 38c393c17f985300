from fastapi import APIRouter, Depends

from app.database.store import EntityStore, get_project_store
from app.models.analytics.analytics import ChartData, ProjectStats
from app.models.auth.auth import AuthUser
from app.services.analytics.analytics import get_chart_data_helper, get_stats_helper
from app.services.auth.auth_utils import require_auth

router = APIRouter(prefix="/api")


@router.get("/stats", response_model=ProjectStats)
async def get_stats(store: EntityStore = Depends(get_project_store), _: AuthUser = Depends(require_auth)):
    return await get_stats_helper(store)


@router.get("/charts", response_model=ChartData)
async def get_charts(store: EntityStore = Depends(get_project_store), _: AuthUser = Depends(require_auth)):
    return await get_chart_data_helper(store)
