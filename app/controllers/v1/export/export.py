from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.database.store import EntityStore, get_project_store
from app.models.auth.auth import AuthUser
from app.services.auth.auth_utils import require_admin
from app.services.export.export import (
    CSV_MEDIA_TYPE,
    XLSX_MEDIA_TYPE,
    collect_projects_for_export,
    export_filename,
    projects_to_csv,
    projects_to_excel,
)
from app.utils.logger_utils import logger

router = APIRouter(prefix="/api/export")


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/projects")
async def export_projects_csv(store: EntityStore = Depends(get_project_store), user: AuthUser = Depends(require_admin)):
    projects = await collect_projects_for_export(store)
    logger.info(f"CSV export of {len(projects)} projects by {user.id}")
    return Response(content=projects_to_csv(projects), media_type=CSV_MEDIA_TYPE, headers=_attachment(export_filename("csv")))


@router.get("/projects/excel")
async def export_projects_excel(store: EntityStore = Depends(get_project_store), user: AuthUser = Depends(require_admin)):
    projects = await collect_projects_for_export(store)
    logger.info(f"Excel export of {len(projects)} projects by {user.id}")
    return Response(content=projects_to_excel(projects), media_type=XLSX_MEDIA_TYPE, headers=_attachment(export_filename("xlsx")))
