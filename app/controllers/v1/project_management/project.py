from fastapi import APIRouter, Depends, Request, status

from app.controllers.v1.query_params import parse_filters
from app.database.store import EntityStore, get_project_store
from app.models.auth.auth import AuthUser
from app.models.project.project import Project, ProjectFilters, ProjectOut, ProjectPage, ProjectUpdate
from app.services.auth.auth_utils import require_admin, require_auth
from app.services.project_management.project import (
    create_project_helper,
    get_project_helper,
    get_projects_helper,
    update_project_helper,
    delete_project_helper,
)


router = APIRouter(prefix="/api/projects")


@router.get("", response_model=ProjectPage)
async def list_projects(
    request: Request,
    store: EntityStore = Depends(get_project_store),
    _: AuthUser = Depends(require_auth),
):
    """Filter with energyType, status, location, search; sort with sortBy/sortOrder; page with page/limit."""
    filters = parse_filters(ProjectFilters, request)
    return await get_projects_helper(store, filters)


@router.get("/{project_id}", response_model=ProjectOut)
async def get_project(project_id: str, store: EntityStore = Depends(get_project_store), _: AuthUser = Depends(require_auth)):
    return await get_project_helper(store, project_id)


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
async def create_project(payload: Project, store: EntityStore = Depends(get_project_store), _: AuthUser = Depends(require_admin)):
    return await create_project_helper(store, payload)


@router.put("/{project_id}", response_model=ProjectOut)
async def update_project(project_id: str, payload: ProjectUpdate, store: EntityStore = Depends(get_project_store), _: AuthUser = Depends(require_admin)):
    return await update_project_helper(store, project_id, payload)


@router.delete("/{project_id}", response_model=dict)
async def delete_project(project_id: str, store: EntityStore = Depends(get_project_store), _: AuthUser = Depends(require_admin)):
    return await delete_project_helper(store, project_id)
