from fastapi import HTTPException, status

from app.database.store import EntityStore
from app.models.project.project import Project, ProjectFilters, ProjectOut, ProjectPage, ProjectUpdate
from app.services.errors import NotFoundError, QueryValidationError
from app.services.query.fields import PROJECT_FIELDS
from app.services.query.query_engine import execute_query, validate_query
from app.utils.logger_utils import logger


async def create_project_helper(store: EntityStore, payload: Project) -> ProjectOut:
    try:
        doc = await store.create(payload.model_dump(mode="json"))
        logger.info(f"Project created: {doc['_id']} ({doc['name']})")
        return ProjectOut(**doc)
    except Exception as e:
        logger.error(f"create_project_helper error: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


async def get_projects_helper(store: EntityStore, filters: ProjectFilters) -> ProjectPage:
    try:
        validate_query(filters, PROJECT_FIELDS)
        records = await store.list()
        result = execute_query(records, filters, PROJECT_FIELDS)
        return ProjectPage(
            projects=[ProjectOut(**doc) for doc in result.items],
            total=result.total,
            page=filters.page,
            limit=filters.limit,
        )
    except QueryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"get_projects_helper error: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


async def get_project_helper(store: EntityStore, project_id: str) -> ProjectOut:
    try:
        doc = await store.get(project_id)
        if not doc:
            raise NotFoundError("Project", project_id)
        return ProjectOut(**doc)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


async def update_project_helper(store: EntityStore, project_id: str, payload: ProjectUpdate) -> ProjectOut:
    try:
        # explicit nulls are kept so optional coordinates can be cleared
        update_data = payload.model_dump(mode="json", exclude_unset=True)
        doc = await store.update(project_id, update_data)
        if doc is None:
            raise NotFoundError("Project", project_id)
        logger.info(f"Project updated: {project_id} fields={sorted(update_data)}")
        return ProjectOut(**doc)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(f"update_project_helper error: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


async def delete_project_helper(store: EntityStore, project_id: str) -> dict:
    try:
        deleted = await store.delete(project_id)
        if not deleted:
            raise NotFoundError("Project", project_id)
        logger.info(f"Project deleted: {project_id}")
        return {"message": "Project deleted successfully"}
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(f"delete_project_helper error: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
