from fastapi import APIRouter, Depends, Request, status
from app.controllers.v1.query_params import parse_filters
from app.database.store import EntityStore, get_user_store
from app.models.auth.auth import AuthUser
from app.models.user.user import User, UserFilters, UserOut, UserPage, UserUpdate
from app.services.auth.auth_utils import require_admin
from app.services.user_management.user_helper import create_user_helper, get_user_helper, get_users_helper, update_user_helper, delete_user_helper


router = APIRouter(prefix="/api/users")

# ---------- USER CRUD OPERATIONS (admin only) ----------

@router.get("", response_model=UserPage)
async def get_users(request: Request, store: EntityStore = Depends(get_user_store), _: AuthUser = Depends(require_admin)):
    """List users, filtered by role/search and paginated."""
    filters = parse_filters(UserFilters, request)
    return await get_users_helper(store, filters)

@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, store: EntityStore = Depends(get_user_store), _: AuthUser = Depends(require_admin)):
    return await get_user_helper(store, user_id)

@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: User, store: EntityStore = Depends(get_user_store), _: AuthUser = Depends(require_admin)):
    """Create a new user."""
    return await create_user_helper(store, payload)

@router.put("/{user_id}", response_model=UserOut)
async def update_user(user_id: str, payload: UserUpdate, store: EntityStore = Depends(get_user_store), _: AuthUser = Depends(require_admin)):
    """Update a user by ID."""
    return await update_user_helper(store, user_id, payload)

@router.delete("/{user_id}", response_model=dict)
async def delete_user(user_id: str, store: EntityStore = Depends(get_user_store), _: AuthUser = Depends(require_admin)):
    """Delete a user by ID."""
    return await delete_user_helper(store, user_id)
