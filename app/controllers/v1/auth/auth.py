from fastapi import APIRouter, Depends
from app.database.store import EntityStore, get_user_store
from app.models.auth.auth import AuthUser, LoginPayload, RefreshPayload, TokenPair, UserAuthOut, VerifyOut
from app.services.auth.auth import login_user, refresh_tokens
from app.services.auth.auth_utils import require_auth
router = APIRouter(prefix="/api/auth")


@router.post("/login", response_model=UserAuthOut)
async def login(payload: LoginPayload, store: EntityStore = Depends(get_user_store)):
    return await login_user(store, payload.email, payload.password)


@router.post("/verify", response_model=VerifyOut)
async def verify(user: AuthUser = Depends(require_auth)):
    return VerifyOut(user=user)


@router.post("/refresh", response_model=TokenPair)
async def refresh(payload: RefreshPayload, store: EntityStore = Depends(get_user_store)):
    return await refresh_tokens(store, payload.refresh_token)
