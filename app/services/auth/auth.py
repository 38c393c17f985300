from fastapi import HTTPException, status

from app.database.store import EntityStore
from app.services.auth.auth_utils import verify_password, create_access_token, create_refresh_token, verify_refresh_token
from app.models.auth.auth import AuthUser, TokenPair, UserAuthOut
from app.models.user.user import UserOut
from app.utils.logger_utils import logger


def _auth_user(doc: dict) -> AuthUser:
    return AuthUser(id=doc["_id"], email=doc["email"], name=doc["name"], role=doc["role"])


def _token_pair(doc: dict) -> TokenPair:
    access = create_access_token(_auth_user(doc))
    refresh = create_refresh_token(doc["_id"])
    return TokenPair(access_token=access, refresh_token=refresh)


async def login_user(store: EntityStore, email: str, password: str) -> UserAuthOut:
    user = await store.find_one("email", email.strip().lower())
    if not user or not verify_password(password, user.get("password", "")):
        logger.warning(f"Failed login attempt for {email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    logger.info(f"User {user['_id']} logged in")
    return UserAuthOut(user=UserOut(**user), token=_token_pair(user))


async def refresh_tokens(store: EntityStore, refresh_token: str) -> TokenPair:
    data = verify_refresh_token(refresh_token)
    user = await store.get(data.get("sub", ""))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired refresh token")
    return _token_pair(user)
