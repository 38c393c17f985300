import bcrypt
from datetime import datetime, timedelta, timezone
from jose import jwt
from config import JWT_CONFIG
from fastapi import HTTPException, Depends
from fastapi import status
from jose import JWTError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.models.auth.auth import AuthUser

# --------------------------------------------------------------------
# Password hashing
# --------------------------------------------------------------------
def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


# --------------------------------------------------------------------
# JWT token creation
# --------------------------------------------------------------------
def create_access_token(user: AuthUser, expires_delta: timedelta | None = None) -> str:
    """Create a short-lived JWT access token carrying the caller's identity and role."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=JWT_CONFIG["ACCESS_TOKEN_EXPIRE_MINUTES"]))
    to_encode = {
        "sub": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role.value,
        "exp": expire,
    }
    return jwt.encode(to_encode, JWT_CONFIG["JWT_SECRET_KEY"], algorithm=JWT_CONFIG["JWT_ALGORITHM"])


def create_refresh_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a long-lived JWT refresh token."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=JWT_CONFIG["REFRESH_TOKEN_EXPIRE_DAYS"]))
    to_encode = {"sub": user_id, "exp": expire}
    return jwt.encode(to_encode, JWT_CONFIG["JWT_REFRESH_SECRET_KEY"], algorithm=JWT_CONFIG["JWT_ALGORITHM"])


# --------------------------------------------------------------------
# Token verification
# --------------------------------------------------------------------
def verify_access_token(token: str) -> AuthUser:
    """Verify an access token and return the identity it carries."""
    try:
        payload = jwt.decode(token, JWT_CONFIG["JWT_SECRET_KEY"], algorithms=[JWT_CONFIG["JWT_ALGORITHM"]])
        return AuthUser(
            id=payload["sub"],
            email=payload["email"],
            name=payload["name"],
            role=payload["role"],
        )
    except (JWTError, KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired access token",
            headers={"WWW-Authenticate": "Bearer"},
        )


def verify_refresh_token(token: str) -> dict:
    """Verify and decode a refresh token."""
    try:
        return jwt.decode(token, JWT_CONFIG["JWT_REFRESH_SECRET_KEY"], algorithms=[JWT_CONFIG["JWT_ALGORITHM"]])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
            headers={"WWW-Authenticate": "Bearer"},
        )


security_scheme = HTTPBearer(auto_error=False)


def require_auth(credentials: HTTPAuthorizationCredentials | None = Depends(security_scheme)) -> AuthUser:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return verify_access_token(credentials.credentials)


def require_role(required_role: str):
    def dependency(user: AuthUser = Depends(require_auth)) -> AuthUser:
        if user.role.value != required_role:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required" if required_role == "admin" else "Insufficient permissions")
        return user
    return dependency


require_admin = require_role("admin")
