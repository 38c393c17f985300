from pydantic import BaseModel, EmailStr, Field

from app.models.user.user import Role, UserOut

# ---------- Auth Schemas ----------#

class LoginPayload(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)

class RefreshPayload(BaseModel):
    refresh_token: str

class TokenPair(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"

class AuthUser(BaseModel):
    """Identity carried in the access token."""
    id: str
    email: EmailStr
    name: str
    role: Role

class UserAuthOut(BaseModel):
    user: UserOut
    token: TokenPair

class VerifyOut(BaseModel):
    user: AuthUser
