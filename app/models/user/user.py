from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# ---------- User Models ----------

class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: Role = Role.USER


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)
    role: Optional[Role] = None
    model_config = ConfigDict(extra="forbid")


class UserOut(BaseModel):
    id: str = Field(..., alias="_id")
    name: str
    email: EmailStr
    role: Role
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    model_config = ConfigDict(protected_namespaces=(), populate_by_name=True)


class UserFilters(BaseModel):
    role: Optional[str] = None
    search: Optional[str] = None
    sort_by: Optional[str] = Field(None, alias="sortBy")
    sort_order: Optional[Literal["asc", "desc"]] = Field(None, alias="sortOrder")
    page: int = 1
    limit: int = 10
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class UserPage(BaseModel):
    users: List[UserOut]
    total: int
    page: int
    limit: int
