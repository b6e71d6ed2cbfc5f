from datetime import datetime
from pydantic import BaseModel
from models.enums import UserRole, UserGroup


class UserBase(BaseModel):
    email: str
    name: str | None = None
    image: str | None = None


class UserCreate(UserBase):
    # Role and group are not accepted here; admins set them afterwards
    id: str | None = None
    email_verified: datetime | None = None

    model_config = {"extra": "forbid"}


class UserUpdate(BaseModel):
    name: str | None = None
    email: str | None = None
    image: str | None = None
    email_verified: datetime | None = None


class UserRoleUpdate(BaseModel):
    role: UserRole


class UserGroupUpdate(BaseModel):
    group: UserGroup


class UserResponse(UserBase):
    id: str
    email_verified: datetime | None = None
    registration_time: datetime | None = None
    role: UserRole
    group: UserGroup

    model_config = {
        "from_attributes": True,
    }
