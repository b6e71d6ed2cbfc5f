from datetime import datetime
from pydantic import BaseModel
from schemas.user_schema import UserResponse


class SessionBase(BaseModel):
    user_id: str
    session_token: str
    expires: datetime


class SessionCreate(SessionBase):
    # Defaults to SESSION_MAX_AGE_DAYS from now
    expires: datetime | None = None


class SessionUpdate(BaseModel):
    expires: datetime | None = None


class SessionResponse(SessionBase):
    model_config = {"from_attributes": True}


class SessionAndUserResponse(BaseModel):
    session: SessionResponse
    user: UserResponse
