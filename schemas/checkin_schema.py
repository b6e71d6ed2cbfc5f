from datetime import datetime
from pydantic import BaseModel


class CheckInCreate(BaseModel):
    user_id: str
    event_id: int


class CheckInResponse(CheckInCreate):
    id: int
    time: datetime | None = None

    model_config = {"from_attributes": True}
