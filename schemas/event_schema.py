from datetime import date
from pydantic import BaseModel, Field
from models.enums import EventType
from schemas.organization_schema import OrganizationResponse


class EventBase(BaseModel):
    name: str = Field(max_length=255)
    desc: str = Field(max_length=511)
    href: str | None = None
    image: str | None = None
    hosts: str | None = None
    location: str | None = None
    start_date: date
    end_date: date
    event_type: EventType = EventType.GENERAL


class EventCreate(EventBase):
    pass


class EventUpdate(BaseModel):
    name: str | None = None
    desc: str | None = None
    href: str | None = None
    image: str | None = None
    hosts: str | None = None
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    event_type: EventType | None = None


class EventSponsorsUpdate(BaseModel):
    sponsor_ids: list[int]


class EventResponse(EventBase):
    id: int
    sponsors: list[OrganizationResponse] = []

    model_config = {"from_attributes": True}
