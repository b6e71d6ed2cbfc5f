from pydantic import BaseModel
from models.enums import SponsorshipLevel


class OrganizationBase(BaseModel):
    name: str | None = None
    desc: str | None = None
    href: str | None = None
    image: str | None = None
    level: SponsorshipLevel = SponsorshipLevel.NOT_SPECIFIED


class OrganizationCreate(OrganizationBase):
    pass


class OrganizationUpdate(BaseModel):
    name: str | None = None
    desc: str | None = None
    href: str | None = None
    image: str | None = None
    level: SponsorshipLevel | None = None


class OrganizationResponse(OrganizationBase):
    id: int

    model_config = {"from_attributes": True}
