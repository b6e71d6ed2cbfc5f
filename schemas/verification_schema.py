from datetime import datetime
from pydantic import BaseModel


class VerificationTokenBase(BaseModel):
    identifier: str
    token: str
    expires: datetime


class VerificationTokenCreate(VerificationTokenBase):
    pass


class VerificationTokenUse(BaseModel):
    identifier: str
    token: str


class VerificationTokenResponse(VerificationTokenBase):
    model_config = {"from_attributes": True}
