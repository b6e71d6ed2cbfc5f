from pydantic import BaseModel


class AccountBase(BaseModel):
    user_id: str
    type: str
    provider: str
    provider_account_id: str
    refresh_token: str | None = None
    access_token: str | None = None
    expires_at: int | None = None
    token_type: str | None = None
    scope: str | None = None
    id_token: str | None = None
    session_state: str | None = None


class AccountCreate(AccountBase):
    pass


class AccountResponse(AccountBase):
    model_config = {"from_attributes": True}
