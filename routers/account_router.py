from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.account_crud import list_accounts, get_account, link_account, unlink_account
from schemas.account_schema import AccountCreate, AccountResponse


router = APIRouter(prefix="/accounts", tags=["Accounts"], dependencies=[Depends(require_admin)])


@router.get("/", response_model=list[AccountResponse])
def list_all(user_id: str | None = None, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return list_accounts(db, user_id=user_id, skip=skip, limit=limit)


@router.get("/{provider}/{provider_account_id}", response_model=AccountResponse)
def read_one(provider: str, provider_account_id: str, db: Session = Depends(get_db)):
    acc = get_account(db, provider, provider_account_id)
    if not acc:
        raise HTTPException(status_code=404, detail="Account not found")
    return acc


@router.post("/", response_model=AccountResponse, status_code=201)
def create(payload: AccountCreate, db: Session = Depends(get_db)):
    return link_account(db, payload)


@router.delete("/{provider}/{provider_account_id}", status_code=204)
def delete(provider: str, provider_account_id: str, db: Session = Depends(get_db)):
    ok = unlink_account(db, provider, provider_account_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Account not found")
    return None
