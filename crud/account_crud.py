from sqlalchemy.orm import Session
from crud.common import commit_or_raise
from models.account import Account
from schemas.account_schema import AccountCreate


def get_account(db: Session, provider: str, provider_account_id: str):
    return (
        db.query(Account)
        .filter(Account.provider == provider, Account.provider_account_id == provider_account_id)
        .first()
    )


def list_accounts(db: Session, user_id: str | None = None, skip: int = 0, limit: int = 100):
    q = db.query(Account)
    if user_id:
        q = q.filter(Account.user_id == user_id)
    return q.order_by(Account.provider, Account.provider_account_id).offset(skip).limit(limit).all()


def link_account(db: Session, payload: AccountCreate):
    acc = Account(**payload.model_dump())
    db.add(acc)
    commit_or_raise(db, acc)
    return acc


def unlink_account(db: Session, provider: str, provider_account_id: str) -> bool:
    acc = get_account(db, provider, provider_account_id)
    if not acc:
        return False
    db.delete(acc)
    commit_or_raise(db)
    return True
