from datetime import datetime, timezone
from sqlalchemy.orm import Session
from crud.common import commit_or_raise
from crud.session_crud import as_utc
from models.verification import VerificationToken
from schemas.verification_schema import VerificationTokenCreate


def get_verification_token(db: Session, identifier: str, token: str):
    return (
        db.query(VerificationToken)
        .filter(VerificationToken.identifier == identifier, VerificationToken.token == token)
        .first()
    )


def create_verification_token(db: Session, payload: VerificationTokenCreate):
    vt = VerificationToken(**payload.model_dump())
    db.add(vt)
    commit_or_raise(db, vt)
    return vt


def use_verification_token(db: Session, identifier: str, token: str):
    """Consume a token. Tokens are one-time; expired ones are removed and yield None."""
    vt = get_verification_token(db, identifier, token)
    if not vt:
        return None
    expired = as_utc(vt.expires) < datetime.now(timezone.utc)
    used = VerificationToken(identifier=vt.identifier, token=vt.token, expires=vt.expires)
    db.delete(vt)
    commit_or_raise(db)
    if expired:
        return None
    return used
