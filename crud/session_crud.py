from datetime import datetime, timedelta, timezone
from sqlalchemy.orm import Session
from core.config import settings
from crud.common import commit_or_raise
from models.session import Session as SessionModel
from models.user import User
from schemas.session_schema import SessionCreate, SessionUpdate


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_session(db: Session, session_token: str):
    return db.query(SessionModel).filter(SessionModel.session_token == session_token).first()


def get_session_and_user(db: Session, session_token: str):
    """(session, user) for a live session, or None if missing or expired."""
    row = (
        db.query(SessionModel, User)
        .join(User, User.id == SessionModel.user_id)
        .filter(SessionModel.session_token == session_token)
        .first()
    )
    if not row:
        return None
    s, user = row
    if as_utc(s.expires) < datetime.now(timezone.utc):
        db.delete(s)
        commit_or_raise(db)
        return None
    return s, user


def list_sessions(db: Session, user_id: str | None = None, skip: int = 0, limit: int = 100):
    q = db.query(SessionModel)
    if user_id:
        q = q.filter(SessionModel.user_id == user_id)
    return q.order_by(SessionModel.expires).offset(skip).limit(limit).all()


def default_expiry(now: datetime | None = None) -> datetime:
    return (now or datetime.now(timezone.utc)) + timedelta(days=settings.SESSION_MAX_AGE_DAYS)


def create_session(db: Session, payload: SessionCreate):
    s = SessionModel(
        session_token=payload.session_token,
        user_id=payload.user_id,
        expires=payload.expires or default_expiry(),
    )
    db.add(s)
    commit_or_raise(db, s)
    return s


def update_session(db: Session, session_token: str, payload: SessionUpdate):
    s = get_session(db, session_token)
    if not s:
        return None
    if payload.expires is not None:
        s.expires = payload.expires
    commit_or_raise(db, s)
    return s


def delete_session(db: Session, session_token: str) -> bool:
    s = get_session(db, session_token)
    if not s:
        return False
    db.delete(s)
    commit_or_raise(db)
    return True


def purge_expired_sessions(db: Session, now: datetime | None = None) -> int:
    cutoff = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    if db.get_bind().dialect.name == "sqlite":
        # Stored without an offset
        cutoff = cutoff.replace(tzinfo=None)
    count = (
        db.query(SessionModel)
        .filter(SessionModel.expires < cutoff)
        .delete(synchronize_session=False)
    )
    commit_or_raise(db)
    return count
