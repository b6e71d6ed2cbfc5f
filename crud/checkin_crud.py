from sqlalchemy.orm import Session
from sqlalchemy import desc, func
from crud.common import commit_or_raise
from models.checkin import CheckIn
from schemas.checkin_schema import CheckInCreate


def create_check_in(db: Session, payload: CheckInCreate):
    # Repeat check-ins are recorded as separate rows
    ci = CheckIn(user_id=payload.user_id, event_id=payload.event_id)
    db.add(ci)
    commit_or_raise(db, ci)
    return ci


def list_check_ins(
    db: Session,
    user_id: str | None = None,
    event_id: int | None = None,
    skip: int = 0,
    limit: int = 100,
):
    q = db.query(CheckIn)
    if user_id:
        q = q.filter(CheckIn.user_id == user_id)
    if event_id is not None:
        q = q.filter(CheckIn.event_id == event_id)
    return q.order_by(desc(CheckIn.time), desc(CheckIn.id)).offset(skip).limit(limit).all()


def count_check_ins(db: Session, event_id: int, distinct_users: bool = False) -> int:
    col = func.count(func.distinct(CheckIn.user_id)) if distinct_users else func.count(CheckIn.id)
    return db.query(col).filter(CheckIn.event_id == event_id).scalar() or 0
