from sqlalchemy.orm import Session
from crud.common import commit_or_raise
from models.event import Event
from models.enums import EventType
from models.organization import Organization
from schemas.event_schema import EventCreate, EventUpdate


def get_event(db: Session, event_id: int):
    return db.query(Event).filter(Event.id == event_id).first()


def list_events(db: Session, event_type: EventType | None = None, skip: int = 0, limit: int = 100):
    q = db.query(Event)
    if event_type is not None:
        q = q.filter(Event.event_type == event_type)
    return q.order_by(Event.start_date, Event.id).offset(skip).limit(limit).all()


def create_event(db: Session, payload: EventCreate):
    ev = Event(**payload.model_dump())
    db.add(ev)
    commit_or_raise(db, ev)
    return ev


def update_event(db: Session, event_id: int, payload: EventUpdate):
    ev = get_event(db, event_id)
    if not ev:
        return None
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(ev, k, v)
    commit_or_raise(db, ev)
    return ev


def set_event_sponsors(db: Session, event_id: int, sponsor_ids: list[int]):
    """Replace the event's sponsors. Returns None if the event or any sponsor is missing."""
    ev = get_event(db, event_id)
    if not ev:
        return None
    wanted = set(sponsor_ids)
    sponsors = db.query(Organization).filter(Organization.id.in_(wanted)).all() if wanted else []
    if len(sponsors) != len(wanted):
        return None
    ev.sponsors = sponsors
    commit_or_raise(db, ev)
    return ev


def delete_event(db: Session, event_id: int) -> bool:
    ev = get_event(db, event_id)
    if not ev:
        return False
    db.delete(ev)
    commit_or_raise(db)
    return True
