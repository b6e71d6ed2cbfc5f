from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.event_crud import list_events, get_event, create_event, update_event, delete_event, set_event_sponsors
from models.enums import EventType
from schemas.event_schema import EventCreate, EventResponse, EventSponsorsUpdate, EventUpdate


router = APIRouter(prefix="/events", tags=["Events"])


@router.get("/", response_model=list[EventResponse])
def list_all(event_type: EventType | None = None, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return list_events(db, event_type=event_type, skip=skip, limit=limit)


@router.get("/{event_id}", response_model=EventResponse)
def read_one(event_id: int, db: Session = Depends(get_db)):
    ev = get_event(db, event_id)
    if not ev:
        raise HTTPException(status_code=404, detail="Event not found")
    return ev


@router.post("/", response_model=EventResponse, status_code=201, dependencies=[Depends(require_admin)])
def create(payload: EventCreate, db: Session = Depends(get_db)):
    return create_event(db, payload)


@router.patch("/{event_id}", response_model=EventResponse, dependencies=[Depends(require_admin)])
def update(event_id: int, payload: EventUpdate, db: Session = Depends(get_db)):
    ev = update_event(db, event_id, payload)
    if not ev:
        raise HTTPException(status_code=404, detail="Event not found")
    return ev


@router.put("/{event_id}/sponsors", response_model=EventResponse, dependencies=[Depends(require_admin)])
def replace_sponsors(event_id: int, payload: EventSponsorsUpdate, db: Session = Depends(get_db)):
    ev = set_event_sponsors(db, event_id, payload.sponsor_ids)
    if not ev:
        raise HTTPException(status_code=404, detail="Event or sponsor not found")
    return ev


@router.delete("/{event_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete(event_id: int, db: Session = Depends(get_db)):
    ok = delete_event(db, event_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Event not found")
    return None
