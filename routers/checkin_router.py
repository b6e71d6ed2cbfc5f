from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.checkin_crud import create_check_in, list_check_ins, count_check_ins
from schemas.checkin_schema import CheckInCreate, CheckInResponse


router = APIRouter(prefix="/checkins", tags=["Check-ins"], dependencies=[Depends(require_admin)])


@router.get("/", response_model=list[CheckInResponse])
def list_all(
    user_id: str | None = None,
    event_id: int | None = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return list_check_ins(db, user_id=user_id, event_id=event_id, skip=skip, limit=limit)


@router.get("/count")
def count(event_id: int, distinct_users: bool = False, db: Session = Depends(get_db)):
    return {"event_id": event_id, "count": count_check_ins(db, event_id, distinct_users=distinct_users)}


@router.post("/", response_model=CheckInResponse, status_code=201)
def create(payload: CheckInCreate, db: Session = Depends(get_db)):
    return create_check_in(db, payload)
