from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.session_crud import (
    list_sessions,
    get_session_and_user,
    create_session,
    update_session,
    delete_session,
    purge_expired_sessions,
)
from schemas.session_schema import SessionAndUserResponse, SessionCreate, SessionResponse, SessionUpdate


router = APIRouter(prefix="/sessions", tags=["Sessions"], dependencies=[Depends(require_admin)])


@router.get("/", response_model=list[SessionResponse])
def list_all(user_id: str | None = None, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return list_sessions(db, user_id=user_id, skip=skip, limit=limit)


@router.get("/{session_token}", response_model=SessionAndUserResponse)
def read_one(session_token: str, db: Session = Depends(get_db)):
    found = get_session_and_user(db, session_token)
    if not found:
        raise HTTPException(status_code=404, detail="Session not found")
    s, user = found
    return {"session": s, "user": user}


@router.post("/", response_model=SessionResponse, status_code=201)
def create(payload: SessionCreate, db: Session = Depends(get_db)):
    return create_session(db, payload)


@router.post("/purge-expired")
def purge_expired(db: Session = Depends(get_db)):
    return {"deleted": purge_expired_sessions(db)}


@router.patch("/{session_token}", response_model=SessionResponse)
def update(session_token: str, payload: SessionUpdate, db: Session = Depends(get_db)):
    s = update_session(db, session_token, payload)
    if not s:
        raise HTTPException(status_code=404, detail="Session not found")
    return s


@router.delete("/{session_token}", status_code=204)
def delete(session_token: str, db: Session = Depends(get_db)):
    ok = delete_session(db, session_token)
    if not ok:
        raise HTTPException(status_code=404, detail="Session not found")
    return None
