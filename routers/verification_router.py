from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.verification_crud import create_verification_token, use_verification_token
from schemas.verification_schema import VerificationTokenCreate, VerificationTokenResponse, VerificationTokenUse


router = APIRouter(prefix="/verification-tokens", tags=["Verification"], dependencies=[Depends(require_admin)])


@router.post("/", response_model=VerificationTokenResponse, status_code=201)
def create(payload: VerificationTokenCreate, db: Session = Depends(get_db)):
    return create_verification_token(db, payload)


@router.post("/use", response_model=VerificationTokenResponse)
def use(payload: VerificationTokenUse, db: Session = Depends(get_db)):
    vt = use_verification_token(db, payload.identifier, payload.token)
    if not vt:
        raise HTTPException(status_code=404, detail="Verification token not found or expired")
    return vt
