from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.organization_crud import (
    list_organizations,
    get_organization,
    create_organization,
    update_organization,
    delete_organization,
)
from models.enums import SponsorshipLevel
from schemas.organization_schema import OrganizationCreate, OrganizationResponse, OrganizationUpdate


router = APIRouter(prefix="/organizations", tags=["Organizations"])


@router.get("/", response_model=list[OrganizationResponse])
def list_all(level: SponsorshipLevel | None = None, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return list_organizations(db, level=level, skip=skip, limit=limit)


@router.get("/{organization_id}", response_model=OrganizationResponse)
def read_one(organization_id: int, db: Session = Depends(get_db)):
    org = get_organization(db, organization_id)
    if not org:
        raise HTTPException(status_code=404, detail="Organization not found")
    return org


@router.post("/", response_model=OrganizationResponse, status_code=201, dependencies=[Depends(require_admin)])
def create(payload: OrganizationCreate, db: Session = Depends(get_db)):
    return create_organization(db, payload)


@router.patch("/{organization_id}", response_model=OrganizationResponse, dependencies=[Depends(require_admin)])
def update(organization_id: int, payload: OrganizationUpdate, db: Session = Depends(get_db)):
    org = update_organization(db, organization_id, payload)
    if not org:
        raise HTTPException(status_code=404, detail="Organization not found")
    return org


@router.delete("/{organization_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete(organization_id: int, db: Session = Depends(get_db)):
    ok = delete_organization(db, organization_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Organization not found")
    return None
