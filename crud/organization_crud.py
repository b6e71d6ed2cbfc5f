from sqlalchemy.orm import Session
from crud.common import commit_or_raise
from models.organization import Organization
from models.enums import SponsorshipLevel
from schemas.organization_schema import OrganizationCreate, OrganizationUpdate


def get_organization(db: Session, organization_id: int):
    return db.query(Organization).filter(Organization.id == organization_id).first()


def list_organizations(db: Session, level: SponsorshipLevel | None = None, skip: int = 0, limit: int = 100):
    q = db.query(Organization)
    if level is not None:
        q = q.filter(Organization.level == level)
    return q.order_by(Organization.id).offset(skip).limit(limit).all()


def create_organization(db: Session, payload: OrganizationCreate):
    org = Organization(**payload.model_dump())
    db.add(org)
    commit_or_raise(db, org)
    return org


def update_organization(db: Session, organization_id: int, payload: OrganizationUpdate):
    org = get_organization(db, organization_id)
    if not org:
        return None
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(org, k, v)
    commit_or_raise(db, org)
    return org


def delete_organization(db: Session, organization_id: int) -> bool:
    org = get_organization(db, organization_id)
    if not org:
        return False
    db.delete(org)
    commit_or_raise(db)
    return True
