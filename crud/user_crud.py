from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import desc
from core.logging import get_logger
from crud.common import commit_or_raise
from models.account import Account
from models.enums import UserGroup, UserRole
from models.user import User
from registration.shape import StatefulRegistration, dump_registration
from schemas.user_schema import UserCreate, UserUpdate

logger = get_logger(__name__)


def get_user(db: Session, user_id: str):
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def get_user_by_account(db: Session, provider: str, provider_account_id: str):
    return (
        db.query(User)
        .join(Account, Account.user_id == User.id)
        .filter(Account.provider == provider, Account.provider_account_id == provider_account_id)
        .first()
    )


def list_users(
    db: Session,
    role: UserRole | None = None,
    group: UserGroup | None = None,
    skip: int = 0,
    limit: int = 100,
):
    q = db.query(User)
    if role is not None:
        q = q.filter(User.role == role)
    if group is not None:
        q = q.filter(User.group == group)
    return q.order_by(desc(User.registration_time)).offset(skip).limit(limit).all()


def create_user(
    db: Session,
    payload: UserCreate,
    role: UserRole = UserRole.NONE,
    group: UserGroup = UserGroup.NONE,
):
    data = payload.model_dump(exclude_none=True)
    user = User(**data, role=role, group=group)
    db.add(user)
    commit_or_raise(db, user)
    return user


def update_user(db: Session, user_id: str, payload: UserUpdate):
    user = get_user(db, user_id)
    if not user:
        return None
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(user, k, v)
    commit_or_raise(db, user)
    return user


def set_user_role(db: Session, user_id: str, role: UserRole):
    user = get_user(db, user_id)
    if not user:
        return None
    previous = user.role
    user.role = role
    commit_or_raise(db, user)
    logger.info("User role changed", extra={"user_id": user_id, "from": previous, "to": role})
    return user


def set_user_group(db: Session, user_id: str, group: UserGroup):
    user = get_user(db, user_id)
    if not user:
        return None
    user.group = group
    commit_or_raise(db, user)
    logger.info("User group changed", extra={"user_id": user_id, "group": group})
    return user


def save_registration(db: Session, user_id: str, registration: StatefulRegistration):
    """Store validated answers; a user with no role becomes a registerant."""
    user = get_user(db, user_id)
    if not user:
        return None
    user.registration = dump_registration(registration)
    user.registration_time = datetime.now(timezone.utc)
    if user.role == UserRole.NONE:
        user.role = UserRole.REGISTERANT
    commit_or_raise(db, user)
    return user
