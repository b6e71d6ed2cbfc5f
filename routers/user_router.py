from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import get_current_user, require_admin
from core.database import get_db
from crud.user_crud import (
    list_users as list_users_crud,
    get_user as get_user_crud,
    create_user as create_user_crud,
    update_user as update_user_crud,
    set_user_role,
    set_user_group,
    save_registration,
)
from models.enums import UserGroup, UserRole
from registration.shape import dump_registration, load_registration
from registration.validation import validate_submission
from schemas.user_schema import UserCreate, UserGroupUpdate, UserResponse, UserRoleUpdate, UserUpdate

router = APIRouter(prefix="/users", tags=["Users"])

# Only a super admin may hand out admin rights
PRIVILEGED_ROLES = {UserRole.ADMIN, UserRole.SUPER_ADMIN}


@router.get("/", response_model=list[UserResponse])
def list_users(
    role: UserRole | None = None,
    group: UserGroup | None = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return list_users_crud(db, role=role, group=group, skip=skip, limit=limit)


@router.get("/me", response_model=UserResponse)
def get_me(current_user=Depends(get_current_user)):
    return current_user


@router.get("/me/registration")
def get_my_registration(current_user=Depends(get_current_user)):
    registration = load_registration(current_user.registration, user_id=current_user.id)
    if registration is None:
        return None
    return dump_registration(registration)


@router.put("/me/registration", response_model=UserResponse)
def submit_my_registration(
    answers: dict = Body(...),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    registration = validate_submission(answers)
    return save_registration(db, current_user.id, registration)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    user = get_user_crud(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/", response_model=UserResponse, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return create_user_crud(db, payload)


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(user_id: str, payload: UserUpdate, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    user = update_user_crud(db, user_id, payload)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.patch("/{user_id}/role", response_model=UserResponse)
def update_role(
    user_id: str,
    payload: UserRoleUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin),
):
    if payload.role in PRIVILEGED_ROLES and admin.role != UserRole.SUPER_ADMIN:
        raise HTTPException(status_code=403, detail="Super admin role required")
    user = set_user_role(db, user_id, payload.role)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.patch("/{user_id}/group", response_model=UserResponse)
def update_group(
    user_id: str,
    payload: UserGroupUpdate,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    user = set_user_group(db, user_id, payload.group)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
