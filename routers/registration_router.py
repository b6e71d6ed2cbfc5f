from fastapi import APIRouter
from registration.form import get_registration_form

router = APIRouter(prefix="/registration", tags=["Registration"])


@router.get("/form")
def read_form():
    return get_registration_form().model_dump(by_alias=True)
