"""
Stored shape of registration answers (``User.registration``).

One sub-object per form group, one key per question. Validation is strict:
legacy or hand-edited values are reported as a mismatch instead of being
coerced into something that merely looks right.
"""
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from core.errors import ShapeMismatch
from core.logging import get_logger

logger = get_logger(__name__)

RegistrationValue = Union[StrictStr, StrictInt, StrictFloat, list[StrictStr]]


class _AnswerGroup(BaseModel):
    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class GeneralAnswers(_AnswerGroup):
    first_name: RegistrationValue
    last_name: RegistrationValue
    age: RegistrationValue
    gender: RegistrationValue
    race: RegistrationValue
    ethnicity: RegistrationValue


class SchoolingAnswers(_AnswerGroup):
    university: RegistrationValue
    university_other: RegistrationValue
    major: RegistrationValue
    level_of_study: RegistrationValue


class ExperienceAnswers(_AnswerGroup):
    num_prev_hackathons: RegistrationValue
    software_experience: RegistrationValue


class EventQuestionAnswers(_AnswerGroup):
    heard_from: RegistrationValue
    shirt_size: RegistrationValue
    dietary_restrictions: RegistrationValue
    allergies: RegistrationValue
    accomodations: RegistrationValue


class SponsorshipAnswers(_AnswerGroup):
    github: RegistrationValue
    linkedin: RegistrationValue
    personal_site: RegistrationValue
    companies: RegistrationValue


class StatefulRegistration(_AnswerGroup):
    general: GeneralAnswers
    schooling: SchoolingAnswers
    experience: ExperienceAnswers
    event_questions: EventQuestionAnswers
    sponsorship: SponsorshipAnswers


def dump_registration(registration: StatefulRegistration) -> dict[str, Any]:
    """JSON-ready dict keyed by group and question names."""
    return registration.model_dump(by_alias=True)


def load_registration(raw: Any, *, strict: bool = False, user_id: str | None = None) -> StatefulRegistration | None:
    """Parse a stored registration value.

    Returns None for a missing value. A value that does not fit the shape is
    logged and treated as missing, or raises ShapeMismatch when ``strict``.
    """
    if raw is None:
        return None
    try:
        return StatefulRegistration.model_validate(raw)
    except PydanticValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        if strict:
            raise ShapeMismatch(errors) from exc
        logger.warning(
            "Stored registration does not match the answer shape",
            extra={"user_id": user_id, "errors": errors},
        )
        return None
