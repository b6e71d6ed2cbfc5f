"""
Checks a registration submission against the form's constraints.

Every failing question is collected and reported together in a single
ValidationError; the first failure never short-circuits the rest.
"""
import math
import re
from collections.abc import Mapping
from typing import Any, assert_never

from core.errors import FieldError, ValidationError
from core.logging import get_logger
from registration.form import (
    NumberQuestion,
    Question,
    RadioQuestion,
    RegistrationForm,
    SelectQuestion,
    TextAreaQuestion,
    TextQuestion,
    get_registration_form,
)
from registration.shape import StatefulRegistration

logger = get_logger(__name__)

REQUIRED = "required"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list):
        return len(value) == 0
    return False


def empty_answer(question: Question) -> str | list[str]:
    """Value stored for an optional question left unanswered."""
    match question:
        case RadioQuestion():
            return []
        case TextQuestion():
            return question.initial_value
        case NumberQuestion() | TextAreaQuestion() | SelectQuestion():
            return ""
        case _:
            assert_never(question)


def _matches(pattern: str | None, text: str) -> bool:
    return pattern is None or re.fullmatch(pattern, text) is not None


def _check_text(question: TextQuestion | TextAreaQuestion, value: Any):
    if not isinstance(value, str):
        return None, "must be text"
    if isinstance(question, TextQuestion) and not _matches(question.pattern, value):
        return None, f"does not match pattern {question.pattern}"
    return value, None


def _parse_number(value: Any) -> tuple[int | float | None, str]:
    if isinstance(value, bool):
        return None, ""
    if isinstance(value, float):
        return value, str(value)
    if isinstance(value, int):
        try:
            return value, str(value)
        except ValueError:
            # Past the interpreter's int-to-str digit limit
            return None, ""
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text), text
        except ValueError:
            pass
        try:
            return float(text), text
        except ValueError:
            return None, text
    return None, ""


def _check_number(question: NumberQuestion, value: Any):
    number, text = _parse_number(value)
    if number is None or (isinstance(number, float) and not math.isfinite(number)):
        return None, "must be a number"
    if not _matches(question.pattern, text):
        return None, f"does not match pattern {question.pattern}"
    if question.min is not None and number < question.min:
        return None, f"must be at least {question.min}"
    if question.max is not None and number > question.max:
        return None, f"must be at most {question.max}"
    return number, None


def _check_choice(question: SelectQuestion | RadioQuestion, value: Any):
    allowed = {o.value for o in question.options}
    if isinstance(value, str):
        chosen = [value]
    elif isinstance(question, RadioQuestion) and isinstance(value, list) and all(isinstance(v, str) for v in value):
        chosen = value
    else:
        return None, "must be one of the listed options"
    invalid = [v for v in chosen if v not in allowed]
    if invalid:
        return None, f"not a valid option: {', '.join(invalid)}"
    return value, None


def check_answer(question: Question, value: Any) -> tuple[Any, str | None]:
    """Return (normalised value, None) or (None, reason)."""
    if _is_blank(value):
        if question.required:
            return None, REQUIRED
        return empty_answer(question), None

    match question:
        case TextQuestion() | TextAreaQuestion():
            return _check_text(question, value)
        case NumberQuestion():
            return _check_number(question, value)
        case SelectQuestion() | RadioQuestion():
            return _check_choice(question, value)
        case _:
            assert_never(question)


def validate_submission(answers: Any, form: RegistrationForm | None = None) -> StatefulRegistration:
    """Validate raw answers keyed by group then question name.

    Raises ValidationError listing every offending question.
    """
    form = form or get_registration_form()
    if not isinstance(answers, Mapping):
        raise ValidationError([FieldError(group="", name="", reason="submission must be an object")])

    errors: list[FieldError] = []
    normalized: dict[str, dict[str, Any]] = {}

    for group_name in answers:
        if form.group(group_name) is None:
            errors.append(FieldError(group=str(group_name), name="", reason="unknown group"))

    for group in form.groups:
        submitted = answers.get(group.name)
        if submitted is None:
            submitted = {}
        if not isinstance(submitted, Mapping):
            errors.append(FieldError(group=group.name, name="", reason="group answers must be an object"))
            continue

        for key in submitted:
            if group.question(key) is None:
                errors.append(FieldError(group=group.name, name=str(key), reason="unknown question"))

        values = {}
        for question in group.questions:
            value, reason = check_answer(question, submitted.get(question.name))
            if reason is not None:
                errors.append(FieldError(group=group.name, name=question.name, reason=reason))
            else:
                values[question.name] = value
        normalized[group.name] = values

    if errors:
        logger.info(
            "Rejected registration submission",
            extra={"fields": sorted(f"{e.group}.{e.name}" for e in errors)},
        )
        raise ValidationError(errors)

    return StatefulRegistration.model_validate(normalized)
