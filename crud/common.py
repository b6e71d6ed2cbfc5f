from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.errors import translate_integrity_error
from core.logging import get_logger

logger = get_logger(__name__)


def commit_or_raise(db: Session, *objs):
    """Commit, refreshing ``objs``; integrity failures become ConstraintViolation."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        violation = translate_integrity_error(exc)
        logger.warning(
            "Write rejected by storage constraint",
            extra={"constraint": violation.constraint, "detail": violation.detail},
        )
        raise violation from exc
    for obj in objs:
        db.refresh(obj)
