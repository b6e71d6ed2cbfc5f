"""
Named error conditions raised by the data layer and the registration form.

Storage constraint failures are translated from SQLAlchemy's IntegrityError
into ConstraintViolation subclasses so callers can tell a duplicate key from
a dangling foreign key without parsing driver messages themselves.
"""
from dataclasses import dataclass, asdict

from sqlalchemy.exc import IntegrityError


class ConstraintViolation(Exception):
    """A uniqueness, foreign-key or not-null constraint rejected a write."""

    constraint = "constraint"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class UniqueViolation(ConstraintViolation):
    constraint = "unique"


class ForeignKeyViolation(ConstraintViolation):
    constraint = "foreign_key"


class NotNullViolation(ConstraintViolation):
    constraint = "not_null"


# PostgreSQL SQLSTATE codes
_PG_CODES = {
    "23505": UniqueViolation,
    "23503": ForeignKeyViolation,
    "23502": NotNullViolation,
}

# MySQL errno values
_MYSQL_CODES = {
    1062: UniqueViolation,
    1451: ForeignKeyViolation,
    1452: ForeignKeyViolation,
    1048: NotNullViolation,
    1364: NotNullViolation,
}

# SQLite only reports a message
_SQLITE_PREFIXES = (
    ("UNIQUE constraint failed", UniqueViolation),
    ("FOREIGN KEY constraint failed", ForeignKeyViolation),
    ("NOT NULL constraint failed", NotNullViolation),
)


def translate_integrity_error(exc: IntegrityError) -> ConstraintViolation:
    orig = exc.orig
    message = str(orig) if orig is not None else str(exc)

    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code in _PG_CODES:
        return _PG_CODES[code](message)

    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int) and args[0] in _MYSQL_CODES:
        return _MYSQL_CODES[args[0]](message)

    for prefix, cls in _SQLITE_PREFIXES:
        if message.startswith(prefix):
            return cls(message)

    return ConstraintViolation(message)


@dataclass(frozen=True)
class FieldError:
    group: str
    name: str
    reason: str

    def to_dict(self) -> dict:
        return asdict(self)


class ValidationError(Exception):
    """A registration submission failed one or more question constraints.

    Carries every failing field, never just the first one.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        names = ", ".join(f"{e.group}.{e.name}" for e in self.errors)
        super().__init__(f"Invalid registration: {names}")

    @property
    def field_names(self) -> set[str]:
        return {e.name for e in self.errors}


class ShapeMismatch(Exception):
    """A stored registration value does not match the answer shape."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Stored registration does not match the answer shape: " + "; ".join(self.errors))
