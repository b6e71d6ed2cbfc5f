import enum

from sqlalchemy import Enum


class SponsorshipLevel(str, enum.Enum):
    NONE = "none"
    NOT_SPECIFIED = "not_specified"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


class EventType(str, enum.Enum):
    GENERAL = "general"
    MEAL = "meal"
    WORKSHOP = "workshop"
    CEREMONY = "ceremony"


class UserRole(str, enum.Enum):
    NONE = "none"
    REGISTERANT = "registerant"
    HACKER = "hacker"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


class UserGroup(str, enum.Enum):
    """Groups are useful for staggering things like meal distribution."""
    NONE = "none"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


def enum_column_type(enum_cls: type[enum.Enum], name: str) -> Enum:
    # Store the lowercase values, not the member names
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
