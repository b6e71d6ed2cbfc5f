from sqlalchemy.orm import declarative_base
from core.config import settings

Base = declarative_base()


def prefixed(name: str) -> str:
    """Table name with the shared prefix, so several apps can share one database."""
    return f"{settings.TABLE_PREFIX}{name}"
