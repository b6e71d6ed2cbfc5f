"""
Static reference lists used as select options (schools, majors, demographics).

The lists are data assets, read from JSON once and cached for the life of the
process. Point REGISTRATION_DATA_DIR at another directory to swap them out.
"""
import json
from functools import lru_cache
from pathlib import Path

from core.config import settings
from core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


def data_dir() -> Path:
    if settings.REGISTRATION_DATA_DIR:
        return Path(settings.REGISTRATION_DATA_DIR)
    return DEFAULT_DATA_DIR


def _read_json(filename: str):
    path = data_dir() / filename
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    logger.info("Loaded registration reference data", extra={"file": str(path)})
    return data


@lru_cache(maxsize=None)
def general_options() -> dict[str, list[dict[str, str]]]:
    """Gender, race and ethnicity option lists keyed by plural name."""
    return _read_json("general_options.json")


@lru_cache(maxsize=None)
def schools() -> tuple[str, ...]:
    return tuple(_read_json("schools.json"))


@lru_cache(maxsize=None)
def majors() -> tuple[str, ...]:
    return tuple(_read_json("majors.json"))


def clear_cache() -> None:
    general_options.cache_clear()
    schools.cache_clear()
    majors.cache_clear()
