"""
University Catalog

Loads the static university catalog and the recognized majors list.

Both ship as JSON next to the package and are validated once at load
time, so the match engine can treat every entry as well formed.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from university_matcher.config.settings import settings
from university_matcher.domain.models import CatalogFilter, University
from university_matcher.exceptions import CatalogError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "universities.json"
DEFAULT_MAJORS_PATH = DATA_DIR / "majors.json"

_UNIVERSITIES_ADAPTER = TypeAdapter(List[University])
_MAJORS_ADAPTER = TypeAdapter(List[str])


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Data file not found: {path}", path=path, original_error=e)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path.name}: {e.msg}", path=path, original_error=e)
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Cannot read {path}: {e}", path=path, original_error=e)


def _resolve(path: Optional[Path], configured: Optional[Path], default: Path) -> Path:
    return Path(path or configured or default)


@lru_cache(maxsize=8)
def _load_universities(path: Path) -> Tuple[University, ...]:
    raw = _read_json(path)

    try:
        universities = _UNIVERSITIES_ADAPTER.validate_python(raw)
    except PydanticValidationError as e:
        raise CatalogError(
            f"Malformed catalog entry in {path.name}: {e.error_count()} error(s)",
            path=path,
            original_error=e,
        )

    seen = set()
    duplicates = []
    for university in universities:
        if university.id in seen:
            duplicates.append(university.id)
        seen.add(university.id)
    if duplicates:
        raise CatalogError(
            f"Duplicate university ids in {path.name}: {', '.join(sorted(set(duplicates)))}",
            path=path,
        )

    logger.info(f"[CATALOG] Loaded {len(universities)} universities from {path.name}")
    return tuple(universities)


@lru_cache(maxsize=8)
def _load_majors(path: Path) -> Tuple[str, ...]:
    raw = _read_json(path)

    try:
        majors = _MAJORS_ADAPTER.validate_python(raw)
    except PydanticValidationError as e:
        raise CatalogError(f"Majors list in {path.name} must be a list of strings", path=path, original_error=e)

    cleaned = tuple(dict.fromkeys(m.strip() for m in majors if m.strip()))
    if not cleaned:
        raise CatalogError(f"Majors list in {path.name} is empty", path=path)

    logger.info(f"[CATALOG] Loaded {len(cleaned)} majors from {path.name}")
    return cleaned


def load_universities(path: Optional[Path] = None) -> Tuple[University, ...]:
    """
    Load and validate the university catalog.

    Args:
        path: JSON file to read. Defaults to CATALOG_PATH, then the bundled data.

    Raises:
        CatalogError: file missing or unreadable, not JSON, malformed entry or duplicate id
    """
    return _load_universities(_resolve(path, settings.catalog_path, DEFAULT_CATALOG_PATH))


def load_majors(path: Optional[Path] = None) -> Tuple[str, ...]:
    """Load the recognized major names, de-duplicated in file order."""
    return _load_majors(_resolve(path, settings.majors_path, DEFAULT_MAJORS_PATH))


def filter_universities(
    catalog: Iterable[University],
    criteria: Optional[CatalogFilter] = None,
) -> List[University]:
    """Narrow the catalog before scoring. Catalog order is preserved."""
    if criteria is None:
        return list(catalog)
    return [university for university in catalog if criteria.matches(university)]

