"""Load entity records from JSON files."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..models.entities import Entity

logger = logging.getLogger(__name__)


def load_entities(path: Path) -> list[Entity]:
    """
    Load entities from a directory or a single file.

    Supports:
    - a directory (every *.json file, one record per file, in name order)
    - a .json file holding one record or a list of records
    """
    if path.is_dir():
        return load_directory(path)
    if path.suffix.lower() == ".json":
        return load_json(path)
    raise ValueError(f"Unsupported entity source: {path}")


def load_directory(path: Path) -> list[Entity]:
    """Load every JSON file in a directory."""
    entities: list[Entity] = []
    for file in sorted(path.glob("*.json")):
        entities.extend(load_json(file))

    logger.debug("Loaded %d entities from %s", len(entities), path)
    return entities


def load_json(path: Path) -> list[Entity]:
    """Load one record, or a list of records, from a JSON file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"Could not read {path}: {exc}") from exc

    records = data if isinstance(data, list) else [data]
    try:
        return [Entity.model_validate(record) for record in records]
    except ValidationError as exc:
        raise ValueError(f"Invalid entity record in {path}: {exc}") from exc
