"""
Load dataset reader.

Reads the load board export once at startup. The catalog must come up
even when the export is missing or broken, so every failure here
degrades to fewer (possibly zero) loads and is logged rather than raised.
"""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from carrier_sales.models.load import Load

logger = structlog.get_logger(__name__)


def load_loads(path: str | Path) -> list[Load]:
    """
    Read load records from a JSON array file.

    Args:
        path: Path to a JSON file holding a list of load objects

    Returns:
        Valid loads in file order. Records that fail validation and records
        repeating an earlier load_id are skipped (first occurrence wins).
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.error("Loads data file not found", path=str(path))
        return []
    except (OSError, json.JSONDecodeError) as exc:
        logger.error(
            "Loads data file unreadable",
            path=str(path),
            error=str(exc),
        )
        return []

    if not isinstance(raw, list):
        logger.error(
            "Loads data file must contain a JSON array",
            path=str(path),
            found_type=type(raw).__name__,
        )
        return []

    return parse_loads(raw, source=str(path))


def parse_loads(records: list[Any], source: str = "<memory>") -> list[Load]:
    """Validate raw records into Load models, dropping bad and duplicate ones."""
    loads: list[Load] = []
    seen_ids: set[str] = set()

    for index, record in enumerate(records):
        try:
            load = Load.model_validate(record)
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid load record",
                source=source,
                index=index,
                errors=exc.error_count(),
            )
            continue

        if load.load_id in seen_ids:
            logger.warning(
                "Skipping duplicate load_id",
                source=source,
                index=index,
                load_id=load.load_id,
            )
            continue

        seen_ids.add(load.load_id)
        loads.append(load)

    logger.info(
        "Loads parsed",
        source=source,
        records=len(records),
        loaded=len(loads),
    )
    return loads
