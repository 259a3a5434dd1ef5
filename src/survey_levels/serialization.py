"""
Serialization helpers for level objects (LevelCatalog, LevelDefinition, answers, results).

Provides JSON/YAML round-trip via intermediate dict representation.
Requirement sets are written in their textual form ("3,7,12") so files
stay readable and match what the survey backend exports.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

import yaml

from survey_levels.csv_loader import parse_catalog_csv_file
from survey_levels.model import CategoryLevels, LevelCatalog, LevelDefinition, OptionId
from survey_levels.requirements import format_required_option_ids, parse_required_option_ids


def level_to_dict(d: LevelDefinition) -> Dict[str, Any]:
    return {
        "category": d.category,
        "level": d.level,
        "option_ids": format_required_option_ids(d.required_option_ids),
        "description": d.description,
    }


def level_from_dict(d: Dict[str, Any]) -> LevelDefinition:
    level = d["level"]
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"Level must be an integer, got {level!r}")
    return LevelDefinition(
        category=d["category"],
        level=level,
        required_option_ids=parse_required_option_ids(d.get("option_ids")),
        description=d.get("description"),
    )


def catalog_to_dict(c: LevelCatalog) -> Dict[str, Any]:
    return {
        "name": c.name,
        "levels": [level_to_dict(d) for d in c.levels],
        "metadata": c.metadata,
    }


def catalog_from_dict(d: Dict[str, Any]) -> LevelCatalog:
    c = LevelCatalog(name=d.get("name", ""))
    c.levels = [level_from_dict(level) for level in d.get("levels", [])]
    c.metadata = d.get("metadata", {})
    return c


def catalog_to_json(c: LevelCatalog) -> str:
    return json.dumps(catalog_to_dict(c), sort_keys=True)


def catalog_from_json(s: str) -> LevelCatalog:
    d = json.loads(s)
    return catalog_from_dict(d)


def catalog_to_yaml(c: LevelCatalog) -> str:
    return yaml.safe_dump(catalog_to_dict(c), allow_unicode=True)


def catalog_from_yaml(s: str) -> LevelCatalog:
    d = yaml.safe_load(s) or {}
    return catalog_from_dict(d)


def load_catalog(path: str | Path) -> LevelCatalog:
    """
    Load a catalog file, choosing the format from its suffix.

    Supported: .json, .yaml / .yml, .csv

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is not supported
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Catalog not found: {p}")

    suffix = p.suffix.lower()
    if suffix == ".csv":
        return parse_catalog_csv_file(str(p))

    text = p.read_text(encoding="utf-8")
    if suffix == ".json":
        catalog = catalog_from_json(text)
    elif suffix in (".yaml", ".yml"):
        catalog = catalog_from_yaml(text)
    else:
        raise ValueError(f"Unsupported catalog format: {p.suffix}")

    if not catalog.name:
        catalog.name = p.stem
    return catalog


def answers_from_dict(d: Mapping[str, Any] | None) -> Dict[str, Tuple[OptionId, ...]]:
    """
    Validate grouped answers read from JSON/YAML.

    A group may be a list of ids, a single id, or null (no selection).

    Raises:
        TypeError: If any selected id is not an integer
    """
    answers: Dict[str, Tuple[OptionId, ...]] = {}
    for key, value in (d or {}).items():
        if value is None:
            ids = ()
        elif isinstance(value, (list, tuple)):
            ids = tuple(value)
        else:
            ids = (value,)
        for option_id in ids:
            if isinstance(option_id, bool) or not isinstance(option_id, int):
                raise TypeError(f"Answer group {key!r} has non-integer option id {option_id!r}")
        answers[str(key)] = ids
    return answers


def answers_from_json(s: str) -> Dict[str, Tuple[OptionId, ...]]:
    return answers_from_dict(json.loads(s))


def answers_from_yaml(s: str) -> Dict[str, Tuple[OptionId, ...]]:
    return answers_from_dict(yaml.safe_load(s))


def levels_to_json(levels: CategoryLevels) -> str:
    # keep category order; it is the order the chart shows
    return json.dumps(dict(levels))


def levels_to_yaml(levels: CategoryLevels) -> str:
    return yaml.safe_dump(dict(levels), sort_keys=False, allow_unicode=True)


__all__ = [
    "level_to_dict",
    "level_from_dict",
    "catalog_to_dict",
    "catalog_from_dict",
    "catalog_to_json",
    "catalog_from_json",
    "catalog_to_yaml",
    "catalog_from_yaml",
    "load_catalog",
    "answers_from_dict",
    "answers_from_json",
    "answers_from_yaml",
    "levels_to_json",
    "levels_to_yaml",
]
