"""
CSV Loader for level catalogs (Raw Input → LevelCatalog).

CSV Format:
    category, level, option_ids, description

Column aliases (as exported by the survey backend):
    nombre_categoria → category
    nivel            → level
    ids_alternativas → option_ids

Notes:
    - option_ids is comma-separated, so it must be quoted: "3,7,12"
    - description is optional
    - Malformed option ids do NOT fail the load; they make that single
      level unattainable and emit a MalformedRequirementWarning
"""

import csv
import logging
import os
from dataclasses import dataclass
from io import StringIO
from typing import Dict, List, Optional

from survey_levels.model import LevelCatalog, LevelDefinition
from survey_levels.requirements import parse_required_option_ids

logger = logging.getLogger(__name__)


COLUMN_ALIASES: Dict[str, str] = {
    "nombre_categoria": "category",
    "nivel": "level",
    "ids_alternativas": "option_ids",
}

REQUIRED_COLUMNS = ["category", "level", "option_ids"]


class CatalogParseError(Exception):
    """Raised when a catalog CSV is structurally invalid."""
    pass


@dataclass
class CatalogRow:
    """Parsed CSV row."""
    category: str
    level: int
    option_ids: str  # Will become required_option_ids
    description: Optional[str] = None


def _canonical_column(name: str) -> str:
    name = (name or "").strip()
    return COLUMN_ALIASES.get(name, name)


def _parse_csv_rows(csv_content: str) -> List[CatalogRow]:
    """Parse CSV content into structured rows."""
    reader = csv.DictReader(StringIO(csv_content))

    if reader.fieldnames is None:
        raise CatalogParseError("CSV is empty")

    reader.fieldnames = [_canonical_column(f) for f in reader.fieldnames]

    missing = [col for col in REQUIRED_COLUMNS if col not in reader.fieldnames]
    if missing:
        raise CatalogParseError(f"Missing required columns: {missing}")

    rows = []
    for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is line 1)
        category = (row.get("category") or "").strip()
        if not category:
            raise CatalogParseError(f"Error parsing row {row_num}: blank category")

        level_text = (row.get("level") or "").strip()
        try:
            level = int(level_text)
        except ValueError:
            raise CatalogParseError(f"Error parsing row {row_num}: level {level_text!r} is not an integer")

        rows.append(CatalogRow(
            category=category,
            level=level,
            option_ids=row.get("option_ids") or "",
            description=(row.get("description") or "").strip() or None,
        ))

    return rows


def parse_catalog_csv_string(csv_content: str, name: str = "CSVCatalog") -> LevelCatalog:
    """
    Parse CSV content into a LevelCatalog.

    Args:
        csv_content: CSV as string
        name: Name for the catalog

    Returns:
        LevelCatalog with one LevelDefinition per row, in row order

    Raises:
        CatalogParseError: If the CSV structure is invalid
    """
    rows = _parse_csv_rows(csv_content)

    levels = [
        LevelDefinition(
            category=row.category,
            level=row.level,
            required_option_ids=parse_required_option_ids(row.option_ids),
            description=row.description,
        )
        for row in rows
    ]

    logger.info("Loaded catalog %r: %d level(s)", name, len(levels))
    return LevelCatalog(levels=levels, name=name)


def parse_catalog_csv_file(filepath: str, name: Optional[str] = None) -> LevelCatalog:
    """
    Parse CSV file into a LevelCatalog.

    Args:
        filepath: Path to CSV file
        name: Optional catalog name (defaults to filename)

    Returns:
        LevelCatalog object

    Raises:
        FileNotFoundError: If file doesn't exist
        CatalogParseError: If parsing fails
    """
    try:
        with open(filepath, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    if name is None:
        name = os.path.splitext(os.path.basename(filepath))[0]

    return parse_catalog_csv_string(content, name=name)


__all__ = [
    "parse_catalog_csv_string",
    "parse_catalog_csv_file",
    "CatalogParseError",
    "COLUMN_ALIASES",
]
