"""
Catalog Analyzer — data-quality diagnostics for level catalogs.

The resolver never reports problems in the catalog: a category that
cannot be attained simply reports level 0. This module is the separate
validation pass a caller runs when they want to know why.

Checks:
    - Duplicate levels within a category
    - Malformed requirement entries (unattainable levels)
    - Empty requirement sets (levels attained by anyone)
    - Non-nested requirement sets across a category's levels
    - Non-positive level ordinals
    - Option ids unknown to the survey (when the known ids are given)

IMPORTANT: This is read-only. It does NOT modify the catalog.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from survey_levels.model import LevelCatalog, LevelDefinition, OptionId
from survey_levels.requirements import UnparsedOption


@dataclass
class CatalogReport:
    """Analysis report for a level catalog."""

    catalog_name: str
    total_levels: int = 0
    total_categories: int = 0
    levels_per_category: Dict[str, int] = field(default_factory=dict)

    # Data-quality findings
    duplicate_levels: List[Tuple[str, int]] = field(default_factory=list)
    malformed_requirements: List[Tuple[str, int, str]] = field(default_factory=list)
    empty_requirements: List[Tuple[str, int]] = field(default_factory=list)
    non_nested_categories: List[str] = field(default_factory=list)
    non_positive_levels: List[Tuple[str, int]] = field(default_factory=list)
    unknown_option_ids: Set[OptionId] = field(default_factory=set)

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def is_clean(self) -> bool:
        return not self.warnings


def _parsed_ids(definition: LevelDefinition) -> FrozenSet[OptionId]:
    return frozenset(r for r in definition.required_option_ids if not isinstance(r, UnparsedOption))


def _is_nested(definitions: List[LevelDefinition]) -> bool:
    """True when each level's requirements contain those of the level below."""
    ordered = sorted(definitions, key=lambda d: d.level)
    for lower, higher in zip(ordered, ordered[1:]):
        if not lower.required_option_ids <= higher.required_option_ids:
            return False
    return True


def analyze_catalog(
    catalog: LevelCatalog | Iterable[LevelDefinition],
    known_option_ids: Optional[Iterable[OptionId]] = None,
) -> CatalogReport:
    """
    Perform a data-quality analysis of a level catalog.

    Args:
        catalog: LevelCatalog or any iterable of LevelDefinition
        known_option_ids: Every option id the survey offers. When given,
            requirement ids outside it are reported as unknown.

    Returns a CatalogReport with findings and warnings.
    """
    if not isinstance(catalog, LevelCatalog):
        catalog = LevelCatalog(levels=list(catalog))

    report = CatalogReport(catalog_name=catalog.name)
    report.total_levels = len(catalog.levels)

    categories = catalog.categories()
    report.total_categories = len(categories)

    # =========================================================================
    # 1. PER-CATEGORY STRUCTURE
    # =========================================================================

    for category in categories:
        definitions = catalog.levels_for(category)
        report.levels_per_category[category] = len(definitions)

        counts = Counter(d.level for d in definitions)
        for level, count in counts.items():
            if count > 1:
                report.duplicate_levels.append((category, level))

        if len(definitions) > 1 and not _is_nested(definitions):
            report.non_nested_categories.append(category)

    # =========================================================================
    # 2. PER-LEVEL REQUIREMENTS
    # =========================================================================

    referenced: Set[OptionId] = set()

    for definition in catalog.levels:
        key = (definition.category, definition.level)

        if definition.level < 1:
            report.non_positive_levels.append(key)

        if not definition.required_option_ids:
            report.empty_requirements.append(key)

        for requirement in sorted(definition.required_option_ids, key=str):
            if isinstance(requirement, UnparsedOption):
                report.malformed_requirements.append((definition.category, definition.level, requirement.token))

        referenced.update(_parsed_ids(definition))

    if known_option_ids is not None:
        report.unknown_option_ids = referenced - set(known_option_ids)

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    for category, level in report.duplicate_levels:
        report.add_warning(f"Duplicate level {level} in category '{category}'")

    for category, level, token in report.malformed_requirements:
        report.add_warning(
            f"Malformed requirement '{token}' makes level {level} of '{category}' unattainable"
        )

    for category, level in report.empty_requirements:
        report.add_warning(f"Level {level} of '{category}' has no requirements and is always attained")

    if report.non_nested_categories:
        report.add_warning(
            f"Requirement sets not nested by level: {', '.join(report.non_nested_categories)}"
        )

    for category, level in report.non_positive_levels:
        report.add_warning(f"Non-positive level {level} in category '{category}'")

    if report.unknown_option_ids:
        report.add_warning(
            f"Unknown option ids: {', '.join(str(i) for i in sorted(report.unknown_option_ids))}"
        )

    return report


__all__ = ["CatalogReport", "analyze_catalog"]
