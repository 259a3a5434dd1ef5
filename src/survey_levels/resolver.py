"""
Level resolution — the highest attained level per category.

For each category in the catalog, levels are tried from highest to lowest
and the first one whose requirement set is fully covered by the selection
wins. If none is covered, the category reports 0.

POLICY:
    Requirement sets of one category are NOT assumed to be nested.
    A higher level can be attained while a lower one is not; the highest
    satisfied level always wins, independently of the others.

DATA-QUALITY DEFECTS NEVER RAISE:
    - Malformed requirement entries make only their own level unattainable
    - Duplicate (category, level) pairs are logged; the entry that comes
      first in catalog order wins
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional

from survey_levels.aggregator import aggregate
from survey_levels.model import CategoryLevels, GroupedAnswers, LevelDefinition, OptionId
from survey_levels.requirements import is_satisfied

logger = logging.getLogger(__name__)


def _group_by_category(catalog: Iterable[LevelDefinition]) -> Dict[str, List[LevelDefinition]]:
    """Group definitions by category, keeping first-seen category order."""
    grouped: Dict[str, List[LevelDefinition]] = {}
    for definition in catalog:
        grouped.setdefault(definition.category, []).append(definition)
    return grouped


def _warn_duplicate_levels(category: str, definitions: List[LevelDefinition]) -> None:
    counts = Counter(d.level for d in definitions)
    for level, count in counts.items():
        if count > 1:
            logger.warning(
                "Category %r defines level %d %d times; using the first in catalog order",
                category, level, count,
            )


def resolve_category(selection: Iterable[OptionId], definitions: Iterable[LevelDefinition]) -> int:
    """
    Highest satisfied level among the definitions of a single category.

    Args:
        selection: Selected option ids
        definitions: Definitions of one category, in catalog order

    Returns:
        The attained level, or 0 when no requirement set is covered
    """
    selected = frozenset(selection)
    # sorted() is stable, so equal levels keep catalog order
    for definition in sorted(definitions, key=lambda d: d.level, reverse=True):
        if is_satisfied(definition.required_option_ids, selected):
            return definition.level
    return 0


def resolve(selection: Iterable[OptionId], catalog: Iterable[LevelDefinition]) -> CategoryLevels:
    """
    Compute the attained level of every category in the catalog.

    Args:
        selection: Selected option ids (any iterable; duplicates are fine)
        catalog: LevelCatalog or any iterable of LevelDefinition

    Returns:
        Fresh dict of category -> attained level, in first-seen category order.
        Every catalog category is present; no other keys appear.
    """
    selected = frozenset(selection)
    result: CategoryLevels = {}

    for category, definitions in _group_by_category(catalog).items():
        _warn_duplicate_levels(category, definitions)
        result[category] = resolve_category(selected, definitions)

    logger.debug("Resolved %d categories from %d selected options", len(result), len(selected))
    return result


def compute_category_levels(
    grouped_answers: Optional[GroupedAnswers],
    level_catalog: Iterable[LevelDefinition],
) -> CategoryLevels:
    """
    Core entry point: aggregate the answers, then resolve levels.

    Args:
        grouped_answers: Mapping of question-group key to selected option ids
        level_catalog: LevelCatalog or any iterable of LevelDefinition

    Returns:
        Mapping of category -> attained level
    """
    return resolve(aggregate(grouped_answers), level_catalog)


__all__ = ["resolve", "resolve_category", "compute_category_levels"]
