"""
Core Level Model Objects

Defines the data structures the level computation works on:
    - LevelDefinition (one achievement tier of a category)
    - LevelCatalog (all tiers of a survey instance, in catalog order)
    - Type aliases for answers, selections and results

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about charts, pages or sessions
        - Are value-like and never mutated by the computation
        - Are fully serializable
        - Represent data, not behavior
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional, Sequence

from survey_levels.requirements import Requirement, UnparsedOption, parse_required_option_ids


OptionId = int
GroupedAnswers = Mapping[str, Sequence[OptionId]]
SelectionSet = FrozenSet[OptionId]
CategoryLevels = Dict[str, int]


@dataclass(frozen=True)
class LevelDefinition:
    """
    One achievement tier within a category.

    A respondent attains this tier when every option in
    required_option_ids is part of their selection.

    Properties:
        category:
            Category name (e.g., "Communication")

        level:
            Positive ordinal; higher means more advanced.
            Several definitions share a category with distinct levels.

        required_option_ids:
            Option ids that must all be selected.
            Empty means the tier is attained by any selection.
            May contain UnparsedOption entries (see requirements.py),
            which make the tier unattainable.

        description:
            Optional human-readable label for the tier

    Example:
        LevelDefinition.from_text("Communication", 2, "3,7,12")
    """

    category: str
    level: int
    required_option_ids: FrozenSet[Requirement] = frozenset()
    description: Optional[str] = None

    @classmethod
    def from_text(
        cls,
        category: str,
        level: int,
        option_ids: Optional[str],
        description: Optional[str] = None,
    ) -> "LevelDefinition":
        """Build a definition from comma-separated requirement text."""
        return cls(
            category=category,
            level=level,
            required_option_ids=parse_required_option_ids(option_ids),
            description=description,
        )

    @property
    def is_satisfiable(self) -> bool:
        """False when any requirement entry failed to parse."""
        return not any(isinstance(r, UnparsedOption) for r in self.required_option_ids)


@dataclass
class LevelCatalog:
    """
    Ordered collection of every LevelDefinition for a survey instance.

    Catalog order matters:
        - Categories are reported in first-seen order
        - Among equal levels of one category, the earlier entry wins

    Properties:
        levels:
            All level definitions, in catalog order

        name:
            Catalog identifier (optional)

        metadata:
            Arbitrary key-value pairs (use sparingly)
    """

    levels: List[LevelDefinition] = field(default_factory=list)
    name: str = ""
    metadata: Dict[str, str] = field(default_factory=dict)

    def __iter__(self) -> Iterator[LevelDefinition]:
        return iter(self.levels)

    def __len__(self) -> int:
        return len(self.levels)

    def categories(self) -> List[str]:
        """
        Distinct category names, in first-seen order.

        Returns:
            List of category names
        """
        return list(dict.fromkeys(d.category for d in self.levels))

    def levels_for(self, category: str) -> List[LevelDefinition]:
        """
        All definitions of one category, in catalog order.

        Args:
            category: Category name

        Returns:
            List of LevelDefinition (empty if the category is unknown)
        """
        return [d for d in self.levels if d.category == category]

    def get_level(self, category: str, level: int) -> Optional[LevelDefinition]:
        """
        Retrieve the first definition for a category/level pair.

        Args:
            category: Category name
            level: Level ordinal

        Returns:
            LevelDefinition or None if not found
        """
        for definition in self.levels:
            if definition.category == category and definition.level == level:
                return definition
        return None

    def option_ids(self) -> FrozenSet[OptionId]:
        """Every parsed option id referenced by any definition."""
        ids = set()
        for definition in self.levels:
            ids.update(r for r in definition.required_option_ids if not isinstance(r, UnparsedOption))
        return frozenset(ids)


__all__ = [
    "OptionId",
    "GroupedAnswers",
    "SelectionSet",
    "CategoryLevels",
    "LevelDefinition",
    "LevelCatalog",
]
