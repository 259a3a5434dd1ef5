"""
Answer aggregation.

Flattens a respondent's answers, grouped by question, into the single set
of option ids they selected. Grouping and ordering are discarded.

Example:
    {"q1": [1, 2], "q2": [2, 3]}  ->  frozenset({1, 2, 3})
"""

from typing import Optional

from survey_levels.model import GroupedAnswers, SelectionSet


def aggregate(grouped_answers: Optional[GroupedAnswers]) -> SelectionSet:
    """
    Union every group's selected option ids.

    Args:
        grouped_answers: Mapping of question-group key to selected option ids.
            None, an empty mapping and empty (or None) groups are all allowed.

    Returns:
        Frozenset of every selected option id
    """
    if not grouped_answers:
        return frozenset()

    selection = set()
    for option_ids in grouped_answers.values():
        if option_ids:
            selection.update(option_ids)
    return frozenset(selection)


__all__ = ["aggregate"]
