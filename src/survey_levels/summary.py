"""
Recompute-on-change holder for a respondent's level summary.

LevelSummary keeps the two inputs (grouped answers and the level catalog)
and the two values derived from them (selection, then category levels).

Whenever an input is replaced:
    1. The selection is recomputed
    2. The category levels are recomputed from the new selection
    3. Only then are subscribers told, and only if the levels changed

Subscribers never see a half-updated summary. Everything runs
synchronously on the caller's thread.
"""

import logging
from typing import Callable, List, Optional

from survey_levels.aggregator import aggregate
from survey_levels.model import CategoryLevels, GroupedAnswers, LevelCatalog, SelectionSet
from survey_levels.resolver import resolve

logger = logging.getLogger(__name__)

Subscriber = Callable[[CategoryLevels], None]

_UNSET = object()


def _snapshot_answers(grouped_answers: Optional[GroupedAnswers]) -> dict:
    if not grouped_answers:
        return {}
    return {key: tuple(ids or ()) for key, ids in grouped_answers.items()}


def _snapshot_catalog(catalog) -> LevelCatalog:
    if catalog is None:
        return LevelCatalog()
    if isinstance(catalog, LevelCatalog):
        return LevelCatalog(levels=list(catalog.levels), name=catalog.name, metadata=dict(catalog.metadata))
    return LevelCatalog(levels=list(catalog))


class LevelSummary:
    """
    Holds answers and catalog, and keeps the resolved levels current.

    Example:
        summary = LevelSummary(catalog=catalog)
        summary.subscribe(render_chart)        # called once immediately
        summary.grouped_answers = {"q1": [1]}  # recomputes, then re-renders
    """

    def __init__(self, grouped_answers: Optional[GroupedAnswers] = None, catalog=None):
        self._subscribers: List[Subscriber] = []
        self._grouped_answers: dict = {}
        self._catalog = LevelCatalog()
        self._selection: SelectionSet = frozenset()
        self._levels: CategoryLevels = {}
        self._recompute(_snapshot_answers(grouped_answers), _snapshot_catalog(catalog))

    @property
    def grouped_answers(self) -> dict:
        return dict(self._grouped_answers)

    @grouped_answers.setter
    def grouped_answers(self, value: Optional[GroupedAnswers]) -> None:
        self.update(grouped_answers=value)

    @property
    def catalog(self) -> LevelCatalog:
        return _snapshot_catalog(self._catalog)

    @catalog.setter
    def catalog(self, value) -> None:
        self.update(catalog=value)

    @property
    def selection(self) -> SelectionSet:
        return self._selection

    @property
    def levels(self) -> CategoryLevels:
        return dict(self._levels)

    def update(self, grouped_answers=_UNSET, catalog=_UNSET) -> bool:
        """
        Replace one or both inputs and recompute once.

        Returns:
            True if the category levels changed
        """
        answers = self._grouped_answers
        if grouped_answers is not _UNSET:
            answers = _snapshot_answers(grouped_answers)
        new_catalog = self._catalog
        if catalog is not _UNSET:
            new_catalog = _snapshot_catalog(catalog)

        changed = self._recompute(answers, new_catalog)
        if changed:
            self._notify()
        return changed

    def subscribe(self, callback: Subscriber, immediate: bool = True) -> Callable[[], None]:
        """
        Register a callback receiving every new CategoryLevels.

        Args:
            callback: Called with a copy of the levels
            immediate: Also call it right away with the current levels

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)
        if immediate:
            callback(dict(self._levels))

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _recompute(self, grouped_answers: dict, catalog: LevelCatalog) -> bool:
        # nothing is stored until both derived values are computed
        selection = aggregate(grouped_answers)
        levels = resolve(selection, catalog)

        # ordered comparison: a reorder counts as a change
        changed = list(levels.items()) != list(self._levels.items())
        self._grouped_answers = grouped_answers
        self._catalog = catalog
        self._selection = selection
        self._levels = levels
        return changed

    def _notify(self) -> None:
        logger.debug("Category levels changed; notifying %d subscriber(s)", len(self._subscribers))
        for callback in list(self._subscribers):
            callback(dict(self._levels))


__all__ = ["LevelSummary", "Subscriber"]
