"""
Survey Level Model Package

Computes, for each scored category of a survey, the highest level a
respondent has attained given the answer options they selected.

ARCHITECTURAL GUARANTEE:
------------------------
The core (aggregator + resolver) contains ZERO knowledge of:
    - Chart rendering
    - Persistence or transport of answers
    - Sessions, authentication or page routing

It is a pure function of (grouped answers, level catalog).

All presentation happens in external layers (see backends).
"""

from survey_levels.aggregator import aggregate
from survey_levels.model import LevelCatalog, LevelDefinition
from survey_levels.resolver import compute_category_levels, resolve
from survey_levels.summary import LevelSummary

__version__ = "0.1.0"

__all__ = [
    "aggregate",
    "resolve",
    "compute_category_levels",
    "LevelCatalog",
    "LevelDefinition",
    "LevelSummary",
]
