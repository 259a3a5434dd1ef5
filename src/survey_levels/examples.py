"""
Example catalog and answers for demos and tests.

Builds a digital-skills self-assessment with three categories. Each
category has three levels; option ids 1xx belong to "Communication",
2xx to "Data" and 3xx to "Security".

"Security" is deliberately not nested: level 3 does not require the
options of level 2, so it can be attained on its own.
"""
from typing import Dict, List

from survey_levels.model import LevelCatalog, LevelDefinition


def build_example_catalog() -> LevelCatalog:
    catalog = LevelCatalog(name="Digital Skills Self-Assessment")
    catalog.metadata = {"source": "examples.py"}

    catalog.levels = [
        LevelDefinition.from_text("Communication", 1, "101", "Uses email"),
        LevelDefinition.from_text("Communication", 2, "101,102", "Runs video calls"),
        LevelDefinition.from_text("Communication", 3, "101,102,103", "Moderates online events"),
        LevelDefinition.from_text("Data", 1, "201", "Edits spreadsheets"),
        LevelDefinition.from_text("Data", 2, "201,202", "Builds pivot tables"),
        LevelDefinition.from_text("Data", 3, "201,202,203", "Writes queries"),
        LevelDefinition.from_text("Security", 1, "301", "Uses a password manager"),
        LevelDefinition.from_text("Security", 2, "301,302", "Enables two-factor login"),
        LevelDefinition.from_text("Security", 3, "303", "Audits account access"),
    ]

    return catalog


def build_example_answers() -> Dict[str, List[int]]:
    """Answers reaching Communication 2, Data 0 and Security 3."""
    return {
        "q_email": [101],
        "q_calls": [102],
        "q_spreadsheets": [202],
        "q_security": [301, 303],
    }
