"""
Radar chart data for resolved category levels.

Converts a CategoryLevels mapping into what a radar chart needs:
    - categories (axis labels) and values, index-aligned, in mapping order
    - a radial scale from 0 to max(values) + 1

Two shapes are produced:
    - RadarChartData: plain projection, renderer independent
    - A Chart.js-compatible "radar" config dict, ready to serialize

No drawing happens here. The renderer rebuilds the whole chart from a
fresh config every time the levels change.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from survey_levels.model import CategoryLevels


DEFAULT_LABEL = "Achieved level"
BACKGROUND_COLOR = "rgba(54, 162, 235, 0.2)"
BORDER_COLOR = "rgba(54, 162, 235, 1)"
BORDER_WIDTH = 2


@dataclass
class RadarChartData:
    """
    Index-aligned projection of CategoryLevels.

    Properties:
        categories: Category names, in mapping order
        values: Attained levels, same order as categories
        suggested_min: Lower bound of the radial axis (always 0)
        suggested_max: max(values) + 1, or 1 when there are no values
    """

    categories: List[str] = field(default_factory=list)
    values: List[int] = field(default_factory=list)
    suggested_min: int = 0
    suggested_max: int = 1


def chart_data(levels: CategoryLevels) -> RadarChartData:
    """
    Project CategoryLevels onto chart axes.

    Args:
        levels: Mapping of category -> attained level

    Returns:
        RadarChartData with the axis bounds filled in
    """
    categories = list(levels.keys())
    values = list(levels.values())
    # an empty chart still needs a non-degenerate axis
    suggested_max = max(values) + 1 if values else 1
    return RadarChartData(
        categories=categories,
        values=values,
        suggested_min=0,
        suggested_max=suggested_max,
    )


def build_radar_config(levels: CategoryLevels, label: str = DEFAULT_LABEL) -> Dict[str, Any]:
    """
    Build a Chart.js radar config for the levels.

    Args:
        levels: Mapping of category -> attained level
        label: Dataset label shown in the legend

    Returns:
        Dict with "type", "data" and "options" keys
    """
    data = chart_data(levels)
    return {
        "type": "radar",
        "data": {
            "labels": data.categories,
            "datasets": [
                {
                    "label": label,
                    "data": data.values,
                    "backgroundColor": BACKGROUND_COLOR,
                    "borderColor": BORDER_COLOR,
                    "borderWidth": BORDER_WIDTH,
                }
            ],
        },
        "options": {
            "scales": {
                "r": {
                    "suggestedMin": data.suggested_min,
                    "suggestedMax": data.suggested_max,
                }
            }
        },
    }


def save_radar_config(levels: CategoryLevels, filename: str, label: str = DEFAULT_LABEL) -> None:
    """
    Generate the radar config and save it as JSON.

    Args:
        levels: Mapping of category -> attained level
        filename: Output file path (.json extension recommended)
        label: Dataset label
    """
    config = build_radar_config(levels, label=label)
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2, ensure_ascii=False)


__all__ = ["RadarChartData", "chart_data", "build_radar_config", "save_radar_config"]
