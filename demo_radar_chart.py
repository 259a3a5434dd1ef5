#!/usr/bin/env python3
"""
Demo: Resolve levels for example answers and export a radar chart config.

Shows the summary re-rendering as answers change.
"""

import json
import logging

from survey_levels import LevelSummary
from survey_levels.examples import build_example_answers, build_example_catalog
from survey_levels.backends import build_radar_config, save_radar_config


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    catalog = build_example_catalog()
    summary = LevelSummary(catalog=catalog)

    print("=" * 80)
    print("RADAR CHART DEMO")
    print("=" * 80)

    def render(levels):
        print("\nLevels:", levels)
        print(json.dumps(build_radar_config(levels)["options"], indent=2))

    summary.subscribe(render)

    print("\nAnswering the survey...")
    summary.grouped_answers = build_example_answers()

    filename = "radar_chart.json"
    save_radar_config(summary.levels, filename)
    print(f"\nSaved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
