"""
Demo: Run the catalog analyzer on the example catalog and print the report.
"""

from survey_levels.examples import build_example_catalog
from survey_levels.analyzer import analyze_catalog
from survey_levels.model import LevelDefinition
from survey_levels.serialization import catalog_to_yaml


def print_report(report):
    """Pretty-print a CatalogReport."""
    print()
    print("=" * 70)
    print(f"CATALOG ANALYSIS REPORT: {report.catalog_name}")
    print("=" * 70)
    print()

    print("📊 BASIC METRICS")
    print(f"  Total Levels:          {report.total_levels}")
    print(f"  Total Categories:      {report.total_categories}")
    for category, count in report.levels_per_category.items():
        print(f"    {category}: {count} level(s)")
    print()

    print("🔎 DATA QUALITY")
    print(f"  Duplicate Levels:      {report.duplicate_levels or 'None'}")
    print(f"  Malformed Entries:     {report.malformed_requirements or 'None'}")
    print(f"  Empty Requirements:    {report.empty_requirements or 'None'}")
    print(f"  Non-nested Categories: {report.non_nested_categories or 'None'}")
    print(f"  Unknown Option Ids:    {sorted(report.unknown_option_ids) or 'None'}")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - Catalog looks clean!")
    print()


if __name__ == "__main__":
    catalog = build_example_catalog()

    # Add a defective level so the report has something to show
    catalog.levels.append(LevelDefinition.from_text("Data", 3, "201,x"))

    report = analyze_catalog(catalog, known_option_ids=range(100, 400))
    print_report(report)

    yaml_str = catalog_to_yaml(catalog)
    with open("example_catalog_output.yaml", "w", encoding="utf-8") as f:
        f.write(yaml_str)
    print("✅ Catalog exported to example_catalog_output.yaml")
