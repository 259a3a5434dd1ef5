"""
Tests for the CSV catalog loader (Raw Input → LevelCatalog).

CSV format:
    category, level, option_ids, description

The survey backend exports its own column names
(nombre_categoria, nivel, ids_alternativas); those must load too.
"""

import pytest
from survey_levels.csv_loader import (
    CatalogParseError,
    parse_catalog_csv_file,
    parse_catalog_csv_string,
)
from survey_levels.model import LevelCatalog
from survey_levels.requirements import MalformedRequirementWarning, UnparsedOption


class TestCSVParsing:
    """Test basic CSV row parsing."""

    def test_header_only(self):
        """Header without rows gives an empty catalog."""
        catalog = parse_catalog_csv_string("category,level,option_ids\n")
        assert isinstance(catalog, LevelCatalog)
        assert len(catalog) == 0

    def test_rows_in_order(self):
        csv = '''category,level,option_ids
Data,1,"201"
Data,2,"201,202"
Security,1,"301"'''

        catalog = parse_catalog_csv_string(csv, name="Skills")

        assert catalog.name == "Skills"
        assert [(d.category, d.level) for d in catalog] == [("Data", 1), ("Data", 2), ("Security", 1)]
        assert catalog.get_level("Data", 2).required_option_ids == frozenset({201, 202})

    def test_description_column(self):
        csv = '''category,level,option_ids,description
Data,1,"201","Edits spreadsheets"
Data,2,"201,202",'''

        catalog = parse_catalog_csv_string(csv)

        assert catalog.get_level("Data", 1).description == "Edits spreadsheets"
        assert catalog.get_level("Data", 2).description is None

    def test_backend_column_names(self):
        csv = '''nombre_categoria,nivel,ids_alternativas
Comunicación,1,"1,2"
Comunicación,2,"1,2,3"'''

        catalog = parse_catalog_csv_string(csv)

        assert catalog.categories() == ["Comunicación"]
        assert catalog.get_level("Comunicación", 2).required_option_ids == frozenset({1, 2, 3})

    def test_whitespace_in_option_ids(self):
        csv = '''category,level,option_ids
Data, 1 ," 1 , 2 "'''
        catalog = parse_catalog_csv_string(csv)
        assert catalog.get_level("Data", 1).required_option_ids == frozenset({1, 2})

    def test_blank_option_ids_is_empty_requirement(self):
        csv = '''category,level,option_ids
Data,1,'''
        catalog = parse_catalog_csv_string(csv)
        assert catalog.get_level("Data", 1).required_option_ids == frozenset()

    def test_malformed_option_id_does_not_fail(self):
        csv = '''category,level,option_ids
Data,1,"1,x,3"'''
        with pytest.warns(MalformedRequirementWarning):
            catalog = parse_catalog_csv_string(csv)
        assert UnparsedOption("x") in catalog.get_level("Data", 1).required_option_ids


class TestCSVErrors:
    """Structural problems raise CatalogParseError."""

    def test_empty_input(self):
        with pytest.raises(CatalogParseError):
            parse_catalog_csv_string("")

    def test_missing_columns(self):
        with pytest.raises(CatalogParseError, match="Missing required columns"):
            parse_catalog_csv_string("category,level\nData,1\n")

    def test_non_integer_level(self):
        csv = '''category,level,option_ids
Data,two,"1"'''
        with pytest.raises(CatalogParseError, match="row 2"):
            parse_catalog_csv_string(csv)

    def test_blank_category(self):
        csv = '''category,level,option_ids
,1,"1"'''
        with pytest.raises(CatalogParseError, match="blank category"):
            parse_catalog_csv_string(csv)


class TestCSVFileHandling:
    """Test file I/O operations."""

    def test_parse_csv_file(self, tmp_path):
        csv_file = tmp_path / "skills.csv"
        csv_file.write_text('''category,level,option_ids
Data,1,"201"
Data,2,"201,202"''', encoding="utf-8")

        catalog = parse_catalog_csv_file(str(csv_file))

        assert catalog.name == "skills"
        assert len(catalog) == 2

    def test_explicit_name(self, tmp_path):
        csv_file = tmp_path / "skills.csv"
        csv_file.write_text("category,level,option_ids\n", encoding="utf-8")
        assert parse_catalog_csv_file(str(csv_file), name="Other").name == "Other"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_catalog_csv_file(str(tmp_path / "missing.csv"))
