"""
Tests for requirement-set parsing.

Requirement text is comma-separated option ids. Malformed entries must
never raise: they become UnparsedOption placeholders that no selection
can contain.
"""

import pytest
from survey_levels.requirements import (
    MalformedRequirementWarning,
    UnparsedOption,
    format_required_option_ids,
    is_satisfied,
    malformed_tokens,
    parse_required_option_ids,
)


class TestParsing:
    """Test conversion from text to option-id sets."""

    def test_simple_list(self):
        assert parse_required_option_ids("3,7,12") == frozenset({3, 7, 12})

    def test_single_entry(self):
        assert parse_required_option_ids("5") == frozenset({5})

    def test_duplicates_collapse(self):
        assert parse_required_option_ids("1,1,2") == frozenset({1, 2})

    def test_whitespace_is_tolerated(self):
        """Whitespace around entries should be ignored."""
        assert parse_required_option_ids(" 1, 2 ,3 ") == frozenset({1, 2, 3})

    def test_blank_string_is_empty_set(self):
        assert parse_required_option_ids("") == frozenset()
        assert parse_required_option_ids("   ") == frozenset()

    def test_none_is_empty_set(self):
        assert parse_required_option_ids(None) == frozenset()

    def test_signed_integers(self):
        assert parse_required_option_ids("-8,+4") == frozenset({-8, 4})

    def test_iterable_input(self):
        """Already split input (e.g. a YAML list) is accepted."""
        assert parse_required_option_ids([1, "2", " 3 "]) == frozenset({1, 2, 3})

    def test_single_int_input(self):
        assert parse_required_option_ids(12) == frozenset({12})


class TestMalformedEntries:
    """Malformed entries become unsatisfiable placeholders."""

    def test_malformed_entry_becomes_placeholder(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids("1,x,3")
        assert parsed == frozenset({1, UnparsedOption("x"), 3})

    def test_empty_inner_entry_is_malformed(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids("1,,3")
        assert UnparsedOption("") in parsed

    def test_decimal_is_malformed(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids("1.5")
        assert parsed == frozenset({UnparsedOption("1.5")})

    def test_bool_in_iterable_is_malformed(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids([True])
        assert 1 not in parsed

    def test_placeholder_never_equals_an_int(self):
        assert UnparsedOption("1") != 1
        assert UnparsedOption("x") not in {1, 2, 3}

    def test_float_scalar_is_malformed(self):
        """A bare 1.5 (e.g. from YAML) is one malformed entry, not an error."""
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids(1.5)
        assert parsed == frozenset({UnparsedOption("1.5")})

    def test_bool_scalar_is_malformed(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids(True)
        assert parsed == frozenset({UnparsedOption("True")})
        assert 1 not in parsed

    def test_list_item_with_separator_is_split(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids(["a,b", 3])
        assert parsed == frozenset({UnparsedOption("a"), UnparsedOption("b"), 3})

    def test_list_items_round_trip_through_text(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids(["a,b", "1, 2"])
            reparsed = parse_required_option_ids(format_required_option_ids(parsed))
        assert reparsed == parsed

    def test_malformed_tokens_listing(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids("b,1,a")
        assert malformed_tokens(parsed) == ["a", "b"]


class TestSatisfaction:
    """Test the subset check."""

    def test_subset_is_satisfied(self):
        assert is_satisfied(frozenset({1, 2}), frozenset({1, 2, 3}))

    def test_missing_option_is_not_satisfied(self):
        assert not is_satisfied(frozenset({1, 4}), frozenset({1, 2, 3}))

    def test_empty_requirement_is_vacuously_satisfied(self):
        assert is_satisfied(frozenset(), frozenset())

    def test_placeholder_is_never_satisfied(self):
        with pytest.warns(MalformedRequirementWarning):
            required = parse_required_option_ids("1,x")
        assert not is_satisfied(required, frozenset(range(1000)))


class TestFormatting:
    """Test rendering back to text."""

    def test_ascending_order(self):
        assert format_required_option_ids(frozenset({12, 3, 7})) == "3,7,12"

    def test_empty_set(self):
        assert format_required_option_ids(frozenset()) == ""

    def test_malformed_tokens_follow_ids(self):
        with pytest.warns(MalformedRequirementWarning):
            parsed = parse_required_option_ids("x,2,1")
        assert format_required_option_ids(parsed) == "1,2,x"

    def test_lone_empty_token_stays_unsatisfiable(self):
        text = format_required_option_ids(frozenset({UnparsedOption("")}))
        with pytest.warns(MalformedRequirementWarning):
            reparsed = parse_required_option_ids(text)
        assert reparsed == frozenset({UnparsedOption("")})
