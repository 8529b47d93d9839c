"""Unit tests for value cleaning in vita.utils.text_processing."""

import pytest

from vita.utils.text_processing import (
    clean_value,
    is_placeholder,
    normalize_header_key,
    normalize_line_endings,
    strip_annotations,
    truncate_display,
    usable_value,
)


@pytest.mark.unit
def test_clean_value_strips_and_collapses_newlines():
    """Embedded newlines and the indentation around them become one space."""
    assert clean_value("  Builds teams\n    that ship.\n") == "Builds teams that ship."


@pytest.mark.unit
def test_clean_value_removes_multiline_annotation():
    """Annotation spans may cross lines and are removed entirely."""
    raw = "\n<!-- Instructions:\n  keep it short -->\nMeasure what matters.\n"
    assert clean_value(raw) == "Measure what matters."


@pytest.mark.unit
def test_clean_value_keeps_content_order():
    """Cleaning never reorders or drops real content."""
    assert clean_value("first <!-- x --> second\nthird") == "first  second third"


@pytest.mark.unit
def test_strip_annotations_removes_every_span():
    assert strip_annotations("a<!-- 1 -->b<!-- 2 -->c") == "abc"


@pytest.mark.unit
def test_is_placeholder_detects_unterminated_annotation():
    assert is_placeholder("<!-- still a hint")
    assert not is_placeholder("Chicago, IL")


@pytest.mark.unit
def test_usable_value_keeps_text_next_to_complete_annotation():
    """Text outside a complete span survives; only the span is dropped."""
    assert usable_value("Jane <!-- your full name -->") == "Jane"


@pytest.mark.unit
def test_usable_value_unsets_placeholders():
    assert usable_value("<!-- Your full name -->") == ""
    assert usable_value("Your Name <!-- replace this") == ""
    assert usable_value("   \n  ") == ""


@pytest.mark.unit
def test_normalize_header_key():
    assert normalize_header_key("Organization Type") == "organization_type"
    assert normalize_header_key("  What   I Bring ") == "what_i_bring"
    assert normalize_header_key("Stat") == "stat"


@pytest.mark.unit
def test_normalize_line_endings():
    assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"


@pytest.mark.unit
def test_truncate_display():
    assert truncate_display("short", 10) == "short"
    assert truncate_display("this is a very long string", 10) == "this is..."
