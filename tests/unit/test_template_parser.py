"""
Unit tests for span extraction in the parsing context.

Tests section location, field boundaries, bullet lists and tables in
vita.contexts.parsing.template_parser.
"""

import pytest

from vita.contexts.parsing.template_parser import (
    Boundary,
    extract_bullet_list,
    extract_field,
    extract_section,
    extract_table,
    nearest_boundary,
    parse_table_row,
    section_preamble,
)
from vita.contexts.parsing.template_patterns import BoundaryKind


@pytest.mark.unit
class TestExtractSection:
    """Tests for extract_section function."""

    def test_section_runs_to_next_level_two_heading(self):
        document = "## Alpha\nx\n### Sub\ny\n## Beta\nz"
        assert extract_section(document, "Alpha") == "x\n### Sub\ny"
        assert extract_section(document, "Beta") == "z"

    def test_heading_at_start_of_document(self):
        assert extract_section("## Skills\n- Python\n## About\nx", "Skills") == "- Python"

    def test_missing_section_is_empty(self):
        assert extract_section("## Alpha\nx", "Skills") == ""

    def test_heading_must_match_exactly(self):
        """'## Skills Overview' is not the Skills section."""
        assert extract_section("## Skills Overview\n- Python", "Skills") == ""

    def test_trailing_spaces_on_heading_allowed(self):
        assert extract_section("## Skills   \n- Python", "Skills") == "- Python"

    def test_heading_on_last_line(self):
        assert extract_section("intro\n## Skills", "Skills") == ""

    def test_section_preamble_stops_at_subsection(self):
        section = "**Name:** A\n\n### What I Offer\n- **Title:** B"
        assert section_preamble(section) == "**Name:** A\n\n"


@pytest.mark.unit
class TestNearestBoundary:
    """Tests for nearest_boundary function."""

    def test_field_marker_boundary(self):
        boundary = nearest_boundary(" VP\n\n**Location:** Chicago")
        assert boundary == Boundary(BoundaryKind.FIELD_MARKER, 4)

    def test_bulleted_field_marker_boundary(self):
        boundary = nearest_boundary(" VP\n- **Company:** Acme")
        assert boundary.kind is BoundaryKind.FIELD_MARKER
        assert boundary.position == 3

    def test_heading_before_rule(self):
        boundary = nearest_boundary(" text\n### Next\n---")
        assert boundary.kind is BoundaryKind.HEADING

    def test_end_of_text(self):
        boundary = nearest_boundary("plain")
        assert boundary == Boundary(BoundaryKind.END_OF_TEXT, 5)


@pytest.mark.unit
class TestExtractField:
    """Tests for extract_field function."""

    def test_paragraph_style_fields(self):
        content = "**Title:** VP\n\n**Location:** Chicago"
        assert extract_field(content, "Title") == "VP"
        assert extract_field(content, "Location") == "Chicago"

    def test_bulleted_style_fields(self):
        content = "- **Title:** VP\n- **Company:** Acme\n- **Dates:** 2021 - Present"
        assert extract_field(content, "Title") == "VP"
        assert extract_field(content, "Company") == "Acme"
        assert extract_field(content, "Dates") == "2021 - Present"

    def test_value_on_following_lines(self):
        content = "**Philosophy:**\nShip small,\nship often.\n\n### Next"
        assert extract_field(content, "Philosophy") == "Ship small, ship often."

    def test_rule_ends_value(self):
        assert extract_field("**Industry:**\nLogistics\n---\n## Other", "Industry") == "Logistics"

    def test_absent_field(self):
        assert extract_field("**Title:** VP", "Location") == ""

    def test_placeholder_field_is_unset(self):
        assert extract_field("**Title:** <!-- VP, Your Specialty -->", "Title") == ""

    def test_label_match_is_exact(self):
        """'**Thesis:**' must not be found inside '**Core Thesis:**'."""
        assert extract_field("**Core Thesis:** Big idea", "Thesis") == ""


@pytest.mark.unit
class TestExtractBulletList:
    """Tests for extract_bullet_list function."""

    def test_dash_and_star_bullets_in_order(self):
        content = "### I Thrive In\n\n- Small teams\n* Weekly releases\n\nClosing prose"
        assert extract_bullet_list(content, "### I Thrive In") == [
            "Small teams",
            "Weekly releases",
        ]

    def test_prose_before_first_item_is_skipped(self):
        content = "### Implications\n<!-- what follows -->\nSome intro text\n- First\n- Second"
        assert extract_bullet_list(content, "### Implications") == ["First", "Second"]

    def test_heading_ends_list_before_any_item(self):
        content = "### Technical\n\n### Domain Expertise\n- Retail"
        assert extract_bullet_list(content, "### Technical") == []

    def test_rule_ends_list(self):
        assert extract_bullet_list("### Technical\n---\n- SQL", "### Technical") == []

    def test_placeholder_items_are_discarded(self):
        content = "### Technical\n- <!-- Tools, languages -->\n- SQL"
        assert extract_bullet_list(content, "### Technical") == ["SQL"]

    def test_missing_marker(self):
        assert extract_bullet_list("### Technical\n- SQL", "### Methodologies") == []

    def test_heading_marker_matches_whole_heading(self):
        content = "### Technical Leadership\n- Mentoring\n\n### Technical\n- SQL"
        assert extract_bullet_list(content, "### Technical") == ["SQL"]

    def test_heading_with_annotation_suffix(self):
        content = "### Technical <!-- tools -->\n- SQL"
        assert extract_bullet_list(content, "### Technical") == ["SQL"]

    def test_label_marker(self):
        content = "**Target Roles:**\n- CCO\n- COO\n\n**Reporting Relationship:** CEO"
        assert extract_bullet_list(content, "**Target Roles:**") == ["CCO", "COO"]

    def test_bold_label_bullet_ends_list(self):
        content = "**Key Contributions:**\n  - Built team\n- **Company:** Acme\n- Shipped"
        assert extract_bullet_list(content, "**Key Contributions:**") == ["Built team"]

    def test_field_marker_before_first_item_ends_list(self):
        content = "**Target Roles:**\n\n**Reporting Relationship:** CEO\n- Not a role"
        assert extract_bullet_list(content, "**Target Roles:**") == []

    def test_indented_items(self):
        content = "- **Key Contributions:**\n  - Cut costs\n  - Hired well\n"
        assert extract_bullet_list(content, "**Key Contributions:**") == ["Cut costs", "Hired well"]


@pytest.mark.unit
class TestExtractTable:
    """Tests for parse_table_row and extract_table functions."""

    HEADLINE = "### Headline Stats\n\n| Stat | Context |\n|------|---------|\n"

    def test_parse_table_row(self):
        assert parse_table_row("| $50M+ | Savings |") == ["$50M+", "Savings"]

    def test_parse_table_row_placeholder_cell(self):
        assert parse_table_row("| <!-- stat --> | Years |") == ["", "Years"]

    def test_rows_zip_against_header(self):
        content = self.HEADLINE + "| $50M+ | Savings |\n| 300% | ROI |\n"
        assert extract_table(content, "### Headline Stats") == [
            {"stat": "$50M+", "context": "Savings"},
            {"stat": "300%", "context": "ROI"},
        ]

    def test_header_keys_are_normalized(self):
        content = (
            "### Organization Types\n"
            "| Organization Type | What I Bring |\n"
            "|---|---|\n"
            "| Startups | Speed |\n"
        )
        assert extract_table(content, "### Organization Types") == [
            {"organization_type": "Startups", "what_i_bring": "Speed"}
        ]

    def test_short_row_pads_and_extra_cells_ignored(self):
        content = self.HEADLINE + "| Alone |\n| A | B | C |\n"
        assert extract_table(content, "### Headline Stats") == [
            {"stat": "Alone", "context": ""},
            {"stat": "A", "context": "B"},
        ]

    def test_placeholder_row_dropped(self):
        content = self.HEADLINE + "| <!-- $50M+ --> | <!-- context --> |\n| 12 | Launches |\n"
        assert extract_table(content, "### Headline Stats") == [{"stat": "12", "context": "Launches"}]

    def test_table_ends_at_non_pipe_line(self):
        content = self.HEADLINE + "| 1 | a |\n\n| 2 | b |\n"
        assert extract_table(content, "### Headline Stats") == [{"stat": "1", "context": "a"}]

    def test_separator_line_is_not_validated(self):
        content = "### Headline Stats\n| Stat | Context |\n| anything |\n| 1 | a |\n"
        assert extract_table(content, "### Headline Stats") == [{"stat": "1", "context": "a"}]

    def test_next_subsection_table_not_borrowed(self):
        content = "### Headline Stats\n\n### Other\n| Stat | Context |\n|-|-|\n| 1 | a |\n"
        assert extract_table(content, "### Headline Stats") == []

    def test_missing_table(self):
        assert extract_table("### Headline Stats\n\nNo table yet.", "### Headline Stats") == []
