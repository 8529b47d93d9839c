"""
Pattern constants for profile template parsing.

Pattern classes follow the convention of the other pattern modules:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from enum import Enum

# =============================================================================
# MARKDOWN MARKERS
# =============================================================================


@dataclass(frozen=True)
class MarkdownMarkers:
    """
    Literal markers of the template convention.

    Sections are "## Name", subsections "### Name", fields "**Label:**".
    """

    HEADING_CHAR: str = "#"
    HORIZONTAL_RULE: str = "---"
    TABLE_PIPE: str = "|"
    BULLET_GLYPHS: tuple = ("- ", "* ")
    BARE_BULLETS: tuple = ("-", "*")


@dataclass(frozen=True)
class SectionRegex:
    """Compiled patterns for section location (used with re.MULTILINE)."""

    # Any level-2 heading line; "### " never matches because of the space
    NEXT_SECTION: re.Pattern = re.compile(r"^## ", re.MULTILINE)

    # Start of a level-3 subsection (the About preamble ends here)
    SUBSECTION_START: re.Pattern = re.compile(r"^###\s", re.MULTILINE)


@dataclass(frozen=True)
class CompoundBlockPatterns:
    """
    Split patterns for repeated blocks.

    OFFER_TITLE: "- **Title:** ..." opens each What I Offer pair
    OFFER_DESCRIPTION: the "**Description:**" marker that follows a title line
    ROLE_HEADING: "### Role 2" with any trailing text, e.g. "(Most Recent)"
    """

    OFFER_TITLE: re.Pattern = re.compile(r"^[ \t]*- \*\*Title:\*\*", re.MULTILINE)
    OFFER_DESCRIPTION: re.Pattern = re.compile(r"\s*(?:[-*][ \t]+)?\*\*Description:\*\*")
    ROLE_HEADING: re.Pattern = re.compile(r"^###[ \t]+Role[ \t]+\d+[^\n]*", re.MULTILINE)


# =============================================================================
# FIELD BOUNDARIES
# =============================================================================


class BoundaryKind(Enum):
    """Kinds of text position that can end a field value."""

    FIELD_MARKER = "field_marker"
    HEADING = "heading"
    RULE = "rule"
    END_OF_TEXT = "end_of_text"


# Each pattern matches at the newline that precedes the boundary line.
# FIELD_MARKER covers both "**Label:**" and "- **Label:**" (indent allowed).
BOUNDARY_PATTERNS = {
    BoundaryKind.FIELD_MARKER: re.compile(r"\n[ \t]*(?:[-*][ \t]+)?\*\*[^*\n]+?:\*\*"),
    BoundaryKind.HEADING: re.compile(r"\n###\s"),
    BoundaryKind.RULE: re.compile(r"\n---"),
}

# Boundary kinds that end a field, in tie-break order
FIELD_BOUNDARY_KINDS = (
    BoundaryKind.FIELD_MARKER,
    BoundaryKind.HEADING,
    BoundaryKind.RULE,
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def field_marker(label: str) -> str:
    """
    Exact marker for a labeled field.

    Example:
        >>> field_marker("Core Thesis")
        '**Core Thesis:**'
    """
    return f"**{label}:**"


def section_heading_pattern(heading: str) -> re.Pattern:
    """Pattern matching the exact "## <heading>" line (trailing blanks allowed)."""
    return re.compile(rf"^## {re.escape(heading)}[ \t]*$", re.MULTILINE)


def heading_marker_pattern(marker: str) -> re.Pattern:
    """
    Pattern matching a whole heading line for a heading marker.

    "### Technical" matches "### Technical", "### Technical (tools)" and
    "### Technical <!-- hint -->", but not "### Technical Leadership".
    """
    return re.compile(
        rf"^[ \t]*{re.escape(marker)}[ \t]*(?:[(:<][^\n]*)?$", re.MULTILINE
    )


def is_heading_marker(marker: str) -> bool:
    """Check whether an introducing marker is a heading rather than a label."""
    return marker.lstrip().startswith(MarkdownMarkers.HEADING_CHAR)


def is_field_marker_line(stripped_line: str) -> bool:
    """Check whether a stripped line opens a field ("**X:**" or "- **X:**")."""
    return BOUNDARY_PATTERNS[BoundaryKind.FIELD_MARKER].match("\n" + stripped_line) is not None


def is_rule_line(stripped_line: str) -> bool:
    """Check whether a stripped line is a horizontal rule."""
    return stripped_line.startswith(MarkdownMarkers.HORIZONTAL_RULE)
