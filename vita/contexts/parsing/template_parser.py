"""
Profile template parsing utilities for the Parsing context.

Provides span-extraction functions that pull sections, fields, bullet lists
and tables out of a TEMPLATE.md document, plus the schema-driven assembly
that turns a whole document into raw per-endpoint values.

This module has no knowledge of ResumeProfile - it returns raw parsed data
that ResumeProfile.from_text() uses to construct records.

Pattern follows the data structure modules: parser produces data, data
structure consumes it.
"""

import copy
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from vita.contexts.parsing.exceptions import InputNotFoundError
from vita.contexts.parsing.logger import _log_debug
from vita.contexts.parsing.profile_schema import (
    OFFER_DESCRIPTION_LABEL,
    PROFILE_SCHEMA,
    ROLE_CONTRIBUTIONS_LABEL,
    ROLE_FIELDS,
    Expectation,
    FieldSpec,
    GroupSpec,
    ListSpec,
    MirrorSpec,
    OfferBlocksSpec,
    RoleBlocksSpec,
    SectionSchema,
    TableSpec,
)
from vita.contexts.parsing.template_patterns import (
    BOUNDARY_PATTERNS,
    FIELD_BOUNDARY_KINDS,
    BoundaryKind,
    CompoundBlockPatterns,
    MarkdownMarkers,
    SectionRegex,
    field_marker,
    heading_marker_pattern,
    is_field_marker_line,
    is_heading_marker,
    is_rule_line,
    section_heading_pattern,
)
from vita.utils.text_processing import (
    normalize_header_key,
    normalize_line_endings,
    usable_value,
)

# Any "## " heading line, used to report sections the schema doesn't know
_SECTION_HEADING_LINE = re.compile(r"^## (.+?)[ \t]*$", re.MULTILINE)


@dataclass(frozen=True)
class Boundary:
    """A position where a field value stops, tagged with what stops it."""

    kind: BoundaryKind
    position: int


@dataclass
class ParsedTemplateData:
    """
    Raw parsed template data.

    This is the intermediate form between raw text and ResumeProfile.
    ResumeProfile.from_text() uses this to construct records.
    """

    raw_text: str
    sections: dict[str, str]
    values: dict[str, dict[str, Any]]
    missing_sections: list[str] = field(default_factory=list)
    unrecognized_sections: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


# =============================================================================
# BOUNDARY DETECTION
# =============================================================================


def find_boundary(text: str, kind: BoundaryKind) -> Optional[Boundary]:
    """
    Find the first boundary of one kind in text.

    END_OF_TEXT always exists and sits at len(text).
    """
    if kind is BoundaryKind.END_OF_TEXT:
        return Boundary(kind, len(text))

    match = BOUNDARY_PATTERNS[kind].search(text)
    if match is None:
        return None
    return Boundary(kind, match.start())


def nearest_boundary(text: str, kinds: tuple = FIELD_BOUNDARY_KINDS) -> Boundary:
    """
    Find the earliest boundary among several kinds.

    Ties go to the kind listed first. Falls back to END_OF_TEXT.

    Example:
        >>> nearest_boundary(" VP\\n\\n**Location:** Chicago")
        Boundary(kind=<BoundaryKind.FIELD_MARKER: 'field_marker'>, position=4)
    """
    nearest = Boundary(BoundaryKind.END_OF_TEXT, len(text))
    for kind in kinds:
        candidate = find_boundary(text, kind)
        if candidate is not None and candidate.position < nearest.position:
            nearest = candidate
    return nearest


# =============================================================================
# SPAN EXTRACTORS
# =============================================================================


def extract_section(document: str, heading: str) -> str:
    """
    Extract a section between its "## heading" line and the next "## " heading.

    Args:
        document: Full template text
        heading: Exact section name (e.g., "Track Record")

    Returns:
        Stripped section body, or "" when the heading is absent
    """
    match = section_heading_pattern(heading).search(document)
    if match is None:
        return ""

    after_heading = document[match.end() :]
    if not after_heading.startswith("\n"):
        # Heading is the last line of the document
        return ""
    body = after_heading[1:]

    next_section = SectionRegex.NEXT_SECTION.search(body)
    if next_section is not None:
        body = body[: next_section.start()]

    return body.strip()


def section_preamble(section: str) -> str:
    """Text of a section before its first ### subsection."""
    match = SectionRegex.SUBSECTION_START.search(section)
    return section if match is None else section[: match.start()]


def _text_after_marker(content: str, marker: str) -> Optional[str]:
    """
    Return the text following the first occurrence of marker.

    Heading markers must match a whole heading line; label markers match
    exactly (so "**Thesis:**" never hits "**Core Thesis:**").
    """
    if is_heading_marker(marker):
        match = heading_marker_pattern(marker).search(content)
        if match is None:
            return None
        return content[match.end() :]

    idx = content.find(marker)
    if idx == -1:
        return None
    return content[idx + len(marker) :]


def extract_field(content: str, label: str) -> str:
    """
    Extract the value of a "**Label:**" field.

    The value runs to the nearest of: the next field marker (paragraph or
    bulleted style), a ### heading, a --- rule, or the end of content.

    Args:
        content: Section or block text
        label: Exact field label without bold markers or colon

    Returns:
        Cleaned value, or "" when absent or still placeholder

    Example:
        >>> extract_field("**Title:** VP\\n\\n**Location:** Chicago", "Title")
        'VP'
    """
    remainder = _text_after_marker(content, field_marker(label))
    if remainder is None:
        return ""

    end = nearest_boundary(remainder)
    return usable_value(remainder[: end.position])


def _bullet_body(stripped_line: str) -> Optional[str]:
    """Return the text after a bullet glyph, or None for non-bullet lines."""
    if stripped_line in MarkdownMarkers.BARE_BULLETS:
        return ""
    for glyph in MarkdownMarkers.BULLET_GLYPHS:
        if stripped_line.startswith(glyph):
            return stripped_line[len(glyph) :]
    return None


def extract_bullet_list(content: str, marker: str) -> list[str]:
    """
    Extract bullet items that follow a heading or label marker.

    Before the first item, blank lines and prose (instruction comments) are
    skipped. A heading, a rule or a field marker (including bulleted
    "- **Company:**" lines) always ends the list; once an item has been
    collected, a blank or non-bullet line ends it too. Items that clean to
    empty or are still placeholder are discarded.

    Args:
        content: Section or block text
        marker: "### Heading" or "**Label:**"

    Returns:
        Items in order of appearance (possibly empty)
    """
    remainder = _text_after_marker(content, marker)
    if remainder is None:
        return []

    items = []
    # First segment is the rest of the marker line
    for line in remainder.split("\n")[1:]:
        stripped = line.strip()
        if is_field_marker_line(stripped):
            break

        body = _bullet_body(stripped)
        if body is not None:
            value = usable_value(body)
            if value:
                items.append(value)
            continue

        if stripped.startswith(MarkdownMarkers.HEADING_CHAR) or is_rule_line(stripped):
            break
        if items:
            break

    return items


def parse_table_row(line: str) -> list[str]:
    """
    Split a pipe-delimited row into cleaned cells.

    The empty outer cells produced by leading/trailing pipes are discarded.
    Placeholder cells come back as "".

    Example:
        >>> parse_table_row("| $50M+ | Savings |")
        ['$50M+', 'Savings']
    """
    cells = line.strip().split(MarkdownMarkers.TABLE_PIPE)
    if cells and not cells[0].strip():
        cells = cells[1:]
    if cells and not cells[-1].strip():
        cells = cells[:-1]
    return [usable_value(cell) for cell in cells]


def extract_table(content: str, marker: str) -> list[dict[str, str]]:
    """
    Extract a markdown table that follows a marker as a list of row dicts.

    The first pipe line is the header, the next line is treated as the
    separator and skipped without validation, and following pipe lines are
    zipped against the header keys. Short rows pad with "". Rows whose cells
    are all empty or placeholder are dropped.

    Args:
        content: Section text
        marker: Introducing marker (e.g., "### Headline Stats")

    Returns:
        Row dicts keyed by normalized header ("Organization Type" -> "organization_type")
    """
    remainder = _text_after_marker(content, marker)
    if remainder is None:
        return []

    lines = [line.strip() for line in remainder.split("\n")[1:]]

    header_idx = None
    for i, line in enumerate(lines):
        if line.startswith(MarkdownMarkers.TABLE_PIPE):
            header_idx = i
            break
        # Don't borrow the next subsection's table
        if line.startswith(MarkdownMarkers.HEADING_CHAR) or is_rule_line(line):
            break
    if header_idx is None:
        return []

    headers = [normalize_header_key(cell) for cell in parse_table_row(lines[header_idx])]
    if not any(headers):
        return []

    rows = []
    for line in lines[header_idx + 2 :]:
        if not line.startswith(MarkdownMarkers.TABLE_PIPE):
            break

        cells = parse_table_row(line)
        if not any(cells):
            continue

        rows.append(
            {
                header: cells[i] if i < len(cells) else ""
                for i, header in enumerate(headers)
                if header
            }
        )

    return rows


# =============================================================================
# COMPOUND BLOCK EXTRACTORS
# =============================================================================


def extract_offer_blocks(section: str) -> list[dict[str, str]]:
    """
    Extract "What I Offer" title/description pairs.

    Each pair opens with a "- **Title:**" line; the description is the
    block's "**Description:**" field. Pairs without a usable title are dropped.
    """
    offers = []
    for block in CompoundBlockPatterns.OFFER_TITLE.split(section)[1:]:
        title = usable_value(block.split("\n", 1)[0])
        if not title:
            continue
        offers.append(
            {
                "title": title,
                "description": extract_field(block, OFFER_DESCRIPTION_LABEL),
            }
        )
    return offers


def strip_offer_blocks(section: str) -> str:
    """
    Remove What I Offer pairs from a section.

    Each "- **Title:**" line is cut together with the "**Description:**"
    field that follows it, so neither can be read as a section-level field.

    Example:
        >>> strip_offer_blocks("- **Title:** Ops\\n  **Description:** Fix\\n\\n**Name:** Jo")
        '\\n**Name:** Jo'
    """
    kept = []
    position = 0
    for match in CompoundBlockPatterns.OFFER_TITLE.finditer(section):
        if match.start() < position:
            continue
        kept.append(section[position : match.start()])

        line_end = section.find("\n", match.end())
        if line_end == -1:
            position = len(section)
            break
        position = line_end

        description = CompoundBlockPatterns.OFFER_DESCRIPTION.match(section, position)
        if description is not None:
            value_end = nearest_boundary(section[description.end() :])
            position = description.end() + value_end.position

    kept.append(section[position:])
    return "".join(kept)


def extract_role_blocks(section: str) -> list[dict[str, Any]]:
    """
    Extract "### Role N" groups in document order.

    The heading (ordinal plus any "(Most Recent)" style suffix) is split
    away, so it never leaks into a field. A role is kept when it has a
    title or a company.
    """
    roles = []
    contributions_marker = field_marker(ROLE_CONTRIBUTIONS_LABEL)

    for block in CompoundBlockPatterns.ROLE_HEADING.split(section)[1:]:
        role: dict[str, Any] = {key: extract_field(block, label) for key, label in ROLE_FIELDS}
        role["contributions"] = extract_bullet_list(block, contributions_marker)

        if role["title"] or role["company"]:
            roles.append(role)

    return roles


# =============================================================================
# SCHEMA-DRIVEN ASSEMBLY
# =============================================================================


def project_table(rows: list[dict[str, str]], spec: TableSpec) -> list[dict[str, str]]:
    """Project table rows onto record keys, dropping rows missing the required column."""
    projected = []
    for row in rows:
        if not row.get(spec.required):
            continue
        projected.append({out_key: row.get(header_key, "") for out_key, header_key in spec.columns})
    return projected


def extract_expectation(section: str, spec: Expectation) -> Any:
    """
    Extract one schema expectation from a section.

    MirrorSpec values are not extracted here; they are filled in by
    resolve_mirrors() once every section has been parsed.
    """
    if isinstance(spec, FieldSpec):
        if not spec.preamble_first:
            return extract_field(section, spec.label)
        value = extract_field(section_preamble(section), spec.label)
        return value or extract_field(strip_offer_blocks(section), spec.label)
    if isinstance(spec, ListSpec):
        return extract_bullet_list(section, spec.marker)
    if isinstance(spec, TableSpec):
        return project_table(extract_table(section, spec.marker), spec)
    if isinstance(spec, OfferBlocksSpec):
        return extract_offer_blocks(section)
    if isinstance(spec, RoleBlocksSpec):
        return extract_role_blocks(section)
    if isinstance(spec, GroupSpec):
        return {member.key: extract_expectation(section, member) for member in spec.members}
    if isinstance(spec, MirrorSpec):
        return None
    raise TypeError(f"Unknown expectation type: {type(spec).__name__}")


def extract_section_values(section: str, schema: SectionSchema) -> dict[str, Any]:
    """Run every expectation of one section schema against its section text."""
    return {spec.key: extract_expectation(section, spec) for spec in schema.expectations}


def resolve_mirrors(values: dict[str, dict[str, Any]]) -> None:
    """Fill MirrorSpec keys with copies of their source values (in place)."""
    for schema in PROFILE_SCHEMA:
        for spec in schema.expectations:
            if isinstance(spec, MirrorSpec):
                source = values.get(spec.source_endpoint, {}).get(spec.source_key)
                values[schema.endpoint][spec.key] = copy.deepcopy(source) if source else []


def find_unrecognized_sections(document: str) -> list[str]:
    """List "## " headings that are not part of the profile schema."""
    known = {schema.heading for schema in PROFILE_SCHEMA}
    return [
        match.group(1)
        for match in _SECTION_HEADING_LINE.finditer(document)
        if match.group(1) not in known
    ]


def parse_template_text(text: str) -> ParsedTemplateData:
    """
    Parse a profile template into raw per-endpoint values.

    This is the main parsing function. Each section is located and
    extracted independently; mirrors are resolved afterwards. Nothing in a
    readable document raises: absent content becomes empty values.

    Args:
        text: Raw template markdown

    Returns:
        ParsedTemplateData with values for all nine endpoints
    """
    document = normalize_line_endings(text)

    sections = {}
    values = {}
    missing = []

    for schema in PROFILE_SCHEMA:
        section = extract_section(document, schema.heading)
        if not section:
            missing.append(schema.heading)
            _log_debug(f"Section '## {schema.heading}' is missing or empty")

        sections[schema.heading] = section
        values[schema.endpoint] = extract_section_values(section, schema)

    resolve_mirrors(values)

    unrecognized = find_unrecognized_sections(document)

    warnings = [f"Section '## {heading}' is missing or empty" for heading in missing]
    warnings.extend(f"Unrecognized section '## {heading}' ignored" for heading in unrecognized)

    return ParsedTemplateData(
        raw_text=text,
        sections=sections,
        values=values,
        missing_sections=missing,
        unrecognized_sections=unrecognized,
        warnings=warnings,
    )


def extract_profile_values(text: str) -> dict[str, dict[str, Any]]:
    """Shortcut returning only the per-endpoint values of parse_template_text()."""
    return parse_template_text(text).values


def read_template(file_path: Path) -> str:
    """
    Read a template document.

    Raises:
        InputNotFoundError: If file_path is not an existing file
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise InputNotFoundError(file_path)
    return file_path.read_text(encoding="utf-8")


def parse_template_file(file_path: Path) -> ParsedTemplateData:
    """
    Parse a profile template from file.

    Raises:
        InputNotFoundError: If file_path is not an existing file
    """
    return parse_template_text(read_template(file_path))
