"""
Declarative profile schema for the Parsing context.

Maps each of the nine template sections to the structure expected inside it.
The parser walks this table instead of hardcoding an extraction call sequence,
so the schema can be inspected and tested on its own.

Expectation kinds:
- FieldSpec: scalar after "**Label:**"
- ListSpec: bullet items after a heading or label marker
- TableSpec: pipe table after a marker, projected onto record keys
- OfferBlocksSpec: repeated "- **Title:**" / "**Description:**" pairs
- RoleBlocksSpec: repeated "### Role N" groups
- GroupSpec: nested object built from member expectations
- MirrorSpec: verbatim copy of a value extracted for another endpoint

New section shapes need their boundary markers added explicitly in
template_patterns.py; nothing here is inferred from the document.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class FieldSpec:
    """
    Scalar field.

    preamble_first looks before the first ### and falls back to the rest of
    the section with its What I Offer blocks cut out.
    """

    key: str
    label: str
    preamble_first: bool = False


@dataclass(frozen=True)
class ListSpec:
    key: str
    marker: str


@dataclass(frozen=True)
class TableSpec:
    """
    Table projected onto record keys.

    Attributes:
        key: Record key receiving the projected rows
        marker: Introducing marker (usually a ### heading)
        columns: (record_key, normalized_header_key) pairs, in output order
        required: Header key that must be non-empty for a row to be kept
    """

    key: str
    marker: str
    columns: Tuple[Tuple[str, str], ...]
    required: str


@dataclass(frozen=True)
class OfferBlocksSpec:
    key: str


@dataclass(frozen=True)
class RoleBlocksSpec:
    key: str


@dataclass(frozen=True)
class GroupSpec:
    key: str
    members: Tuple["Expectation", ...]


@dataclass(frozen=True)
class MirrorSpec:
    """Intentional denormalization: copy source_endpoint's source_key verbatim."""

    key: str
    source_endpoint: str
    source_key: str


Expectation = Union[
    FieldSpec, ListSpec, TableSpec, OfferBlocksSpec, RoleBlocksSpec, GroupSpec, MirrorSpec
]


@dataclass(frozen=True)
class SectionSchema:
    """
    One template section and the record it produces.

    Attributes:
        endpoint: Record name, file stem and lookup path ("track-record")
        heading: Exact "## " heading text in the template ("Track Record")
        description: One-line description for the directory listing
        expectations: What to extract from the section, in record key order
    """

    endpoint: str
    heading: str
    description: str
    expectations: Tuple[Expectation, ...]

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(spec.key for spec in self.expectations)


# Sub-fields of each "### Role N" block
ROLE_FIELDS = (
    ("title", "Title"),
    ("company", "Company"),
    ("dates", "Dates"),
    ("location", "Location"),
    ("description", "Description"),
)
ROLE_CONTRIBUTIONS_LABEL = "Key Contributions"
OFFER_DESCRIPTION_LABEL = "Description"

FINANCIAL_IMPACT_COLUMNS = (
    ("accomplishment", "accomplishment"),
    ("company", "company"),
    ("value", "value"),
)


PROFILE_SCHEMA: Tuple[SectionSchema, ...] = (
    SectionSchema(
        endpoint="about",
        heading="About",
        description="Core identity and professional positioning",
        expectations=(
            FieldSpec("name", "Name", preamble_first=True),
            FieldSpec("preferred_name", "Preferred Name", preamble_first=True),
            FieldSpec("title", "Title", preamble_first=True),
            FieldSpec("location", "Location", preamble_first=True),
            FieldSpec("core_thesis", "Core Thesis", preamble_first=True),
            FieldSpec("the_moment", "The Moment", preamble_first=True),
            OfferBlocksSpec("what_i_offer"),
        ),
    ),
    SectionSchema(
        endpoint="narrative",
        heading="Narrative",
        description="Professional story and philosophy",
        expectations=(
            FieldSpec("professional_narrative", "Professional Narrative"),
            FieldSpec("philosophy", "Philosophy"),
        ),
    ),
    SectionSchema(
        endpoint="thesis",
        heading="Thesis",
        description="Core professional thesis and implications",
        expectations=(
            FieldSpec("core_thesis", "Core Thesis"),
            FieldSpec("the_moment", "The Moment"),
            ListSpec("implications", "### Implications"),
        ),
    ),
    SectionSchema(
        endpoint="accomplishments",
        heading="Accomplishments",
        description="Quantified achievements with evidence",
        expectations=(
            TableSpec(
                "financial_impact",
                "### Financial Impact",
                columns=FINANCIAL_IMPACT_COLUMNS,
                required="accomplishment",
            ),
            ListSpec("operational_scale", "### Operational Scale"),
            ListSpec("recognition_innovation", "### Recognition & Innovation"),
        ),
    ),
    SectionSchema(
        endpoint="track-record",
        heading="Track Record",
        description="Headline stats with context",
        expectations=(
            TableSpec(
                "headline_stats",
                "### Headline Stats",
                columns=(("stat", "stat"), ("context", "context")),
                required="stat",
            ),
            MirrorSpec("financial_impact", "accomplishments", "financial_impact"),
        ),
    ),
    SectionSchema(
        endpoint="experience",
        heading="Experience",
        description="Role history with contributions",
        expectations=(RoleBlocksSpec("experience"),),
    ),
    SectionSchema(
        endpoint="seeking",
        heading="Seeking",
        description="Target roles, org types, what they want",
        expectations=(
            ListSpec("target_roles", "**Target Roles:**"),
            FieldSpec("reporting_relationship", "Reporting Relationship"),
            TableSpec(
                "organization_types",
                "### Organization Types",
                columns=(("type", "organization_type"), ("what_i_bring", "what_i_bring")),
                required="organization_type",
            ),
            FieldSpec("industry", "Industry"),
        ),
    ),
    SectionSchema(
        endpoint="cultural-fit",
        heading="Cultural Fit",
        description="Thrive-in environments and not-right-for signals",
        expectations=(
            ListSpec("thrive_in", "### I Thrive In"),
            ListSpec("not_right_for", "### Not Right For"),
        ),
    ),
    SectionSchema(
        endpoint="skills",
        heading="Skills",
        description="Expertise: methodologies, technical, domain",
        expectations=(
            MirrorSpec("what_i_offer", "about", "what_i_offer"),
            GroupSpec(
                "expertise",
                members=(
                    ListSpec("methodologies", "### Methodologies"),
                    ListSpec("technical", "### Technical"),
                    ListSpec("domain", "### Domain Expertise"),
                ),
            ),
        ),
    ),
)

ENDPOINTS = tuple(schema.endpoint for schema in PROFILE_SCHEMA)


def get_section_schema(endpoint: str) -> Optional[SectionSchema]:
    """Look up the schema entry for an endpoint name (None if unknown)."""
    for schema in PROFILE_SCHEMA:
        if schema.endpoint == endpoint:
            return schema
    return None


def endpoint_description(endpoint: str) -> str:
    """Directory description for an endpoint, falling back to its name."""
    schema = get_section_schema(endpoint)
    return schema.description if schema else endpoint
