"""Unit tests for the declarative profile schema."""

import pytest

from vita.contexts.parsing.profile_schema import (
    ENDPOINTS,
    PROFILE_SCHEMA,
    GroupSpec,
    MirrorSpec,
    TableSpec,
    endpoint_description,
    get_section_schema,
)


@pytest.mark.unit
def test_nine_endpoints_in_order():
    assert ENDPOINTS == (
        "about",
        "narrative",
        "thesis",
        "accomplishments",
        "track-record",
        "experience",
        "seeking",
        "cultural-fit",
        "skills",
    )


@pytest.mark.unit
def test_headings_are_unique():
    headings = [schema.heading for schema in PROFILE_SCHEMA]
    assert len(headings) == len(set(headings))
    assert get_section_schema("track-record").heading == "Track Record"
    assert get_section_schema("cultural-fit").heading == "Cultural Fit"


@pytest.mark.unit
def test_endpoint_descriptions():
    assert endpoint_description("about") == "Core identity and professional positioning"
    assert endpoint_description("skills") == "Expertise: methodologies, technical, domain"
    assert endpoint_description("unknown") == "unknown"


@pytest.mark.unit
def test_unknown_endpoint():
    assert get_section_schema("hobbies") is None


@pytest.mark.unit
def test_mirrors_point_at_real_keys():
    """Every mirror names an endpoint and key that the schema extracts."""
    mirrors = [
        (schema.endpoint, spec)
        for schema in PROFILE_SCHEMA
        for spec in schema.expectations
        if isinstance(spec, MirrorSpec)
    ]
    assert {(endpoint, spec.key) for endpoint, spec in mirrors} == {
        ("track-record", "financial_impact"),
        ("skills", "what_i_offer"),
    }

    for _, spec in mirrors:
        assert spec.source_key in get_section_schema(spec.source_endpoint).keys


@pytest.mark.unit
def test_table_required_columns_are_projected():
    for schema in PROFILE_SCHEMA:
        for spec in schema.expectations:
            if isinstance(spec, TableSpec):
                assert spec.required in {header for _, header in spec.columns}


@pytest.mark.unit
def test_skills_expertise_group():
    skills = get_section_schema("skills")
    group = next(spec for spec in skills.expectations if isinstance(spec, GroupSpec))

    assert [member.key for member in group.members] == ["methodologies", "technical", "domain"]
