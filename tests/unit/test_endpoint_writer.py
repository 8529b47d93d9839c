"""Unit tests for endpoint file writing in the publishing context."""

import json

import pytest

from vita.contexts.parsing.profile_data_structure import ResumeProfile
from vita.contexts.publishing.endpoint_writer import (
    build_envelope,
    build_root_payload,
    write_endpoint_files,
)

TEMPLATE = """## About

**Name:** Zoë Brandt

**Title:** Head of Data

## Cultural Fit

### I Thrive In

- Teams that write things down
"""

LAST_UPDATED = "2025-01-15"


@pytest.fixture
def profile():
    return ResumeProfile.from_text(TEMPLATE)


@pytest.mark.unit
def test_build_envelope():
    envelope = build_envelope({"name": "Zoë"}, "1.2.0", LAST_UPDATED, "about")

    assert envelope == {
        "meta": {
            "api_version": "1.2.0",
            "last_updated": LAST_UPDATED,
            "source": "Living Resume API",
            "note": "Machine-readable professional profile",
            "endpoint": "/about",
        },
        "data": {"name": "Zoë"},
    }


@pytest.mark.unit
def test_build_root_payload(profile):
    root = build_root_payload(profile, "1.0.0", LAST_UPDATED)

    assert root == {
        "name": "Zoë Brandt Living Resume API",
        "description": "Query this professional profile programmatically",
        "version": "1.0.0",
        "last_updated": LAST_UPDATED,
        "endpoints": {
            "GET /about": "Core identity and professional positioning",
            "GET /cultural-fit": "Thrive-in environments and not-right-for signals",
        },
    }


@pytest.mark.unit
def test_only_non_empty_endpoints_written(profile, tmp_path):
    result = write_endpoint_files(profile, tmp_path, last_updated=LAST_UPDATED)

    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "about.json",
        "cultural-fit.json",
        "root.json",
    ]
    assert result.written == ["about", "cultural-fit"]
    assert "skills" in result.skipped
    assert result.file_count == 3


@pytest.mark.unit
def test_json_format(profile, tmp_path):
    write_endpoint_files(profile, tmp_path, version="2.0.0", last_updated=LAST_UPDATED)

    text = (tmp_path / "about.json").read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '\n  "meta": {\n' in text
    assert "Zoë Brandt" in text

    payload = json.loads(text)
    assert payload["meta"]["api_version"] == "2.0.0"
    assert payload["meta"]["endpoint"] == "/about"
    assert payload["data"]["name"] == "Zoë Brandt"
    assert payload["data"]["what_i_offer"] == []


@pytest.mark.unit
def test_output_is_idempotent(profile, tmp_path):
    write_endpoint_files(profile, tmp_path, last_updated=LAST_UPDATED)
    first = {path.name: path.read_bytes() for path in tmp_path.iterdir()}

    write_endpoint_files(profile, tmp_path, last_updated=LAST_UPDATED)
    second = {path.name: path.read_bytes() for path in tmp_path.iterdir()}

    assert first == second


@pytest.mark.unit
def test_stale_endpoint_file_removed(profile, tmp_path):
    stale = tmp_path / "skills.json"
    stale.write_text("{}\n", encoding="utf-8")

    result = write_endpoint_files(profile, tmp_path, last_updated=LAST_UPDATED)

    assert not stale.exists()
    assert result.removed == ["skills"]


@pytest.mark.unit
def test_empty_profile_writes_only_root(tmp_path):
    output_dir = tmp_path / "data"
    result = write_endpoint_files(ResumeProfile.empty(), output_dir, last_updated=LAST_UPDATED)

    assert [path.name for path in output_dir.iterdir()] == ["root.json"]
    root = json.loads((output_dir / "root.json").read_text(encoding="utf-8"))
    assert root["name"] == "Unknown Living Resume API"
    assert root["endpoints"] == {}
    assert result.file_count == 1
