"""
Integration test for template -> endpoint files.

Covers build_profile() end to end and the build_profile.py / query_endpoint.py
scripts through typer's CliRunner.
"""

import importlib.util
import json
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from vita.contexts.parsing.exceptions import InputNotFoundError
from vita.contexts.publishing.endpoint_registry import EndpointRegistry
from vita.contexts.publishing.endpoint_writer import build_profile

FIXTURES_PATH = Path(__file__).resolve().parents[1] / "fixtures"
SCRIPTS_PATH = Path(__file__).resolve().parents[2] / "scripts"


def load_script(name: str):
    """Import a script module from scripts/ by file path."""
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def restore_logger():
    """Scripts replace loguru sinks; put the default stderr sink back afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.integration
def test_build_profile_writes_all_endpoints(tmp_path):
    output_dir = tmp_path / "data"
    result = build_profile(
        FIXTURES_PATH / "profile_complete.md", output_dir, version="1.0.0", last_updated="2025-01-15"
    )

    assert result.file_count == 10
    assert (output_dir / "root.json").exists()

    root = json.loads((output_dir / "root.json").read_text(encoding="utf-8"))
    assert root["name"] == "Jordan Avery Living Resume API"
    assert len(root["endpoints"]) == 9

    registry = EndpointRegistry(output_dir)
    assert all(registry.verify().values())


@pytest.mark.integration
def test_build_profile_uses_project_config(tmp_path):
    template = tmp_path / "profiles" / "me.md"
    template.parent.mkdir()
    template.write_text(
        (FIXTURES_PATH / "profile_partial.md").read_text(encoding="utf-8"), encoding="utf-8"
    )
    config = tmp_path / "profile_config.yaml"
    config.write_text(
        "template_path: profiles/me.md\noutput_dir: out\napi_version: 3.0.0\n", encoding="utf-8"
    )

    result = build_profile(config_path=config, last_updated="2025-01-15")

    assert result.output_dir == tmp_path / "out"
    assert result.written == ["about", "seeking", "skills"]
    about = json.loads((tmp_path / "out" / "about.json").read_text(encoding="utf-8"))
    assert about["meta"]["api_version"] == "3.0.0"


@pytest.mark.integration
def test_missing_template_writes_nothing(tmp_path):
    output_dir = tmp_path / "data"

    with pytest.raises(InputNotFoundError):
        build_profile(tmp_path / "TEMPLATE.md", output_dir, version="1.0.0")

    assert not output_dir.exists()


@pytest.mark.integration
def test_build_script(tmp_path, monkeypatch, restore_logger):
    script = load_script("build_profile")
    monkeypatch.setattr(script, "LOGS_PATH", tmp_path / "logs")
    output_dir = tmp_path / "data"

    result = CliRunner().invoke(
        script.app, [str(FIXTURES_PATH / "profile_complete.md"), "--output-dir", str(output_dir)]
    )

    assert result.exit_code == 0
    assert "Generated 10 files" in result.output
    assert (output_dir / "experience.json").exists()


@pytest.mark.integration
def test_build_script_missing_template(tmp_path, monkeypatch, restore_logger):
    script = load_script("build_profile")
    monkeypatch.setattr(script, "LOGS_PATH", tmp_path / "logs")

    result = CliRunner().invoke(
        script.app, [str(tmp_path / "TEMPLATE.md"), "--output-dir", str(tmp_path / "data")]
    )

    assert result.exit_code == 1
    assert not (tmp_path / "data").exists()


@pytest.mark.integration
def test_query_script(tmp_path):
    build_profile(FIXTURES_PATH / "profile_complete.md", tmp_path, version="1.0.0")
    script = load_script("query_endpoint")

    found = CliRunner().invoke(script.app, ["/seeking/", "--data-dir", str(tmp_path)])
    assert found.exit_code == 0
    assert '"endpoint": "/seeking"' in found.output

    missing = CliRunner().invoke(script.app, ["/hobbies", "--data-dir", str(tmp_path)])
    assert missing.exit_code == 1
    assert '"error": "Not found"' in missing.output

    verified = CliRunner().invoke(script.app, ["--verify", "--data-dir", str(tmp_path)])
    assert verified.exit_code == 0
