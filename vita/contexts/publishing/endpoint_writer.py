"""
Endpoint file writer for the Publishing context.

Turns a ResumeProfile into the static files a lookup API serves:
one "<endpoint>.json" envelope per non-empty record and a "root.json"
directory listing them.

Envelope format:
    {
      "meta": {"api_version", "last_updated", "source", "note", "endpoint"},
      "data": {...record...}
    }
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from vita.contexts.parsing.profile_data_structure import ResumeProfile
from vita.contexts.parsing.profile_schema import ENDPOINTS
from vita.contexts.publishing.logger import (
    _log_info,
    log_endpoint_skipped,
    log_endpoint_written,
    log_publish_result,
    log_stale_file_removed,
)
from vita.utils.config_resolver import (
    resolve_api_version,
    resolve_output_dir,
    resolve_template_path,
)
from vita.utils.timestamp import today

SOURCE_NAME = "Living Resume API"
NOTE = "Machine-readable professional profile"
ROOT_DESCRIPTION = "Query this professional profile programmatically"
ROOT_FILENAME = "root.json"


@dataclass
class PublishResult:
    """Result from write_endpoint_files() / build_profile()."""

    output_dir: Path
    written: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    time_s: float = 0.0

    @property
    def file_count(self) -> int:
        """Endpoint files plus root.json."""
        return len(self.written) + 1


def endpoint_filename(endpoint: str) -> str:
    return f"{endpoint}.json"


def build_meta(version: str, last_updated: str, endpoint: str) -> Dict[str, str]:
    return {
        "api_version": version,
        "last_updated": last_updated,
        "source": SOURCE_NAME,
        "note": NOTE,
        "endpoint": f"/{endpoint}",
    }


def build_envelope(data: Dict[str, Any], version: str, last_updated: str, endpoint: str) -> Dict[str, Any]:
    """Wrap one record's data in its meta/data envelope."""
    return {"meta": build_meta(version, last_updated, endpoint), "data": data}


def build_root_payload(profile: ResumeProfile, version: str, last_updated: str) -> Dict[str, Any]:
    """
    Build the root.json directory payload.

    Only non-empty endpoints are listed, in schema order.
    """
    directory = profile.directory()
    return {
        "name": directory.display_name,
        "description": ROOT_DESCRIPTION,
        "version": version,
        "last_updated": last_updated,
        "endpoints": directory.routes(),
    }


def write_json(file_path: Path, payload: Dict[str, Any]) -> None:
    """Write JSON with 2-space indent, non-ASCII preserved, trailing newline."""
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write("\n")


def write_endpoint_files(
    profile: ResumeProfile,
    output_dir: Path,
    version: str = "1.0.0",
    last_updated: Optional[str] = None,
) -> PublishResult:
    """
    Write one envelope file per non-empty record plus root.json.

    Empty records get no file; a file left for them by an earlier run is
    removed so the directory listing and the files on disk agree.

    Args:
        profile: Parsed profile
        output_dir: Destination directory (created if needed)
        version: api_version stamped into every envelope
        last_updated: YYYY-MM-DD date stamp (defaults to today)

    Returns:
        PublishResult listing written, skipped and removed endpoints
    """
    start = time.time()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if last_updated is None:
        last_updated = today()

    result = PublishResult(output_dir=output_dir, warnings=list(profile.warnings))
    non_empty = profile.to_dict(include_empty=False)

    for endpoint in ENDPOINTS:
        file_path = output_dir / endpoint_filename(endpoint)

        if endpoint not in non_empty:
            log_endpoint_skipped(endpoint)
            result.skipped.append(endpoint)
            if file_path.exists():
                file_path.unlink()
                log_stale_file_removed(file_path)
                result.removed.append(endpoint)
            continue

        write_json(file_path, build_envelope(non_empty[endpoint], version, last_updated, endpoint))
        log_endpoint_written(endpoint, file_path)
        result.written.append(endpoint)

    write_json(output_dir / ROOT_FILENAME, build_root_payload(profile, version, last_updated))
    _log_info(f"  / -> {ROOT_FILENAME} (directory)")

    result.time_s = time.time() - start
    log_publish_result(output_dir, result.file_count, result.skipped)
    return result


def build_profile(
    template_path: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    version: Optional[str] = None,
    config_path: Optional[Path] = None,
    last_updated: Optional[str] = None,
) -> PublishResult:
    """
    Parse a template and publish its endpoint files.

    Unset arguments are resolved from the project config, then the
    environment (see vita.utils.config_resolver).

    Raises:
        InputNotFoundError: If the template is not an existing file. Nothing
            is created or written in that case.
    """
    template_path = resolve_template_path(template_path, config_path)
    output_dir = resolve_output_dir(output_dir, config_path)
    version = resolve_api_version(version, config_path)

    # Parse first so a missing template leaves the output directory untouched
    profile = ResumeProfile.from_file(template_path)

    _log_info(f"Publishing {template_path} to {output_dir} (api_version {version})")
    return write_endpoint_files(profile, output_dir, version=version, last_updated=last_updated)
