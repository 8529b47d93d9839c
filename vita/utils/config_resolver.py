"""
Configuration Resolution for Profile Builds

Resolves where the template lives, where endpoint files go and which API
version to stamp on them. Sources, highest priority first:

1. Explicit argument (CLI flag or function parameter)
2. Project config YAML (PROFILE_CONFIG_PATH, default profile_config.yaml)
3. Environment variable / built-in default

Examples:
    >>> resolve_template_path()
    PosixPath('TEMPLATE.md')

    # profile_config.yaml containing "template_path: profiles/me.md"
    >>> resolve_template_path(config_path=Path("profile_config.yaml"))
    PosixPath('profiles/me.md')
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
TEMPLATE_PATH = Path(os.getenv("PROFILE_TEMPLATE_PATH", "TEMPLATE.md"))
DATA_PATH = Path(os.getenv("PROFILE_DATA_PATH", "data"))
PROJECT_CONFIG_PATH = Path(os.getenv("PROFILE_CONFIG_PATH", "profile_config.yaml"))
API_VERSION = os.getenv("PROFILE_API_VERSION", "1.0.0")
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def load_project_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the optional project config YAML.

    Args:
        config_path: Path to config file (defaults to PROJECT_CONFIG_PATH)

    Returns:
        Config as a plain dict, or {} when the file does not exist
    """
    if config_path is None:
        config_path = PROJECT_CONFIG_PATH

    config_path = Path(config_path)
    if not config_path.is_file():
        return {}

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    return config or {}


def _config_relative_path(config_path: Optional[Path], value: str) -> Path:
    """Paths in the project config are relative to the config file."""
    path = Path(value)
    if path.is_absolute():
        return path
    base = Path(config_path if config_path is not None else PROJECT_CONFIG_PATH).parent
    return base / path


def resolve_template_path(
    cli_path: Optional[Path] = None, config_path: Optional[Path] = None
) -> Path:
    """
    Resolve the template document path.

    Args:
        cli_path: Explicit path (wins when given)
        config_path: Project config to consult for template_path

    Returns:
        Path to the template (existence is not checked here)
    """
    if cli_path is not None:
        return Path(cli_path)

    config = load_project_config(config_path)
    if config.get("template_path"):
        return _config_relative_path(config_path, config["template_path"])

    return TEMPLATE_PATH


def resolve_output_dir(
    cli_dir: Optional[Path] = None, config_path: Optional[Path] = None
) -> Path:
    """Resolve the endpoint output directory (same priority as the template)."""
    if cli_dir is not None:
        return Path(cli_dir)

    config = load_project_config(config_path)
    if config.get("output_dir"):
        return _config_relative_path(config_path, config["output_dir"])

    return DATA_PATH


def resolve_api_version(
    cli_version: Optional[str] = None, config_path: Optional[Path] = None
) -> str:
    """Resolve the api_version stamped into every envelope."""
    if cli_version:
        return cli_version

    config = load_project_config(config_path)
    if config.get("api_version"):
        return str(config["api_version"])

    return API_VERSION
