"""
Parsing Context

Responsibilities:
- Reads the human-edited profile template (TEMPLATE.md)
- Locates the nine fixed sections and extracts fields, lists, tables and repeated blocks
- Treats annotation placeholders as absent data
- Assembles immutable per-endpoint records

Owns: Template structure knowledge, extraction rules, profile records
Never: Writes output files or decides how records are served
"""

from vita.contexts.parsing.exceptions import InputNotFoundError, ProfileTemplateError
from vita.contexts.parsing.profile_data_structure import ProfileDirectory, ResumeProfile
from vita.contexts.parsing.template_parser import (
    ParsedTemplateData,
    extract_profile_values,
    parse_template_file,
    parse_template_text,
)

__all__ = [
    # Parsing entry points
    "parse_template_text",
    "parse_template_file",
    "extract_profile_values",
    "ParsedTemplateData",
    # Data structure classes
    "ResumeProfile",
    "ProfileDirectory",
    # Errors
    "ProfileTemplateError",
    "InputNotFoundError",
]
