"""Custom exceptions for the parsing context."""

from pathlib import Path
from typing import Optional


class ProfileTemplateError(Exception):
    """Base class for profile template failures."""


class InputNotFoundError(ProfileTemplateError, FileNotFoundError):
    """
    Exception raised when the template document cannot be read at all.

    This is the only fatal parse condition. Missing sections, fields or
    tables inside a readable document degrade to empty records instead.

    Attributes:
        message: Error description
        template_path: Path that was looked up
        remediation: Hints for getting a readable template in place
    """

    REMEDIATION = (
        "Make sure TEMPLATE.md exists in the project root",
        "Or generate one first: python scripts/new_template.py",
        "Or set template_path in profile_config.yaml to point to your template",
    )

    def __init__(self, template_path: Path, message: Optional[str] = None):
        self.template_path = Path(template_path)
        self.message = message or f"Template not found: {self.template_path}"
        self.remediation = list(self.REMEDIATION)

        parts = [self.message, "\nHow to fix this:"]
        for i, hint in enumerate(self.remediation, start=1):
            parts.append(f"  {i}. {hint}")

        super().__init__("\n".join(parts))
