"""
Profile Template Generator

Renders a TEMPLATE.md that the parsing context reads back. Answers are a
nested mapping shaped like ResumeProfile.to_dict(); anything left unset is
rendered as an annotation placeholder, so a blank template parses to an
empty profile.

Mirrored values (track-record.financial_impact, skills.what_i_offer) are
not rendered separately; they come from accomplishments and about.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template
from omegaconf import OmegaConf

from vita.contexts.collection.logger import _log_debug, log_template_written
from vita.contexts.parsing.profile_data_structure import ResumeProfile, is_empty_data

TEMPLATE_DIR = Path(__file__).parent / "template"
TEMPLATE_NAME = "profile_template.md.jinja"

# Keys every row of a repeated group must carry before rendering
ROW_KEYS = {
    ("about", "what_i_offer"): ("title", "description"),
    ("accomplishments", "financial_impact"): ("accomplishment", "company", "value"),
    ("track-record", "headline_stats"): ("stat", "context"),
    ("seeking", "organization_types"): ("type", "what_i_bring"),
    ("experience", "experience"): ("title", "company", "dates", "location", "description"),
}

# Thesis values that fall back to About when unset
THESIS_FALLBACKS = ("core_thesis", "the_moment")


def or_hint(value: Any, hint: str) -> str:
    """
    Jinja filter: the value itself, or an annotation placeholder when unset.

    Example:
        >>> or_hint("", "Your full name")
        '<!-- Your full name -->'
    """
    if value is None or str(value).strip() == "":
        return f"<!-- {hint} -->"
    return str(value)


def load_answers(answers_path: Path) -> Dict[str, Any]:
    """
    Load an answers YAML file as a plain dict.

    Raises:
        FileNotFoundError: If answers_path does not exist
    """
    answers = OmegaConf.to_container(OmegaConf.load(answers_path), resolve=True)
    return answers or {}


class ProfileTemplateGenerator:
    """
    Renders profile templates from answers.

    Example:
        generator = ProfileTemplateGenerator()
        blank = generator.render()
        generator.write(Path("TEMPLATE.md"), load_answers(Path("answers.yaml")))
    """

    def __init__(self, template_dir: Path = None):
        if template_dir is None:
            template_dir = TEMPLATE_DIR

        self.template_dir = Path(template_dir)
        self._template: Optional[Template] = None

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Block tags on their own line leave no blank line behind
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["or_hint"] = or_hint

    @property
    def template(self) -> Template:
        if self._template is None:
            self._template = self.env.get_template(TEMPLATE_NAME)
        return self._template

    def merge_answers(self, answers: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Fill missing keys of answers from an empty profile.

        Rows of repeated groups are padded with "" for absent keys and
        Thesis falls back to About for core_thesis and the_moment.
        """
        base = OmegaConf.create(ResumeProfile.empty().to_dict())
        merged = OmegaConf.merge(base, OmegaConf.create(answers or {}))
        profile = OmegaConf.to_container(merged, resolve=True)

        for (endpoint, key), row_keys in ROW_KEYS.items():
            rows = profile[endpoint].get(key) or []
            padded = []
            for row in rows:
                filled = {row_key: row.get(row_key) or "" for row_key in row_keys}
                if key == "experience":
                    filled["contributions"] = list(row.get("contributions") or [])
                padded.append(filled)
            profile[endpoint][key] = padded

        for key in THESIS_FALLBACKS:
            if not profile["thesis"].get(key):
                profile["thesis"][key] = profile["about"].get(key) or ""

        return profile

    def render(self, answers: Optional[Dict[str, Any]] = None) -> str:
        """
        Render a template document.

        Args:
            answers: Nested mapping shaped like ResumeProfile.to_dict() (None for blank)

        Returns:
            Markdown text of the template
        """
        profile = self.merge_answers(answers)
        context = {endpoint.replace("-", "_"): values for endpoint, values in profile.items()}
        return self.template.render(**context)

    def write(
        self, output_path: Path, answers: Optional[Dict[str, Any]] = None, overwrite: bool = False
    ) -> Path:
        """
        Render and write a template document.

        Raises:
            FileExistsError: If output_path exists and overwrite is False
        """
        output_path = Path(output_path)
        if output_path.exists() and not overwrite:
            raise FileExistsError(f"Template already exists: {output_path}")

        text = self.render(answers)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")

        filled = [
            endpoint for endpoint, values in (answers or {}).items() if not is_empty_data(values)
        ]
        _log_debug(f"Rendered {len(text)} characters from {TEMPLATE_NAME}")
        log_template_written(output_path, filled)
        return output_path
