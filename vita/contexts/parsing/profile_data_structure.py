"""
Profile data structures for the Parsing context.

Provides the nine immutable record types, their element types, and the
ResumeProfile class that builds them from a template via
ResumeProfile.from_text() / ResumeProfile.from_file().
"""

import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from vita.contexts.parsing.logger import log_parse_result, log_parse_start
from vita.contexts.parsing.profile_schema import ENDPOINTS, endpoint_description
from vita.contexts.parsing.template_parser import (
    ParsedTemplateData,
    parse_template_text,
    read_template,
)

FALLBACK_DISPLAY_NAME = "Unknown"
API_TITLE_SUFFIX = "Living Resume API"


# =============================================================================
# ELEMENT TYPES
# =============================================================================


@dataclass(frozen=True)
class OfferItem:
    """One "What I Offer" capability."""

    title: str
    description: str = ""


@dataclass(frozen=True)
class FinancialImpact:
    accomplishment: str
    company: str = ""
    value: str = ""


@dataclass(frozen=True)
class HeadlineStat:
    stat: str
    context: str = ""


@dataclass(frozen=True)
class OrganizationType:
    type: str
    what_i_bring: str = ""


@dataclass(frozen=True)
class Role:
    """
    One entry of the role history.

    Attributes:
        title: Job title
        company: Organization name
        dates: Free-form date range ("2021 - Present")
        location: Free-form location
        description: Summary of the role
        contributions: Key contributions in template order
    """

    title: str = ""
    company: str = ""
    dates: str = ""
    location: str = ""
    description: str = ""
    contributions: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> "Role":
        return cls(**{**values, "contributions": tuple(values.get("contributions", ()))})


@dataclass(frozen=True)
class Expertise:
    methodologies: tuple[str, ...] = ()
    technical: tuple[str, ...] = ()
    domain: tuple[str, ...] = ()


def _offers(values: dict[str, Any], key: str = "what_i_offer") -> tuple[OfferItem, ...]:
    return tuple(OfferItem(**item) for item in values.get(key, ()))


def _financial_impact(values: dict[str, Any]) -> tuple[FinancialImpact, ...]:
    return tuple(FinancialImpact(**row) for row in values.get("financial_impact", ()))


# =============================================================================
# RECORDS
# =============================================================================


@dataclass(frozen=True)
class AboutRecord:
    """Identity and positioning (/about)."""

    name: str = ""
    preferred_name: str = ""
    title: str = ""
    location: str = ""
    core_thesis: str = ""
    the_moment: str = ""
    what_i_offer: tuple[OfferItem, ...] = ()

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "AboutRecord":
        return cls(**{**values, "what_i_offer": _offers(values)})


@dataclass(frozen=True)
class NarrativeRecord:
    """Career story (/narrative)."""

    professional_narrative: str = ""
    philosophy: str = ""

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "NarrativeRecord":
        return cls(**values)


@dataclass(frozen=True)
class ThesisRecord:
    core_thesis: str = ""
    the_moment: str = ""
    implications: tuple[str, ...] = ()

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "ThesisRecord":
        return cls(**{**values, "implications": tuple(values.get("implications", ()))})


@dataclass(frozen=True)
class AccomplishmentsRecord:
    financial_impact: tuple[FinancialImpact, ...] = ()
    operational_scale: tuple[str, ...] = ()
    recognition_innovation: tuple[str, ...] = ()

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "AccomplishmentsRecord":
        return cls(
            financial_impact=_financial_impact(values),
            operational_scale=tuple(values.get("operational_scale", ())),
            recognition_innovation=tuple(values.get("recognition_innovation", ())),
        )


@dataclass(frozen=True)
class TrackRecordRecord:
    """Headline stats (/track-record). financial_impact mirrors /accomplishments."""

    headline_stats: tuple[HeadlineStat, ...] = ()
    financial_impact: tuple[FinancialImpact, ...] = ()

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "TrackRecordRecord":
        return cls(
            headline_stats=tuple(HeadlineStat(**row) for row in values.get("headline_stats", ())),
            financial_impact=_financial_impact(values),
        )


@dataclass(frozen=True)
class ExperienceRecord:
    experience: tuple[Role, ...] = ()

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "ExperienceRecord":
        return cls(experience=tuple(Role.from_dict(role) for role in values.get("experience", ())))


@dataclass(frozen=True)
class SeekingRecord:
    target_roles: tuple[str, ...] = ()
    reporting_relationship: str = ""
    organization_types: tuple[OrganizationType, ...] = ()
    industry: str = ""

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "SeekingRecord":
        return cls(
            target_roles=tuple(values.get("target_roles", ())),
            reporting_relationship=values.get("reporting_relationship", ""),
            organization_types=tuple(
                OrganizationType(**row) for row in values.get("organization_types", ())
            ),
            industry=values.get("industry", ""),
        )


@dataclass(frozen=True)
class CulturalFitRecord:
    thrive_in: tuple[str, ...] = ()
    not_right_for: tuple[str, ...] = ()

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "CulturalFitRecord":
        return cls(
            thrive_in=tuple(values.get("thrive_in", ())),
            not_right_for=tuple(values.get("not_right_for", ())),
        )


@dataclass(frozen=True)
class SkillsRecord:
    """Capability taxonomy (/skills). what_i_offer mirrors /about."""

    what_i_offer: tuple[OfferItem, ...] = ()
    expertise: Expertise = field(default_factory=Expertise)

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "SkillsRecord":
        expertise = values.get("expertise", {})
        return cls(
            what_i_offer=_offers(values),
            expertise=Expertise(**{key: tuple(items) for key, items in expertise.items()}),
        )


# Endpoint name -> (ResumeProfile attribute, record class)
RECORD_TYPES = {
    "about": ("about", AboutRecord),
    "narrative": ("narrative", NarrativeRecord),
    "thesis": ("thesis", ThesisRecord),
    "accomplishments": ("accomplishments", AccomplishmentsRecord),
    "track-record": ("track_record", TrackRecordRecord),
    "experience": ("experience", ExperienceRecord),
    "seeking": ("seeking", SeekingRecord),
    "cultural-fit": ("cultural_fit", CulturalFitRecord),
    "skills": ("skills", SkillsRecord),
}


def is_empty_data(data: Any) -> bool:
    """
    Check whether a value carries no usable data.

    Strings are empty when blank, sequences when they have no elements, and
    mappings/records when every value is empty.
    """
    if data is None:
        return True
    if isinstance(data, str):
        return data.strip() == ""
    if isinstance(data, (list, tuple)):
        return len(data) == 0
    if isinstance(data, dict):
        return all(is_empty_data(value) for value in data.values())
    if hasattr(data, "__dataclass_fields__"):
        return is_empty_data(asdict(data))
    return False


# =============================================================================
# DIRECTORY
# =============================================================================


@dataclass(frozen=True)
class ProfileDirectory:
    """
    Self-description of a parsed profile.

    Attributes:
        display_name: "<name> Living Resume API" ("Unknown" when no name)
        endpoints: Non-empty endpoint name -> one-line description, schema order
    """

    display_name: str
    endpoints: dict[str, str] = field(default_factory=dict)

    def routes(self) -> dict[str, str]:
        """Endpoints keyed the way the directory file lists them ("GET /about")."""
        return {f"GET /{endpoint}": description for endpoint, description in self.endpoints.items()}


# =============================================================================
# PROFILE
# =============================================================================


@dataclass(frozen=True)
class ResumeProfile:
    """
    Parsed profile with one record per template section.

    Factory methods:
        from_text(text) - Parse raw template markdown
        from_file(path) - Load and parse a template file
        from_parsed(parsed) - Build from ParsedTemplateData
    """

    about: AboutRecord = field(default_factory=AboutRecord)
    narrative: NarrativeRecord = field(default_factory=NarrativeRecord)
    thesis: ThesisRecord = field(default_factory=ThesisRecord)
    accomplishments: AccomplishmentsRecord = field(default_factory=AccomplishmentsRecord)
    track_record: TrackRecordRecord = field(default_factory=TrackRecordRecord)
    experience: ExperienceRecord = field(default_factory=ExperienceRecord)
    seeking: SeekingRecord = field(default_factory=SeekingRecord)
    cultural_fit: CulturalFitRecord = field(default_factory=CulturalFitRecord)
    skills: SkillsRecord = field(default_factory=SkillsRecord)

    # Parser diagnostics (not part of any record)
    warnings: tuple[str, ...] = field(default=(), compare=False)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_parsed(cls, parsed: ParsedTemplateData) -> "ResumeProfile":
        """Build records from raw parsed values."""
        records = {}
        for endpoint, (attribute, record_type) in RECORD_TYPES.items():
            records[attribute] = record_type.from_values(parsed.values.get(endpoint, {}))
        return cls(**records, warnings=tuple(parsed.warnings))

    @classmethod
    def empty(cls) -> "ResumeProfile":
        """Profile with every record empty."""
        return cls()

    @classmethod
    def from_text(cls, text: str) -> "ResumeProfile":
        """
        Parse template text and create a ResumeProfile.

        Never raises for malformed content; absent sections give empty records.
        """
        return cls.from_parsed(parse_template_text(text))

    @classmethod
    def from_file(cls, file_path: Path) -> "ResumeProfile":
        """
        Load a template file and create a ResumeProfile.

        Raises:
            InputNotFoundError: If file_path is not an existing file
        """
        file_path = Path(file_path)
        log_parse_start(file_path)
        start = time.time()

        text = read_template(file_path)
        profile = cls.from_text(text)

        log_parse_result(profile.endpoints(), list(profile.warnings), time.time() - start)
        return profile

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def records(self) -> dict[str, Any]:
        """All nine records keyed by endpoint, in schema order."""
        return {endpoint: getattr(self, RECORD_TYPES[endpoint][0]) for endpoint in ENDPOINTS}

    def non_empty_records(self) -> dict[str, Any]:
        """Records that carry usable data; empty ones are omitted entirely."""
        return {
            endpoint: record
            for endpoint, record in self.records().items()
            if not is_empty_data(record)
        }

    def endpoints(self) -> list[str]:
        """Names of the non-empty records."""
        return list(self.non_empty_records())

    def display_name(self) -> str:
        name = self.about.name or FALLBACK_DISPLAY_NAME
        return f"{name} {API_TITLE_SUFFIX}"

    def directory(self) -> ProfileDirectory:
        """Directory listing every non-empty record with its description."""
        return ProfileDirectory(
            display_name=self.display_name(),
            endpoints={endpoint: endpoint_description(endpoint) for endpoint in self.endpoints()},
        )

    def to_dict(self, include_empty: bool = True) -> dict[str, dict[str, Any]]:
        """
        Plain-dict form of the records (tuples become lists).

        Args:
            include_empty: If False, omit records without usable data
        """
        records = self.records() if include_empty else self.non_empty_records()
        return {endpoint: _to_plain(asdict(record)) for endpoint, record in records.items()}

    def get_record(self, endpoint: str) -> Optional[Any]:
        """Record for an endpoint name, or None if the name is unknown."""
        if endpoint not in RECORD_TYPES:
            return None
        return getattr(self, RECORD_TYPES[endpoint][0])


def _to_plain(data: Any) -> Any:
    """Recursively turn tuples into lists so the structure is JSON/YAML friendly."""
    if isinstance(data, dict):
        return {key: _to_plain(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_to_plain(item) for item in data]
    return data
