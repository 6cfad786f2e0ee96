"""
Report assembly: raw assessment record + config -> ReportData.

This service:
1. Finds the assessment record for a session
2. Picks the config for the record's assessment type
3. Resolves every configured field from the record (paths.py)
4. Classifies the value when the field declares ranges (classification.py)

The result is a flat, render-ready structure. Both the HTML preview and
the PDF renderer consume it, so they always show the same numbers.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from assessment_api.schemas.assessments import AssessmentConfig
from assessment_api.services.assessment_configs import get_assessment_config
from assessment_api.services.assessment_data import find_assessment
from assessment_api.services.classification import classify_value
from assessment_api.services.paths import get_value_from_path


class ReportError(Exception):
    """Base class for report conditions the caller should see as 'not found'."""


class AssessmentNotFoundError(ReportError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__("Assessment data not found for the given session_id")


class ConfigurationNotFoundError(ReportError):
    def __init__(self, assessment_id: Optional[str]):
        self.assessment_id = assessment_id
        super().__init__(f"Configuration not found for assessment type: {assessment_id}")


@dataclass
class ReportField:
    key: str
    label: str
    value: Any
    unit: str = ""
    type: str = "number"
    classification: Optional[dict] = None  # {"label": ..., "color": ...}


@dataclass
class ReportSection:
    id: str
    title: str
    fields: list[ReportField] = field(default_factory=list)


@dataclass
class ReportData:
    """Everything a renderer needs, already resolved and classified."""
    assessment_id: str
    assessment_name: str
    session_id: str
    generated_at: datetime
    sections: list[ReportSection] = field(default_factory=list)


def build_report(session_id: str) -> ReportData:
    """Assemble the report for one session.

    Raises:
        AssessmentNotFoundError: no record has this session_id.
        ConfigurationNotFoundError: the record's assessment type has no config.
    """
    record = find_assessment(session_id)
    if record is None:
        raise AssessmentNotFoundError(session_id)

    assessment_id = record.get("assessment_id")
    config = get_assessment_config(assessment_id)
    if config is None:
        raise ConfigurationNotFoundError(assessment_id)

    return assemble_report(record, config, assessment_id=assessment_id)


def assemble_report(
    record: dict,
    config: AssessmentConfig,
    assessment_id: str = "",
    generated_at: Optional[datetime] = None,
) -> ReportData:
    """Map one record through one config. Never mutates the record."""
    report = ReportData(
        assessment_id=assessment_id,
        assessment_name=config.name,
        session_id=record.get("session_id", ""),
        generated_at=generated_at or datetime.now(timezone.utc),
    )

    for section in config.sections:
        section_data = ReportSection(id=section.id, title=section.title)

        for config_field in section.fields:
            value = get_value_from_path(record, config_field.path)
            classification = (
                classify_value(value, config_field.classification)
                if config_field.classification else None
            )
            section_data.fields.append(ReportField(
                key=config_field.key,
                label=config_field.label,
                value=value,
                unit=config_field.unit,
                type=config_field.type,
                classification=classification,
            ))

        report.sections.append(section_data)

    return report


def format_value(value: Any) -> str:
    """Display form of a resolved value: 'N/A' when missing, 72.0 -> '72'."""
    if value is None:
        return "N/A"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
