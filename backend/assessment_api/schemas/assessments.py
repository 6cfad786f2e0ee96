"""
Pydantic schemas for assessment configurations.

A config describes how one assessment type becomes a report: which
sections to show, which value each field pulls from the raw record,
and how numeric values are color-coded.
"""

from typing import Optional

from pydantic import BaseModel


class ClassificationRange(BaseModel):
    """One inclusive [min, max] band, e.g. 61-100 bpm -> "Normal" / green."""
    min: float
    max: float
    label: str
    color: str = "gray"


class FieldClassification(BaseModel):
    """Ordered ranges. First match wins; order is never changed."""
    ranges: list[ClassificationRange]


class AssessmentField(BaseModel):
    key: str
    label: str
    path: str
    unit: str = ""
    type: str = "number"
    classification: Optional[FieldClassification] = None


class AssessmentSection(BaseModel):
    id: str
    title: str
    fields: list[AssessmentField]


class AssessmentConfig(BaseModel):
    name: str
    sections: list[AssessmentSection]


class SessionSummary(BaseModel):
    """An assessment session a report can be generated for."""
    session_id: str
    assessment_id: str
    assessment_name: Optional[str] = None
