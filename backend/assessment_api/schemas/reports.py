"""
Pydantic schemas for the report API.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class GenerateReportRequest(BaseModel):
    """Request to render a PDF for one assessment session."""
    session_id: Optional[str] = None


class GenerateReportResponse(BaseModel):
    message: str
    session_id: str
    pdf_path: str
    download_url: str


class ReportSummary(BaseModel):
    """A previously generated report, for the caller's report list."""
    session_id: str
    assessment_id: str
    filename: str
    download_url: str
    generated_at: datetime


class HealthResponse(BaseModel):
    status: str
    message: str
    database: Optional[str] = None
