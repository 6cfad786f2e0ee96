"""
Report API endpoints.

1. POST /api/generate-report — Render a session's report to PDF (auth)
2. GET  /api/reports — The caller's previously generated reports (auth)
3. GET  /api/reports/{filename} — Download a generated PDF
4. GET  /api/report-preview/{session_id} — The same report as HTML (auth)
5. GET  /api/sessions — Sessions a report can be generated for (auth)

Routers are THIN: report assembly lives in services/report_builder.py,
rendering in services/pdf_report.py and services/report_html.py.
"""

import asyncio
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assessment_api.database import get_db
from assessment_api.dependencies import get_current_user
from assessment_api.logging_config import get_logger
from assessment_api.models import GeneratedReport, User
from assessment_api.schemas.assessments import SessionSummary
from assessment_api.schemas.reports import (
    GenerateReportRequest,
    GenerateReportResponse,
    ReportSummary,
)
from assessment_api.services.assessment_configs import ASSESSMENT_CONFIGS
from assessment_api.services.assessment_data import list_assessments
from assessment_api.services.pdf_report import PDFReportGenerator, build_report_filename
from assessment_api.services.report_builder import ReportError, build_report
from assessment_api.services.report_html import render_report_html
from assessment_api.services.storage import get_storage_service

router = APIRouter(prefix="/api", tags=["reports"])
logger = get_logger(__name__)

# Same-millisecond requests for one session bump the stamp this many times
MAX_FILENAME_ATTEMPTS = 5


async def _save_report_pdf(pdf_bytes: bytes, session_id: str) -> tuple[str, Path]:
    storage = get_storage_service()
    for attempt in range(MAX_FILENAME_ATTEMPTS):
        filename = build_report_filename(session_id, offset_ms=attempt)
        try:
            return filename, await storage.save_bytes(pdf_bytes, filename)
        except FileExistsError:
            logger.info("report_filename_taken", filename=filename)
    raise FileExistsError(f"No free report file name for session {session_id}")


@router.post("/generate-report", response_model=GenerateReportResponse)
async def generate_report(
    request: GenerateReportRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Generate a PDF report for an assessment session.

    The PDF is written to the reports directory and a download URL is
    returned. A session with no record, or whose assessment type has no
    config, is a 404.
    """
    session_id = request.session_id
    if not session_id:
        raise HTTPException(status_code=400, detail="session_id is required")

    try:
        report = build_report(session_id)
    except ReportError as e:
        logger.info("report_not_found", session_id=session_id, reason=str(e))
        raise HTTPException(status_code=404, detail=str(e))

    try:
        # ReportLab is synchronous; keep it off the event loop
        pdf_bytes = await asyncio.to_thread(
            PDFReportGenerator().generate_assessment_report, report,
        )
        filename, pdf_path = await _save_report_pdf(pdf_bytes, session_id)
    except Exception as e:
        logger.exception("report_generation_failed", session_id=session_id)
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to generate report", "error": str(e)},
        )

    db.add(GeneratedReport(
        user_id=current_user.id,
        session_id=session_id,
        assessment_id=report.assessment_id,
        filename=filename,
    ))
    await db.commit()

    logger.info(
        "report_generated",
        session_id=session_id,
        assessment_id=report.assessment_id,
        filename=filename,
        size_bytes=len(pdf_bytes),
    )

    return GenerateReportResponse(
        message="Report generated successfully",
        session_id=session_id,
        pdf_path=str(pdf_path),
        download_url=f"/api/reports/{filename}",
    )


@router.get("/reports", response_model=list[ReportSummary])
async def list_reports(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Reports generated by the caller, newest first."""
    result = await db.execute(
        select(GeneratedReport)
        .where(GeneratedReport.user_id == current_user.id)
        .order_by(GeneratedReport.created_at.desc())
    )
    return [
        ReportSummary(
            session_id=row.session_id,
            assessment_id=row.assessment_id,
            filename=row.filename,
            download_url=f"/api/reports/{row.filename}",
            generated_at=row.created_at,
        )
        for row in result.scalars().all()
    ]


@router.get("/reports/{filename}")
async def download_report(filename: str):
    """Download a generated PDF.

    No auth: the download URL itself is the capability, matching how the
    frontend links to it directly.
    """
    file_path = await get_storage_service().get_file_path(filename)
    if file_path is None:
        raise HTTPException(status_code=404, detail="Report not found")

    return FileResponse(file_path, media_type="application/pdf", filename=filename)


@router.get("/report-preview/{session_id}", response_class=HTMLResponse)
async def preview_report(
    session_id: str,
    current_user: User = Depends(get_current_user),
):
    """Render the report as HTML without writing a PDF."""
    try:
        report = build_report(session_id)
    except ReportError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return HTMLResponse(render_report_html(report))


@router.get("/sessions", response_model=list[SessionSummary])
async def list_sessions(current_user: User = Depends(get_current_user)):
    """Sessions with stored assessment data."""
    sessions = []
    for record in list_assessments():
        assessment_id = record.get("assessment_id", "")
        config = ASSESSMENT_CONFIGS.get(assessment_id)
        sessions.append(SessionSummary(
            session_id=record["session_id"],
            assessment_id=assessment_id,
            assessment_name=config["name"] if config else None,
        ))
    return sessions
