"""
PDF report generator — renders an assembled assessment report as a PDF.

The PDF mirrors the HTML preview: a header with the assessment name and
session, one block per configured section, and a footer. Each section is
a table of Metric / Value / Status rows, with the status cell tinted by
the classification's color tag.

Uses ReportLab's Platypus (Page Layout and Typography Using Scripts) engine.
Platypus is a high-level layout system where you build a list of "flowables"
(paragraphs, tables, spacers, etc.) and ReportLab handles pagination,
line breaks, and page flow automatically.

Key ReportLab concepts:
- SimpleDocTemplate: Manages pages, margins, and the overall document
- Paragraph: A styled block of text (supports HTML-like markup)
- Table: A grid of cells with configurable borders and colors
- ParagraphStyle: Reusable text formatting (font, size, color, spacing)
"""

import time
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    HRFlowable,
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from assessment_api.services.report_builder import ReportData, ReportSection, format_value


# --- Brand Colors ---
BRAND_PRIMARY = colors.HexColor("#1a365d")     # Deep navy — headings
BRAND_TEXT = colors.HexColor("#2d3748")          # Dark gray — body text
BRAND_MUTED = colors.HexColor("#718096")         # Medium gray — captions
GRID_COLOR = colors.HexColor("#e2e8f0")

# Classification color tag -> (text color, background tint)
STATUS_COLORS = {
    "red": ("#c53030", "#fff5f5"),
    "yellow": ("#b7791f", "#fffff0"),
    "green": ("#2f855a", "#f0fff4"),
    "blue": ("#2b6cb0", "#ebf8ff"),
    "gray": ("#4a5568", "#f7fafc"),
}

PAGE_MARGIN = 20  # points


def _build_styles() -> dict:
    """Create all paragraph styles used in the report."""
    base = getSampleStyleSheet()

    return {
        "title": ParagraphStyle(
            "ReportTitle",
            parent=base["Title"],
            fontSize=22,
            textColor=BRAND_PRIMARY,
            spaceAfter=6,
            alignment=TA_CENTER,
        ),
        "subtitle": ParagraphStyle(
            "ReportSubtitle",
            parent=base["Normal"],
            fontSize=11,
            textColor=BRAND_MUTED,
            alignment=TA_CENTER,
            spaceAfter=4,
        ),
        "h2": ParagraphStyle(
            "SectionHeading",
            parent=base["Heading2"],
            fontSize=15,
            textColor=BRAND_PRIMARY,
            spaceBefore=14,
            spaceAfter=8,
        ),
        "cell": ParagraphStyle(
            "Cell",
            parent=base["Normal"],
            fontSize=10,
            textColor=BRAND_TEXT,
            leading=13,
        ),
        "cell_center": ParagraphStyle(
            "CellCenter",
            parent=base["Normal"],
            fontSize=10,
            textColor=BRAND_TEXT,
            leading=13,
            alignment=TA_CENTER,
        ),
        "footer": ParagraphStyle(
            "Footer",
            parent=base["Normal"],
            fontSize=8,
            textColor=BRAND_MUTED,
            alignment=TA_CENTER,
        ),
    }


def build_report_filename(session_id: str, offset_ms: int = 0) -> str:
    """report_<session_id>_<epoch millis>.pdf

    ``offset_ms`` moves the stamp forward when the current name is taken.
    """
    return f"report_{session_id}_{int(time.time() * 1000) + offset_ms}.pdf"


class PDFReportGenerator:
    """Generates assessment report PDFs from assembled ReportData.

    Usage:
        report = build_report("session_001")
        pdf_bytes = PDFReportGenerator().generate_assessment_report(report)

    Rendering is synchronous and CPU-bound; routes run it via
    asyncio.to_thread().
    """

    def __init__(self):
        self.styles = _build_styles()

    def generate_assessment_report(self, report: ReportData) -> bytes:
        """Render the report and return raw PDF bytes."""
        buffer = BytesIO()

        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN + 0.3 * inch,  # room for the page number
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            title=f"{report.assessment_name} - Report",
            author="Assessment Management System",
            subject=f"Session {report.session_id}",
        )

        story = []

        # --- Header ---
        story.append(Spacer(1, 0.2 * inch))
        story.append(Paragraph(self._safe(report.assessment_name), self.styles["title"]))
        story.append(Paragraph(
            f"Session ID: {self._safe(report.session_id)}",
            self.styles["subtitle"],
        ))
        story.append(Paragraph(
            f"Generated on: {report.generated_at.strftime('%B %d, %Y %H:%M UTC')}",
            self.styles["subtitle"],
        ))
        story.append(HRFlowable(
            width="100%", thickness=2, color=GRID_COLOR,
            spaceAfter=12, spaceBefore=8,
        ))

        # --- Sections ---
        for section in report.sections:
            self._render_section(story, section)

        # --- Footer ---
        story.append(Spacer(1, 0.3 * inch))
        story.append(HRFlowable(
            width="100%", thickness=1, color=GRID_COLOR,
            spaceAfter=8, spaceBefore=8,
        ))
        story.append(Paragraph(
            "Assessment Management System - Confidential Report",
            self.styles["footer"],
        ))

        doc.build(story, onFirstPage=self._add_page_number,
                  onLaterPages=self._add_page_number)

        return buffer.getvalue()

    def _render_section(self, story: list, section: ReportSection):
        """One heading plus a Metric / Value / Status table."""
        heading = Paragraph(self._safe(section.title), self.styles["h2"])

        table_data = [["Metric", "Value", "Status"]]
        status_styles = []

        for row, field in enumerate(section.fields, start=1):
            value_text = self._safe(format_value(field.value))
            if field.unit and field.value is not None:
                value_text = f"{value_text} <font color='#718096' size='8'>{self._safe(field.unit)}</font>"

            status_text = "—"
            if field.classification:
                status_text = f"<b>{self._safe(str(field.classification.get('label')))}</b>"
                text_hex, background_hex = STATUS_COLORS.get(
                    field.classification.get("color"), STATUS_COLORS["gray"],
                )
                status_styles.append(
                    ("BACKGROUND", (2, row), (2, row), colors.HexColor(background_hex)),
                )
                status_text = f"<font color='{text_hex}'>{status_text}</font>"

            table_data.append([
                Paragraph(self._safe(field.label), self.styles["cell"]),
                Paragraph(value_text, self.styles["cell_center"]),
                Paragraph(status_text, self.styles["cell_center"]),
            ])

        col_widths = [3.2 * inch, 2.0 * inch, 1.9 * inch]
        table = Table(table_data, colWidths=col_widths, repeatRows=1)
        table.setStyle(TableStyle([
            # Header row
            ("BACKGROUND", (0, 0), (-1, 0), BRAND_PRIMARY),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), 10),
            ("ALIGN", (0, 0), (-1, 0), "CENTER"),
            ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
            ("TOPPADDING", (0, 0), (-1, 0), 8),

            # Data rows
            ("VALIGN", (0, 1), (-1, -1), "MIDDLE"),
            ("BOTTOMPADDING", (0, 1), (-1, -1), 6),
            ("TOPPADDING", (0, 1), (-1, -1), 6),

            # Grid
            ("GRID", (0, 0), (-1, -1), 0.5, GRID_COLOR),
            ("LINEBELOW", (0, 0), (-1, 0), 2, BRAND_PRIMARY),

            *status_styles,
        ]))

        # Keep short sections on one page with their heading
        story.append(KeepTogether([heading, table]))
        story.append(Spacer(1, 0.1 * inch))

    @staticmethod
    def _safe(text: str) -> str:
        """Escape text for ReportLab's XML-based paragraph parser.

        Raw text with <, >, & characters will break the parser.
        """
        text = text.replace("&", "&amp;")
        text = text.replace("<", "&lt;")
        text = text.replace(">", "&gt;")
        return text

    @staticmethod
    def _add_page_number(canvas, doc):
        """Add page numbers to the bottom of each page."""
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(BRAND_MUTED)
        canvas.drawCentredString(
            A4[0] / 2, PAGE_MARGIN,
            f"Page {canvas.getPageNumber()}",
        )
        canvas.restoreState()
