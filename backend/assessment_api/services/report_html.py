"""
HTML rendering of an assembled report.

Uses a Jinja2 template (templates/report.html) with autoescaping on:
labels and values come from config and record data, so they are never
trusted as markup.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from assessment_api.services.report_builder import ReportData, format_value

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Classification color tag -> CSS badge class. Unknown tags render gray.
BADGE_CLASSES = {
    "red": "badge-red",
    "yellow": "badge-yellow",
    "green": "badge-green",
    "blue": "badge-blue",
    "gray": "badge-gray",
}


def badge_class(color: str) -> str:
    return BADGE_CLASSES.get(color, BADGE_CLASSES["gray"])


_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["display_value"] = format_value
_env.filters["badge_class"] = badge_class


def render_report_html(report: ReportData) -> str:
    """Render the full standalone HTML document for a report."""
    template = _env.get_template("report.html")
    return template.render(report=report)
