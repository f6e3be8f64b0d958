# app/domain/reports/export.py
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .schemas import DailyReport, RangeReport, Receipt

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)

TEMPLATE_BY_MODE = {
    "single": "reports/receipt.html",
    "daily": "reports/daily.html",
    "all": "reports/range.html",
}


def render_report_html(
    report: Union[Receipt, DailyReport, RangeReport],
    printed_at: Optional[datetime] = None,
) -> str:
    """Render a projected report as a printable HTML page.

    The template only lays out values the projector already computed.
    """
    template = _env.get_template(TEMPLATE_BY_MODE[report.mode])
    printed_at = printed_at or datetime.now()
    return template.render(
        report=report,
        printed_at=printed_at.strftime("%d/%m/%Y %H:%M:%S"),
    )
