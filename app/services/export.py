"""
Schedule export service.

Serializes an amortization schedule as CSV for spreadsheet download, or
renders it as a standalone HTML page for printing / saving as PDF.
"""

import csv
import io
import logging
from pathlib import Path
from typing import List, Optional

from fastapi.templating import Jinja2Templates

from app.calculations.amortization import AmortizationRow
from app.calculations.mortgage import MortgageResult

logger = logging.getLogger(__name__)

CSV_FILENAME = "amortization_schedule.csv"

CSV_HEADER = [
    "Year",
    "Principal Paid",
    "Interest Paid",
    "Cumulative Principal",
    "Cumulative Interest",
    "Remaining Balance",
]

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "ui" / "templates"


def format_currency(value: Optional[float]) -> str:
    """Format a number as US dollars, e.g. $1,234.56."""
    if value is None:
        return ""
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["currency"] = format_currency


def schedule_to_csv(schedule: List[AmortizationRow]) -> str:
    """
    Serialize schedule rows as CSV.

    Amounts are rounded to cents. Every line, the header included, ends
    with a newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for row in schedule:
        writer.writerow(
            [
                row.year,
                f"{row.principal:.2f}",
                f"{row.interest:.2f}",
                f"{row.cumulative_principal:.2f}",
                f"{row.cumulative_interest:.2f}",
                f"{row.remaining:.2f}",
            ]
        )

    logger.info(f"Exported {len(schedule)} schedule rows to CSV")
    return buffer.getvalue()


def render_print_view(result: MortgageResult, title: str = "Amortization Schedule") -> str:
    """Render a printable HTML document for the schedule and its totals."""
    template = templates.get_template("schedule_print.html")
    html = template.render(
        title=title,
        result=result,
        summary=result.summary,
        breakdown=result.breakdown,
        schedule=result.schedule,
    )
    logger.info(f"Rendered print view with {len(result.schedule)} schedule rows")
    return html
