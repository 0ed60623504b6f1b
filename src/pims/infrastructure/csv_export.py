"""CSV export of report rows.

Text fields are double-quoted and numbers are written bare, one row per
record under the report's fixed header line.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path

from pims.application.dto import ReportDTO

DEFAULT_FILENAMES = {
    "stock": "stock_report.csv",
    "lowstock": "low_stock_report.csv",
    "expired": "expired_products_report.csv",
    "expiring": "expiring_products_report.csv",
    "transactions": "transactions_report.csv",
}


def render_csv(report: ReportDTO) -> str:
    buffer = io.StringIO()
    # header line is unquoted
    buffer.write(",".join(report.headers) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerows(report.rows)
    return buffer.getvalue()


def write_csv(report: ReportDTO, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_csv(report), encoding="utf-8")
    return path
