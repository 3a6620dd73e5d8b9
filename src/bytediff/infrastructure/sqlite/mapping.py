"""
Row mapping between diff case entities and the diff_cases table.

Keeps storage shapes out of the domain layer:
- Payloads are stored as BLOBs
- Report status is stored by enum name (e.g. "NOT_EQUAL")
- Insights are stored as a JSON list of {"offset", "length"} objects
"""

from __future__ import annotations

import json
import sqlite3
from typing import Any

from bytediff.domain.models import (
    BinaryPayload,
    DiffCase,
    DiffInsight,
    DiffReport,
    ReportStatus,
)


def report_to_columns(report: DiffReport | None) -> tuple[str | None, str | None]:
    """
    Encode a report into (report_status, report_insights) column values.

    Returns:
        (None, None) when there is no report
    """
    if report is None:
        return None, None
    insights = json.dumps([insight.to_dict() for insight in report.insights])
    return report.status.name, insights


def columns_to_report(status: str | None, insights_json: str | None) -> DiffReport | None:
    """
    Decode report column values back into a report.

    Raises:
        ValueError: If the stored status or insights are malformed
    """
    if status is None:
        return None
    try:
        report_status = ReportStatus[status]
    except KeyError as e:
        raise ValueError(f"Unknown stored report status: {status}") from e

    items = json.loads(insights_json) if insights_json else []
    insights = [DiffInsight(item["offset"], item["length"]) for item in items]
    return DiffReport.of(report_status, insights)


def case_to_row(case: DiffCase) -> dict[str, Any]:
    """Encode a case as named parameters for the diff_cases table."""
    status, insights = report_to_columns(case.report)
    return {
        "id": case.id,
        "name": case.name,
        "left_data": sqlite3.Binary(case.left.data),
        "right_data": sqlite3.Binary(case.right.data),
        "report_status": status,
        "report_insights": insights,
    }


def row_to_case(row: sqlite3.Row) -> DiffCase:
    """Decode a diff_cases row into a case."""
    return DiffCase(
        name=row["name"],
        id=row["id"],
        left=BinaryPayload.of(row["left_data"] or b""),
        right=BinaryPayload.of(row["right_data"] or b""),
        report=columns_to_report(row["report_status"], row["report_insights"]),
    )
