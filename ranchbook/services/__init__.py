from ranchbook.services.export_service import build_csv_export, build_report, to_csv, to_report
from ranchbook.services.identity_service import resolve_session, upsert_from_identity_assertion
from ranchbook.services.summary_service import (
    financial_summary,
    livestock_stats,
    low_stock_items,
    upcoming_health_tasks,
)

__all__ = [
    "build_csv_export",
    "build_report",
    "financial_summary",
    "livestock_stats",
    "low_stock_items",
    "resolve_session",
    "to_csv",
    "to_report",
    "upcoming_health_tasks",
    "upsert_from_identity_assertion",
]
