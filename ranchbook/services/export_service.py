from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from ranchbook.core.dates import utc_now
from ranchbook.core.errors import MalformedExport, NoDataToExport, NotFound
from ranchbook.schemas.inventory import InventoryRead, InventorySummary
from ranchbook.schemas.livestock import LivestockRead, LivestockStats
from ranchbook.schemas.transaction import FinancialSummary, TransactionRead
from ranchbook.services.inventory_service import list_inventory
from ranchbook.services.livestock_service import list_livestock
from ranchbook.services.summary_service import financial_summary, inventory_summary, livestock_stats
from ranchbook.services.transaction_service import list_transactions


def _format_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return '"{}"'.format(value.replace('"', '""'))
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def to_csv(records: list[dict]) -> str:
    if not records:
        raise NoDataToExport()

    header = list(records[0].keys())
    expected = set(header)
    for position, record in enumerate(records, start=1):
        if set(record.keys()) != expected:
            missing = sorted(expected - set(record.keys()))
            extra = sorted(set(record.keys()) - expected)
            raise MalformedExport(
                error="record {}: missing {}, unexpected {}".format(position, missing, extra)
            )

    lines = [",".join(header)]
    for record in records:
        lines.append(",".join(_format_value(record[field]) for field in header))
    return "\n".join(lines)


def to_report(report_type: str, summary, data, *, now: datetime | None = None) -> dict:
    return {
        "summary": summary,
        "data": data,
        "generatedAt": (now or utc_now()).isoformat(),
        "type": report_type,
    }


def _dump_all(schema, rows, mode="python"):
    return [schema.model_validate(row).model_dump(mode=mode, by_alias=True) for row in rows]


def _export_rows(db: Session, export_type: str):
    if export_type == "livestock":
        return _dump_all(LivestockRead, list_livestock(db))
    if export_type == "transactions":
        return _dump_all(TransactionRead, list_transactions(db))
    if export_type == "inventory":
        return _dump_all(InventoryRead, list_inventory(db))
    raise NotFound("Unknown export type {}".format(export_type))


def build_csv_export(db: Session, export_type: str) -> tuple[str, str]:
    rows = _export_rows(db, export_type)
    return "{}_export.csv".format(export_type), to_csv(rows)


def build_report(db: Session, report_type: str, *, now: datetime | None = None) -> dict:
    if report_type == "livestock":
        summary = LivestockStats(**livestock_stats(db))
        data = _dump_all(LivestockRead, list_livestock(db), mode="json")
    elif report_type == "financial":
        summary = FinancialSummary(**financial_summary(db, now=now))
        data = _dump_all(TransactionRead, list_transactions(db), mode="json")
    elif report_type == "inventory":
        summary = InventorySummary(**inventory_summary(db))
        data = _dump_all(InventoryRead, list_inventory(db), mode="json")
    else:
        raise NotFound("Unknown report type {}".format(report_type))

    return to_report(
        report_type,
        summary.model_dump(mode="json", by_alias=True),
        data,
        now=now,
    )


__all__ = ["build_csv_export", "build_report", "to_csv", "to_report"]
