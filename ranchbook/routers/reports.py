from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from ranchbook.core.permissions import Action
from ranchbook.dependencies import get_db, require_permission
from ranchbook.services.export_service import build_csv_export, build_report

router = APIRouter(prefix="/api", tags=["Reports"])


@router.get("/reports/{report_type}")
def get_report(
    report_type: str,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return build_report(db, report_type)


@router.get("/export/csv/{export_type}")
def export_csv(
    export_type: str,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    filename, content = build_csv_export(db, export_type)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(filename)},
    )


__all__ = ["router"]
