from fastapi import APIRouter, Depends, Query, HTTPException
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from companion.auth.middleware import check_permission, get_current_user
from companion.auth.models import CurrentUser
from companion.config import get_settings
from companion.db.postgres import get_db
from companion.reports.schemas import ProfileExportResponse
from companion.reports.service import ExportService

router = APIRouter(
    prefix="/profile",
    tags=["profile"],
)


@router.get("/export", response_model=ProfileExportResponse)
async def export_my_data(
    format: str = Query("json", enum=["json", "csv", "pdf"]),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Download the user's profile, exercise responses, ratings and goals.

    Formats: json (default), csv (one row per exercise response), pdf (summary)

    Required permission: profile:export
    """
    check_permission(user, "profile:export")
    service = ExportService(db, user, get_settings().display_timezone)
    export = await service.collect()
    filename = f"ai-integration-data-{export.export_date.date()}"

    if format == "json":
        return export
    elif format == "csv":
        csv_buffer = service.generate_csv(export)
        return StreamingResponse(csv_buffer, media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={filename}.csv"})
    elif format == "pdf":
        pdf_buffer = service.generate_pdf(export, "AI Integration Companion - My Data")
        return StreamingResponse(pdf_buffer, media_type="application/pdf", headers={"Content-Disposition": f"attachment; filename={filename}.pdf"})
    else:
        raise HTTPException(status_code=400, detail="Invalid format")
