import logging
from typing import Optional

from fastapi import APIRouter, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from models.booking import BookingsList, BookingsSummary, ErrorResponse, Period
from services import booking_service
from services.sheet_service import sheet_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/summary", response_model=BookingsSummary, responses={500: {"model": ErrorResponse}})
async def get_bookings_summary(period: str = Period.THIS_MONTH.value):
    """Bookings for today, this_week or this_month with sold/unsold split and cluster counts"""
    try:
        records = await run_in_threadpool(sheet_service.get_records)
        return booking_service.bookings_summary(records, period)
    except Exception:
        logger.exception("Error in /bookings/summary")
        return JSONResponse(status_code=500, content={"error": "Failed to get bookings summary"})

@router.get("", response_model=BookingsList, responses={500: {"model": ErrorResponse}})
async def list_bookings(
    cluster: Optional[str] = None,
    status: Optional[str] = None,
    period: Optional[str] = None
):
    """List bookings, e.g. /bookings?cluster=1&status=SOLD&period=this_month"""
    try:
        records = await run_in_threadpool(sheet_service.get_records)
        return booking_service.list_bookings(records, cluster=cluster, status=status, period=period)
    except Exception:
        logger.exception("Error in /bookings")
        return JSONResponse(status_code=500, content={"error": "Failed to list bookings"})

@router.get("/export")
async def export_bookings(
    format: str = "csv",
    cluster: Optional[str] = None,
    status: Optional[str] = None,
    period: Optional[str] = None
):
    """Download the filtered bookings as CSV or JSON"""
    if format.lower() not in booking_service.EXPORT_FORMATS:
        return JSONResponse(status_code=400, content={"error": f"Unsupported format: {format}"})

    try:
        records = await run_in_threadpool(sheet_service.get_records)
        bookings = booking_service.filter_bookings(records, cluster=cluster, status=status, period=period)
        data = booking_service.export_bookings(bookings, format)
    except Exception:
        logger.exception("Error in /bookings/export")
        return JSONResponse(status_code=500, content={"error": "Failed to export bookings"})

    filename = "bookings"
    if period:
        filename += f"_{period}"

    media_type = "text/csv" if format.lower() == "csv" else "application/json"
    return Response(
        content=data,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}.{format.lower()}"}
    )
