import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from models.booking import CustomerLookup, ErrorResponse
from services import booking_service
from services.sheet_service import sheet_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get(
    "/customer",
    response_model=CustomerLookup,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def lookup_customer(mobile: Optional[str] = None, unit: Optional[str] = None):
    """Customer lookup, e.g. /customer?mobile=9xxxx or /customer?unit=G001"""
    if not mobile and not unit:
        return JSONResponse(status_code=400, content={"error": "Provide mobile or unit query"})

    try:
        records = await run_in_threadpool(sheet_service.get_records)
        return booking_service.customer_lookup(records, mobile=mobile, unit=unit)
    except Exception:
        logger.exception("Error in /customer")
        return JSONResponse(status_code=500, content={"error": "Failed to lookup customer"})
