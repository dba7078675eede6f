import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from models.booking import DemandDetails, ErrorResponse, LoanStatusBreakdown, RevenueSummary
from services import booking_service
from services.sheet_service import sheet_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/revenue/summary", response_model=RevenueSummary, responses={500: {"model": ErrorResponse}})
async def get_revenue_summary(period: Optional[str] = None):
    """Revenue and demand totals, optionally for today, this_week or this_month"""
    try:
        records = await run_in_threadpool(sheet_service.get_records)
        return booking_service.revenue_summary(records, period)
    except Exception:
        logger.exception("Error in /revenue/summary")
        return JSONResponse(status_code=500, content={"error": "Failed to get revenue summary"})

@router.get("/loan-status", response_model=LoanStatusBreakdown, responses={500: {"model": ErrorResponse}})
async def get_loan_status():
    """Home loan financier and loan status breakdown"""
    try:
        records = await run_in_threadpool(sheet_service.get_records)
        return booking_service.loan_status(records)
    except Exception:
        logger.exception("Error in /loan-status")
        return JSONResponse(status_code=500, content={"error": "Failed to get loan status"})

@router.get("/demand/details", response_model=DemandDetails, response_model_exclude_none=True, responses={500: {"model": ErrorResponse}})
async def get_demand_details():
    """Demand, pending demand and receivables per booking"""
    try:
        records = await run_in_threadpool(sheet_service.get_records)
        return booking_service.demand_details(records)
    except Exception:
        logger.exception("Error in /demand/details")
        return JSONResponse(status_code=500, content={"error": "Failed to get demand details"})
