from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from datetime import datetime

from services.sheet_service import sheet_service

router = APIRouter()

@router.get("", response_class=PlainTextResponse)
async def health_check():
    """Liveness check"""
    return "Aiikya Village Booking API running fine!"

@router.get("/status")
async def detailed_status():
    """Configuration status; does not call the sheet"""
    config = sheet_service.settings
    return {
        "api": "running",
        "sheet_id": "configured" if config.sheet_id else "not_configured",
        "sheet_name": config.sheet_name,
        "sheet_range": config.sheet_range,
        "google_sheets": "configured" if sheet_service.credential_source() else "not_configured",
        "environment": config.environment,
        "timestamp": datetime.now().isoformat()
    }
