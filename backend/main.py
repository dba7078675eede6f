from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import logging
import uvicorn

from settings import settings
from routes.bookings import router as bookings_router
from routes.finance import router as finance_router
from routes.customers import router as customers_router
from routes.health import router as health_router

logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

if not settings.sheet_id:
    logger.warning("SHEET_ID is not set.")

if not settings.service_key:
    logger.warning("GOOGLE_SERVICE_KEY is not set. Falling back to a credentials file, if any.")

app = FastAPI(
    title="Aiikya Village Booking API",
    description="Read-only booking, revenue, loan and demand views over the BANK MIS sheet",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router, prefix="/health", tags=["health"])
app.include_router(bookings_router, prefix="/bookings", tags=["bookings"])
app.include_router(finance_router, tags=["finance"])
app.include_router(customers_router, tags=["customers"])

@app.get("/", response_class=PlainTextResponse)
async def root():
    return (
        "Aiikya Village Booking API live.\n"
        "Endpoints: /health, /bookings/summary, /bookings, /bookings/export, "
        "/revenue/summary, /loan-status, /demand/details, /customer"
    )



if __name__ == "__main__":
    logger.info("Server running on port %s", settings.port)
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port, reload=settings.environment == "development")
