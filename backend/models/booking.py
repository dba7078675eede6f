from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel

from settings import ColumnCatalog

Record = Dict[str, str]


class Period(str, Enum):
    TODAY = "today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"


class LabelCount(BaseModel):
    label: str
    count: int


class BookingRecord(BaseModel):
    """Typed view of one sheet row; ``raw`` keeps every column as read"""
    cluster: Optional[str] = None
    unit_no: Optional[str] = None
    customer_name: Optional[str] = None
    booking_date: Optional[str] = None
    sold_status: Optional[str] = None
    mobile: Optional[str] = None
    sale_agreement_status: Optional[str] = None
    demand_percent: Optional[str] = None
    demand_value: Optional[str] = None
    pending_demand: Optional[str] = None
    receivables: Optional[str] = None
    home_loan_financed_by: Optional[str] = None
    loan_status: Optional[str] = None
    raw: Dict[str, str] = {}

    @classmethod
    def from_row(cls, row: Record, columns: ColumnCatalog) -> "BookingRecord":
        known = {
            name: row.get(getattr(columns, name))
            for name in cls.model_fields
            if name != "raw"
        }
        return cls(raw=dict(row), **known)


class BookingsSummary(BaseModel):
    period: str
    total_bookings: int
    sold: int
    unsold: int
    by_cluster: List[LabelCount]


class BookingsList(BaseModel):
    count: int
    bookings: List[Record]


class RevenueSummary(BaseModel):
    period: str
    total_records: int
    total_sale_price: float = 0
    total_gross_sale_value_without_gst: float = 0
    total_gross_amount_received: float = 0
    total_pending_demand: float = 0
    total_receivables: float = 0


class LoanStatusBreakdown(BaseModel):
    total_records: int
    financed_by: List[LabelCount]
    loan_status: List[LabelCount]


class DemandEntry(BaseModel):
    cluster: Optional[str] = None
    unit_no: Optional[str] = None
    customer_name: Optional[str] = None
    booking_date: Optional[str] = None
    sale_agreement_status: Optional[str] = None
    demand_percent: Optional[str] = None
    demand_value: Optional[str] = None
    pending_demand: Optional[str] = None
    receivables: Optional[str] = None


class DemandDetails(BaseModel):
    count: int
    entries: List[DemandEntry]


class CustomerLookup(BaseModel):
    count: int
    customers: List[Record]


class ErrorResponse(BaseModel):
    error: str
