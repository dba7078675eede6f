"""
Payload builders for the booking, revenue, loan and customer endpoints.

Each function takes the records of one sheet load and returns a response
model; none of them touch the network.
"""
import json
from datetime import datetime
from typing import List, Optional

import pandas as pd

from models.booking import (
    BookingRecord,
    BookingsList,
    BookingsSummary,
    CustomerLookup,
    DemandDetails,
    DemandEntry,
    LoanStatusBreakdown,
    Period,
    Record,
    RevenueSummary,
)
from services.aggregation import group_count, resolve_field, sum_field
from services.record_filters import (
    filter_by_cluster,
    filter_by_mobile,
    filter_by_period,
    filter_by_status,
    filter_by_unit,
)
from settings import ColumnCatalog, columns as default_columns

EXPORT_FORMATS = ("csv", "json")


def is_unsold(status: Optional[str]) -> bool:
    return "UNSOLD" in (status or "").upper()


def is_sold(status: Optional[str]) -> bool:
    return "SOLD" in (status or "").upper() and not is_unsold(status)


def bookings_summary(
    records: List[Record],
    period: str = Period.THIS_MONTH.value,
    columns: ColumnCatalog = default_columns,
    now: Optional[datetime] = None,
) -> BookingsSummary:
    filtered = filter_by_period(records, period, columns.booking_date, now=now)
    statuses = [BookingRecord.from_row(r, columns).sold_status for r in filtered]
    return BookingsSummary(
        period=period,
        total_bookings=len(filtered),
        sold=sum(1 for s in statuses if is_sold(s)),
        unsold=sum(1 for s in statuses if is_unsold(s)),
        by_cluster=group_count(filtered, columns.cluster),
    )


def filter_bookings(
    records: List[Record],
    cluster: Optional[str] = None,
    status: Optional[str] = None,
    period: Optional[str] = None,
    columns: ColumnCatalog = default_columns,
    now: Optional[datetime] = None,
) -> List[Record]:
    if period:
        records = filter_by_period(records, period, columns.booking_date, now=now)
    if cluster:
        records = filter_by_cluster(records, cluster, columns.cluster)
    if status:
        records = filter_by_status(records, status, columns.sold_status)
    return records


def list_bookings(records: List[Record], **filters) -> BookingsList:
    bookings = filter_bookings(records, **filters)
    return BookingsList(count=len(bookings), bookings=bookings)


def export_bookings(records: List[Record], format_type: str = "csv") -> bytes:
    """Serialise rows as CSV (column order as in the sheet) or JSON"""
    format_type = format_type.lower()
    if format_type == "csv":
        if records:
            df = pd.DataFrame(records, columns=list(records[0].keys()))
        else:
            df = pd.DataFrame()
        return df.to_csv(index=False).encode("utf-8")
    if format_type == "json":
        payload = {"count": len(records), "bookings": records}
        return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
    raise ValueError(f"Unsupported format: {format_type}")


def revenue_summary(
    records: List[Record],
    period: Optional[str] = None,
    columns: ColumnCatalog = default_columns,
    now: Optional[datetime] = None,
) -> RevenueSummary:
    label = period or "all"
    if not records:
        return RevenueSummary(period=label, total_records=0)

    if period:
        records = filter_by_period(records, period, columns.booking_date, now=now)

    headers = list(records[0].keys()) if records else []

    def total(logical: str) -> float:
        default = getattr(columns, logical)
        return sum_field(records, resolve_field(headers, default, default))

    return RevenueSummary(
        period=label,
        total_records=len(records),
        total_sale_price=total("sale_price"),
        total_gross_sale_value_without_gst=total("gross_sale_value_no_gst"),
        total_gross_amount_received=total("gross_amount_received"),
        total_pending_demand=total("pending_demand"),
        total_receivables=total("receivables"),
    )


def loan_status(records: List[Record], columns: ColumnCatalog = default_columns) -> LoanStatusBreakdown:
    return LoanStatusBreakdown(
        total_records=len(records),
        financed_by=group_count(records, columns.home_loan_financed_by),
        loan_status=group_count(records, columns.loan_status),
    )


def demand_details(records: List[Record], columns: ColumnCatalog = default_columns) -> DemandDetails:
    fields = set(DemandEntry.model_fields)
    entries = [
        DemandEntry(**BookingRecord.from_row(r, columns).model_dump(include=fields))
        for r in records
    ]
    return DemandDetails(count=len(entries), entries=entries)


def customer_lookup(
    records: List[Record],
    mobile: Optional[str] = None,
    unit: Optional[str] = None,
    columns: ColumnCatalog = default_columns,
) -> CustomerLookup:
    if mobile:
        records = filter_by_mobile(records, mobile, columns.mobile)
    if unit:
        records = filter_by_unit(records, unit, columns.unit_no)
    return CustomerLookup(count=len(records), customers=records)
