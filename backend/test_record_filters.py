#!/usr/bin/env python3
"""Tests for period filtering, field filters and aggregation helpers"""

from datetime import datetime

import pytest

from services.aggregation import group_count, normalize_header, resolve_field, sum_field
from services.record_filters import (
    filter_by_cluster,
    filter_by_mobile,
    filter_by_period,
    filter_by_status,
    filter_by_unit,
    period_bounds,
)

NOW = datetime(2026, 10, 19, 15, 30)
DATE = "Booking Date"

def rows(*dates):
    return [{DATE: d, "Unit No.": f"G{i:03d}"} for i, d in enumerate(dates, start=1)]

def units(records):
    return [r["Unit No."] for r in records]

def test_period_bounds():
    bounds = period_bounds(NOW)
    assert bounds.start_of_today == datetime(2026, 10, 19)
    assert bounds.end_of_today == datetime(2026, 10, 20)
    assert bounds.one_week_ago == datetime(2026, 10, 12, 15, 30)
    assert bounds.start_of_month == datetime(2026, 10, 1)
    assert bounds.end_of_month == datetime(2026, 11, 1)

def test_period_bounds_december():
    bounds = period_bounds(datetime(2026, 12, 31, 23, 59))
    assert bounds.end_of_month == datetime(2027, 1, 1)
    assert bounds.end_of_today == datetime(2027, 1, 1)

def test_today():
    data = rows("2026-10-19", "2026-10-19 23:59:59", "2026-10-20", "2026-10-18")
    assert units(filter_by_period(data, "today", DATE, now=NOW)) == ["G001", "G002"]

def test_this_week_includes_now():
    data = rows("2026-10-19 15:30:00")
    assert units(filter_by_period(data, "this_week", DATE, now=NOW)) == ["G001"]

def test_this_week_excludes_eight_days_ago():
    data = rows("2026-10-11 15:30:00", "2026-10-13", "2026-10-20")
    assert units(filter_by_period(data, "this_week", DATE, now=NOW)) == ["G002"]

def test_this_month():
    data = rows("2026-09-30", "2026-10-01", "2026-10-31 18:00:00", "2026-11-01")
    assert units(filter_by_period(data, "this_month", DATE, now=NOW)) == ["G002", "G003"]

@pytest.mark.parametrize("period", ["today", "this_week", "this_month", "all", None, ""])
def test_undated_rows_always_excluded(period):
    data = rows("2026-10-19", "", "not a date", "2026-10-19 09:00:00")
    assert units(filter_by_period(data, period, DATE, now=NOW)) == ["G001", "G004"]

def test_unknown_period_keeps_all_dated_rows_in_order():
    data = rows("2020-01-01", "2030-05-05", "2026-10-19")
    assert units(filter_by_period(data, "last_year", DATE, now=NOW)) == ["G001", "G002", "G003"]

def test_custom_date_field():
    data = [{"Date of Agreement": "2026-10-19", DATE: "2020-01-01"}]
    assert filter_by_period(data, "today", "Date of Agreement", now=NOW) == data
    assert filter_by_period(data, "today", DATE, now=NOW) == []

def test_field_filters():
    data = [
        {"Cluster": "A1", "SOLD/UNSO": "SOLD", "Mobile Number": "+91 98765-43210", "Unit No.": "G001"},
        {"Cluster": "a1", "SOLD/UNSO": "UNSOLD", "Mobile Number": "9123456789", "Unit No.": "g002"},
        {"Cluster": "B", "SOLD/UNSO": "", "Mobile Number": "", "Unit No.": "G003"},
    ]
    assert len(filter_by_cluster(data, "A1", "Cluster")) == 2
    assert len(filter_by_cluster(data, "A", "Cluster")) == 0
    assert len(filter_by_status(data, "sold", "SOLD/UNSO")) == 2
    assert len(filter_by_status(data, "unsold", "SOLD/UNSO")) == 1
    assert filter_by_mobile(data, "98765 43210", "Mobile Number") == data[:1]
    assert filter_by_unit(data, "G002", "Unit No.") == data[1:2]

def test_group_count():
    data = [{"K": "A"}, {"K": "A"}, {"K": "B"}, {"K": ""}]
    result = [g.model_dump() for g in group_count(data, "K")]
    assert result == [
        {"label": "A", "count": 2},
        {"label": "B", "count": 1},
        {"label": "Unknown", "count": 1},
    ]

def test_group_count_trims_and_handles_missing_field():
    data = [{"K": " B "}, {}, {"K": "B"}, {"K": "   "}, {"K": "Unknown"}]
    result = [(g.label, g.count) for g in group_count(data, "K")]
    assert result == [("Unknown", 3), ("B", 2)]

def test_normalize_header():
    assert normalize_header("  Pending \n  Demand ") == "pending demand"
    assert normalize_header(None) == ""

def test_resolve_field():
    headers = ["Cluster", "Sale  Price", "Gross Sale Value without GST (Rs)", "Receivable"]
    assert resolve_field(headers, "sale price") == "Sale  Price"
    assert resolve_field(headers, "Gross Sale Value without GST") == "Gross Sale Value without GST (Rs)"
    assert resolve_field(headers, "Receivables", "Receivables") == "Receivables"
    assert resolve_field([], "Pending Demand") == "Pending Demand"

def test_resolve_field_prefers_exact_match():
    headers = ["Sale Agreement Status", "Sale Agreement"]
    assert resolve_field(headers, "Sale Agreement") == "Sale Agreement"

def test_sum_field():
    data = [{"Amt": "1,000"}, {"Amt": "₹ 2,500.50"}, {"Amt": ""}, {"Amt": "abc"}, {}]
    assert sum_field(data, "Amt") == pytest.approx(3500.5)
    assert sum_field([], "Amt") == 0

@pytest.mark.parametrize("period", ["today", "this_week", "this_month"])
def test_partial_date_cells_never_fall_in_current_period(period):
    data = rows("10:30", "15", "12-2024", "9")
    assert filter_by_period(data, period, DATE, now=NOW) == []
    assert filter_by_period(data, period, DATE) == []
