import re
from collections import Counter
from typing import Iterable, List, Optional

from models.booking import LabelCount, Record
from services.value_parser import parse_number

UNKNOWN_LABEL = "Unknown"

_WHITESPACE = re.compile(r"\s+")


def group_count(records: List[Record], field: str) -> List[LabelCount]:
    """Count rows per value of ``field``, most frequent first"""
    counts = Counter()
    for row in records:
        label = (row.get(field) or "").strip() or UNKNOWN_LABEL
        counts[label] += 1
    # sorted() is stable, so ties keep first-seen order
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [LabelCount(label=label, count=count) for label, count in ordered]


def normalize_header(text: Optional[str]) -> str:
    return _WHITESPACE.sub(" ", str(text or "").lower()).strip()


def resolve_field(headers: Iterable[str], label: str, default: Optional[str] = None) -> str:
    """Find the header actually used in the sheet for a logical column.

    Exact match after normalising case and whitespace wins, then the first
    header containing the label, then ``default`` (or the label itself).
    """
    headers = list(headers)
    target = normalize_header(label)
    for header in headers:
        if normalize_header(header) == target:
            return header
    for header in headers:
        if target in normalize_header(header):
            return header
    return default if default is not None else label


def sum_field(records: List[Record], field: str) -> float:
    return sum((parse_number(row.get(field)) for row in records), 0.0)
