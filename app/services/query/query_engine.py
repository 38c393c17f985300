"""Filtering, sorting and pagination over an in-memory record collection.

Every listing endpoint goes through :func:`run_query`. The order of the
steps is fixed (filter, then sort, then paginate) so that ``total`` always
describes the filtered set and page boundaries follow the sort.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple

from app.services.errors import QueryValidationError

Record = Dict[str, Any]
SortKey = Callable[[Record], Any]

MIN_LIMIT = 1
MAX_LIMIT = 100
SORT_ORDERS = ("asc", "desc")


def text_key(name: str) -> SortKey:
    def key(record: Record) -> str:
        value = record.get(name)
        return "" if value is None else str(value)
    return key


def number_key(name: str) -> SortKey:
    def key(record: Record) -> float:
        return float(record[name])
    return key


@dataclass(frozen=True)
class QueryFields:
    """Which record fields an entity type can be filtered and sorted on.

    ``exact`` and ``contains`` name filter attributes that share their name
    with the record key they test.
    """

    exact: Tuple[str, ...] = ()
    contains: Tuple[str, ...] = ()
    search: Tuple[str, ...] = ()
    sort_keys: Mapping[str, SortKey] = field(default_factory=dict)
    created_key: str = "created_at"


@dataclass
class QueryResult:
    items: List[Record]
    total: int


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def validate_query(filters: Any, fields: QueryFields) -> None:
    """Reject a specification before any store access. Values are never clamped."""
    page = getattr(filters, "page", 1)
    limit = getattr(filters, "limit", 10)
    if not isinstance(page, int) or page < 1:
        raise QueryValidationError(f"page must be an integer >= 1, got {page!r}")
    if not isinstance(limit, int) or not MIN_LIMIT <= limit <= MAX_LIMIT:
        raise QueryValidationError(f"limit must be an integer between {MIN_LIMIT} and {MAX_LIMIT}, got {limit!r}")

    sort_by = getattr(filters, "sort_by", None)
    if _is_set(sort_by) and sort_by not in fields.sort_keys:
        allowed = ", ".join(fields.sort_keys)
        raise QueryValidationError(f"sortBy must be one of: {allowed}")

    sort_order = getattr(filters, "sort_order", None)
    if _is_set(sort_order) and sort_order not in SORT_ORDERS:
        raise QueryValidationError("sortOrder must be 'asc' or 'desc'")

    for name in fields.exact + fields.contains:
        if not hasattr(filters, name):
            raise QueryValidationError(f"Filter specification has no field {name!r}")


def _matches(record: Record, filters: Any, fields: QueryFields) -> bool:
    for name in fields.exact:
        wanted = getattr(filters, name, None)
        if _is_set(wanted) and str(record.get(name, "")).lower() != str(wanted).lower():
            return False

    for name in fields.contains:
        wanted = getattr(filters, name, None)
        if _is_set(wanted) and str(wanted).lower() not in str(record.get(name, "")).lower():
            return False

    search = getattr(filters, "search", None)
    if _is_set(search) and fields.search:
        needle = str(search).lower()
        if not any(needle in str(record.get(name) or "").lower() for name in fields.search):
            return False

    return True


def apply_filters(records: Sequence[Record], filters: Any, fields: QueryFields) -> List[Record]:
    """Keep records satisfying every supplied filter (AND semantics)."""
    return [record for record in records if _matches(record, filters, fields)]


def sort_records(records: Sequence[Record], filters: Any, fields: QueryFields) -> List[Record]:
    """Order records by ``sort_by``, or newest first when no sort is requested.

    ``records`` is expected in creation order. Python's sort is stable in both
    directions, so equal keys keep that order.
    """
    sort_by = getattr(filters, "sort_by", None)
    if _is_set(sort_by):
        key = fields.sort_keys[sort_by]
        descending = getattr(filters, "sort_order", None) == "desc"
        return sorted(records, key=key, reverse=descending)

    # Reverse first so that records sharing a timestamp also come out newest first.
    newest_first = list(reversed(records))
    created = fields.created_key
    if all(record.get(created) is not None for record in newest_first):
        newest_first.sort(key=lambda record: record[created], reverse=True)
    return newest_first


def paginate(records: Sequence[Record], page: int, limit: int) -> List[Record]:
    offset = (page - 1) * limit
    return list(records[offset:offset + limit])


def run_query(records: Sequence[Record], filters: Any, fields: QueryFields) -> QueryResult:
    validate_query(filters, fields)
    return execute_query(records, filters, fields)


def execute_query(records: Sequence[Record], filters: Any, fields: QueryFields) -> QueryResult:
    """Filter, sort and paginate. ``filters`` must already have passed :func:`validate_query`."""
    candidates = apply_filters(records, filters, fields)
    total = len(candidates)
    ordered = sort_records(candidates, filters, fields)
    return QueryResult(items=paginate(ordered, filters.page, filters.limit), total=total)
