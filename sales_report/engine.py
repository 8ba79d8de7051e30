from bisect import bisect_left
from typing import Optional, Sequence

from sales_report.exceptions import CompositeError
from sales_report.models import (
    CategoryCount,
    CombinedReport,
    PriceRangeCount,
    QueryParams,
    Report,
    Statistics,
    Transaction,
)

# Upper bounds of the bar chart price ranges; the last one is effectively
# unbounded (largest integer a JSON number carries exactly).
PRICE_RANGE_UPPER_BOUNDS = (100, 200, 300, 400, 500, 600, 700, 800, 900, 2**53 - 1)

LISTING_MESSAGE = "List of transactions"
STATISTICS_MESSAGE = "Statistics for the selected month"
BAR_CHART_MESSAGE = "Bar chart data for the selected month"
PIE_CHART_MESSAGE = "Pie chart data for the selected month"


def _price_text(price: float) -> str:
    # 44.0 reads as "44", the way the price is written in the source document
    if price.is_integer():
        return str(int(price))
    return repr(price)


# ── Filters ──────────────────────────────────────────────────────────────────

def filter_by_month(records: Sequence[Transaction], month: Optional[int]) -> list[Transaction]:
    """Records sold in ``month`` (1 = January) of any year; none for ``None``."""
    if month is None:
        return []
    return [t for t in records if t.date_of_sale.month == month]


def filter_by_search(records: Sequence[Transaction], query: Optional[str]) -> list[Transaction]:
    """Case-insensitive substring match on title, description or price."""
    if not query:
        return list(records)
    needle = query.lower()
    return [
        t for t in records
        if needle in t.title.lower()
        or needle in t.description.lower()
        or needle in _price_text(t.price)
    ]


def filter_transactions(records: Sequence[Transaction], params: QueryParams) -> list[Transaction]:
    return filter_by_search(filter_by_month(records, params.month), params.search)


def paginate(records: Sequence[Transaction], page: int, per_page: int) -> list[Transaction]:
    """Return the 1-based ``page`` of ``per_page`` records; empty when out of range."""
    if page < 1 or per_page <= 0:
        return []
    start = (page - 1) * per_page
    return list(records[start:start + per_page])


# ── Aggregations ─────────────────────────────────────────────────────────────

def statistics(
    all_records: Sequence[Transaction],
    month_filtered: Sequence[Transaction],
) -> Statistics:
    # "not sold" counts every record outside the month, whatever its sold flag
    return Statistics(
        total_sale_amount=sum((t.price for t in month_filtered), 0.0),
        total_sold_items=len(month_filtered),
        total_not_sold_items=len(all_records) - len(month_filtered),
    )


def bar_chart(month_filtered: Sequence[Transaction]) -> list[PriceRangeCount]:
    """Count records per price range, in ascending range order.

    A price lands in the first range whose upper bound it does not exceed,
    so fractional prices between two labeled ranges (100.5) count towards
    the higher one. Negative prices are not counted.
    """
    counts = [0] * len(PRICE_RANGE_UPPER_BOUNDS)
    for t in month_filtered:
        if t.price < 0:
            continue
        index = bisect_left(PRICE_RANGE_UPPER_BOUNDS, t.price)
        if index < len(counts):
            counts[index] += 1

    chart = []
    lower = 0
    for upper, count in zip(PRICE_RANGE_UPPER_BOUNDS, counts):
        chart.append(PriceRangeCount(range=f"{lower}-{upper}", item_count=count))
        lower = upper + 1
    return chart


def pie_chart(month_filtered: Sequence[Transaction]) -> list[CategoryCount]:
    # dicts keep first-occurrence order
    counts: dict[str, int] = {}
    for t in month_filtered:
        counts[t.category] = counts.get(t.category, 0) + 1
    return [
        CategoryCount(category=category, item_count=count)
        for category, count in counts.items()
    ]


# ── Reports ──────────────────────────────────────────────────────────────────

def listing_report(records: Sequence[Transaction], params: QueryParams) -> Report:
    page = paginate(filter_transactions(records, params), params.page, params.per_page)
    return Report(message=LISTING_MESSAGE, data=page)


def statistics_report(records: Sequence[Transaction], params: QueryParams) -> Report:
    month_filtered = filter_by_month(records, params.month)
    return Report(message=STATISTICS_MESSAGE, data=statistics(records, month_filtered))


def bar_chart_report(records: Sequence[Transaction], params: QueryParams) -> Report:
    return Report(message=BAR_CHART_MESSAGE, data=bar_chart(filter_by_month(records, params.month)))


def pie_chart_report(records: Sequence[Transaction], params: QueryParams) -> Report:
    return Report(message=PIE_CHART_MESSAGE, data=pie_chart(filter_by_month(records, params.month)))


def combined_report(records: Sequence[Transaction], params: QueryParams) -> CombinedReport:
    """Listing, statistics and pie chart for the same snapshot and parameters.

    Fails as a whole: if any section cannot be built, ``CompositeError`` is
    raised and no partial report is returned.
    """
    try:
        return CombinedReport(
            transactions=listing_report(records, params),
            statistics=statistics_report(records, params),
            pie_chart=pie_chart_report(records, params),
        )
    except Exception as exc:
        raise CompositeError(f"Could not build combined report: {exc}") from exc
