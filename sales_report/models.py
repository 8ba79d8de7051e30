from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # wire names are camelCase (dateOfSale, itemCount, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Transaction(CamelModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    id: Union[int, str]
    title: str
    description: str
    price: float
    category: str
    date_of_sale: datetime
    sold: Optional[bool] = None
    image: Optional[str] = None


def _parse_int(value: Optional[str], default: Optional[int]) -> Optional[int]:
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return None


class QueryParams(BaseModel):
    """Already-parsed query parameters shared by every read operation.

    Parsing never rejects input. A month that is missing, non-numeric or
    outside 1..12 becomes ``None`` and matches no record; a page or page
    size that cannot be read as an integer becomes ``0`` and yields an
    empty page.
    """

    month: Optional[int] = None
    search: Optional[str] = None
    page: int = 1
    per_page: int = 10

    @classmethod
    def parse(
        cls,
        month: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[str] = None,
        per_page: Optional[str] = None,
    ) -> "QueryParams":
        parsed_month = _parse_int(month, None)
        if parsed_month is not None and not 1 <= parsed_month <= 12:
            parsed_month = None
        parsed_page = _parse_int(page, 1)
        parsed_per_page = _parse_int(per_page, 10)
        return cls(
            month=parsed_month,
            search=search if search and search.strip() else None,
            page=0 if parsed_page is None else parsed_page,
            per_page=0 if parsed_per_page is None else parsed_per_page,
        )


# ── Response models ──────────────────────────────────────────────────────────

class Statistics(CamelModel):
    total_sale_amount: float
    total_sold_items: int
    total_not_sold_items: int


class PriceRangeCount(CamelModel):
    range: str
    item_count: int


class CategoryCount(CamelModel):
    category: str
    item_count: int


class Report(BaseModel):
    """The ``{message, data}`` envelope every route answers with."""

    message: str
    data: Any = None


class CombinedReport(CamelModel):
    transactions: Report
    statistics: Report
    pie_chart: Report
