# services/wrapped/src/wrapped/models.py
"""
Wrapped service models.

Order records come out of the import parser, statistics come out of the
aggregator. Both serialize with camelCase aliases, the shape the slide
renderer consumes.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_TITLE = "Unknown Item"
DEFAULT_CATEGORY = "Other"

# Upper bounds keep every line total, and any realistic sum of them, finite
MAX_PRICE = 1_000_000_000.0
MAX_QUANTITY = 1_000_000

_frozen_camel = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class OrderRecord(BaseModel):
    """
    One purchased line item after parsing.

    The price is a unit price: the line total is always price * quantity.
    """

    order_date: str = Field(
        ...,
        description="Date text as supplied by the export; interpreted later",
        examples=["2024-11-25"],
    )
    order_id: str = Field(..., description="Order identifier", examples=["111-1734567-1234567"])
    title: str = Field(DEFAULT_TITLE, description="Item title")
    category: str = Field(DEFAULT_CATEGORY, description="Item category")
    price: float = Field(
        ..., gt=0, le=MAX_PRICE, allow_inf_nan=False, description="Unit price"
    )
    quantity: int = Field(1, ge=1, le=MAX_QUANTITY, description="Units purchased")

    model_config = _frozen_camel

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class ColumnMapping(BaseModel):
    """Header positions found by auto-detection; None means the column is absent."""

    date: Optional[int] = None
    order_id: Optional[int] = None
    title: Optional[int] = None
    category: Optional[int] = None
    price: Optional[int] = None
    quantity: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_usable(self) -> bool:
        """At least one of date, title or price must be present."""
        return any(idx is not None for idx in (self.date, self.title, self.price))


class ParseMode(str, Enum):
    AUTO_DETECT = "auto_detect"
    FIXED_POSITION = "fixed_position"


class ParseResult(BaseModel):
    """Records produced by one parse together with its diagnostics."""

    records: List[OrderRecord] = Field(default_factory=list)
    mode: Optional[ParseMode] = Field(
        None, description="Strategy that produced the records, None when nothing parsed"
    )
    skipped_lines: int = Field(
        0, ge=0, description="Rows dropped for too few fields or an invalid value"
    )
    invalid_value_lines: int = Field(
        0,
        ge=0,
        description="Rows among skipped_lines dropped for an invalid price or quantity",
    )
    truncated: bool = Field(
        False, description="Input was cut at the configured line limit"
    )

    model_config = _frozen_camel

    @property
    def is_empty(self) -> bool:
        return not self.records


class CategoryStat(BaseModel):
    category: str
    count: int = Field(..., ge=0, description="Units bought in this category")
    spent: float = Field(..., ge=0, description="Line totals summed, rounded to cents")

    model_config = _frozen_camel


class ItemStat(BaseModel):
    title: str
    count: int = Field(..., ge=0, description="Units bought of this item")
    spent: float = Field(..., ge=0)

    model_config = _frozen_camel


class MonthlySpending(BaseModel):
    month: str = Field(..., description="Three-letter month abbreviation", examples=["Jan"])
    amount: float = Field(..., ge=0)
    orders: int = Field(..., ge=0)

    model_config = _frozen_camel


class DayOfWeekCount(BaseModel):
    day: str = Field(..., examples=["Sunday"])
    count: int = Field(..., ge=0)

    model_config = _frozen_camel


class BiggestOrder(BaseModel):
    date: str = ""
    amount: float = 0.0
    items: int = 0

    model_config = _frozen_camel


class WrappedStatistics(BaseModel):
    """
    Year-in-review summary of an order history.

    Every field is always present: monthly_spending has 12 entries,
    orders_by_day_of_week has 7, the rankings hold at most top_n entries and
    fun_facts holds between one and six strings.
    """

    year: int
    total_spent: float
    total_orders: int
    total_items: int
    avg_order_value: float
    avg_items_per_order: float
    late_night_orders: int
    busiest_month: str
    busiest_month_orders: int
    top_categories: List[CategoryStat]
    top_items: List[ItemStat]
    monthly_spending: List[MonthlySpending]
    orders_by_day_of_week: List[DayOfWeekCount]
    biggest_order: BiggestOrder
    shopping_personality: str
    fun_facts: List[str]

    model_config = _frozen_camel


class NoticeLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Notice(BaseModel):
    """User-facing message about how the pasted data was handled."""

    title: str
    description: str
    level: NoticeLevel = NoticeLevel.INFO

    model_config = _frozen_camel


class DataSource(str, Enum):
    UPLOAD = "upload"
    SAMPLE = "sample"


class WrappedResult(BaseModel):
    stats: WrappedStatistics
    source: DataSource
    parse_mode: Optional[ParseMode] = None
    skipped_lines: int = 0
    notices: List[Notice] = Field(default_factory=list)

    model_config = _frozen_camel


class WrappedRequest(BaseModel):
    """
    Request body for building a wrapped summary.

    Leave text empty or set use_sample to get the sample year.
    """

    text: Optional[str] = Field(
        None, description="Pasted order export (CSV-like text)"
    )
    use_sample: bool = Field(False, description="Ignore text and use the sample orders")
    year: Optional[int] = Field(
        None, ge=1, description="Year to report; defaults to the configured year"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParseRequest(BaseModel):
    text: str = Field(..., description="Pasted order export (CSV-like text)")
