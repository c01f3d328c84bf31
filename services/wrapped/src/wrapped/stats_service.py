"""
Order statistics service.

This module provides the OrderStatsService class, which loads parsed order
records into a DataFrame and derives the wrapped summary from it: totals,
monthly and weekday histograms, rankings, a shopping personality and a
short list of narrative fun facts.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Optional, Sequence, Tuple

import pandas as pd
from libs.wrapped_shared.logging import get_logger

from .config import WrappedConfig, config
from .dates import MONTH_NAMES, WEEKDAY_NAMES, format_display_date, parse_order_timestamp
from .models import (
    DEFAULT_CATEGORY,
    BiggestOrder,
    CategoryStat,
    DayOfWeekCount,
    ItemStat,
    MonthlySpending,
    OrderRecord,
    WrappedStatistics,
)

logger = get_logger(__name__)

CENT = Decimal("0.01")

DEFAULT_PERSONALITY = "Balanced Shopper"

# Keyed by the top category by spend
PERSONALITIES: Mapping[str, str] = MappingProxyType(
    {
        "Electronics": "Tech Enthusiast",
        "Books": "Bookworm",
        "Clothing": "Fashionista",
        "Home & Kitchen": "Home Chef",
        "Sports": "Fitness Fanatic",
        "Grocery": "Pantry Pro",
    }
)

LATE_NIGHT_FACT_THRESHOLD = 3
BULK_BUYER_THRESHOLD = 2

# Evaluated top to bottom, at most one fires
SEASONAL_FACTS: Tuple[Tuple[str, str], ...] = (
    ("November", "Black Friday got you! November was your peak shopping month."),
    ("December", "Holiday spirit! December was your biggest shopping month."),
)

FRAME_DTYPES = {
    "order_date": "object",
    "title": "object",
    "category": "object",
    "quantity": "int64",
    "line_total": "float64",
    "month": "Int64",
    "weekday": "Int64",
    "hour": "Int64",
    "has_time": "bool",
}


def round_currency(value: float) -> float:
    """Round half-up to the cent."""
    return float(Decimal(repr(float(value))).quantize(CENT, rounding=ROUND_HALF_UP))


class FactContext(NamedTuple):
    late_night_orders: int
    busiest_month: str
    avg_items_per_order: float
    top_category: Optional[str]
    biggest_order: BiggestOrder


def seasonal_fact(busiest_month: str) -> Optional[str]:
    for month, fact in SEASONAL_FACTS:
        if busiest_month == month:
            return fact
    return None


def build_fun_facts(ctx: FactContext) -> List[str]:
    """
    Assemble the narrative facts in display order.

    The biggest-order fact is always last and always present.
    """
    facts: List[str] = []

    if ctx.late_night_orders > LATE_NIGHT_FACT_THRESHOLD:
        facts.append(
            f"You placed {ctx.late_night_orders} late-night orders. "
            "Midnight shopping spree much?"
        )

    seasonal = seasonal_fact(ctx.busiest_month)
    if seasonal:
        facts.append(seasonal)

    if ctx.avg_items_per_order > BULK_BUYER_THRESHOLD:
        facts.append(
            f"With {ctx.avg_items_per_order:.1f} items per order, you're a bulk buyer!"
        )

    if ctx.top_category:
        facts.append(f"{ctx.top_category} was clearly your thing this year.")

    facts.append(
        f"Your biggest single order was ${ctx.biggest_order.amount:.2f} "
        f"on {format_display_date(ctx.biggest_order.date)}"
    )
    return facts


def shopping_personality(top_categories: Sequence[CategoryStat]) -> str:
    if not top_categories:
        return DEFAULT_PERSONALITY
    return PERSONALITIES.get(top_categories[0].category, DEFAULT_PERSONALITY)


class OrderStatsService:
    """
    Aggregates one batch of order records.

    The service holds no state beyond the DataFrame built from its input,
    so a new instance is created for every summary.
    """

    def __init__(
        self, orders: Sequence[OrderRecord], settings: Optional[WrappedConfig] = None
    ):
        """
        Initialize the service with parsed orders.

        Args:
            orders: Order records from the import parser or the sample set
            settings: Optional configuration override
        """
        self.settings = settings or config
        self.df = self._orders_to_df(orders)

    @staticmethod
    def _orders_to_df(orders: Sequence[OrderRecord]) -> pd.DataFrame:
        rows = []
        for order in orders:
            stamp = parse_order_timestamp(order.order_date)
            rows.append(
                {
                    "order_date": order.order_date,
                    "title": order.title,
                    "category": order.category or DEFAULT_CATEGORY,
                    "quantity": order.quantity,
                    "line_total": order.line_total,
                    "month": stamp.month_index,
                    "weekday": stamp.weekday_index,
                    "hour": None if stamp.moment is None else stamp.moment.hour,
                    "has_time": stamp.has_time,
                }
            )
        df = pd.DataFrame(rows, columns=list(FRAME_DTYPES))
        return df.astype(FRAME_DTYPES)

    @property
    def order_count(self) -> int:
        return len(self.df)

    def total_spent(self) -> float:
        """Unrounded sum of line totals."""
        return math.fsum(self.df["line_total"])

    def total_items(self) -> int:
        return int(self.df["quantity"].sum())

    def monthly_spending(self) -> List[MonthlySpending]:
        """Spend and order count for every calendar month, January first."""
        monthly = (
            self.df.groupby("month")["line_total"]
            .agg(["sum", "count"])
            .reindex(range(12), fill_value=0)
        )
        return [
            MonthlySpending(
                month=MONTH_NAMES[int(month)][:3],
                amount=round_currency(row["sum"]),
                orders=int(row["count"]),
            )
            for month, row in monthly.iterrows()
        ]

    @staticmethod
    def busiest_month(monthly: Sequence[MonthlySpending]) -> Tuple[str, int]:
        """Month with strictly the most orders; ties go to the earlier month."""
        name, orders = MONTH_NAMES[0], 0
        for month_name, entry in zip(MONTH_NAMES, monthly):
            if entry.orders > orders:
                name, orders = month_name, entry.orders
        return name, orders

    def _ranked(self, key: str, sort_by: str) -> pd.DataFrame:
        grouped = (
            self.df.groupby(key, sort=False)
            .agg(count=("quantity", "sum"), spent=("line_total", "sum"))
            .reset_index()
        )
        return grouped.sort_values(sort_by, ascending=False, kind="stable").head(
            self.settings.top_n
        )

    def top_categories(self) -> List[CategoryStat]:
        """Categories ranked by spend."""
        ranked = self._ranked("category", "spent")
        return [
            CategoryStat(
                category=row["category"],
                count=int(row["count"]),
                spent=round_currency(row["spent"]),
            )
            for _, row in ranked.iterrows()
        ]

    def top_items(self) -> List[ItemStat]:
        """Items ranked by units bought."""
        ranked = self._ranked("title", "count")
        return [
            ItemStat(
                title=row["title"],
                count=int(row["count"]),
                spent=round_currency(row["spent"]),
            )
            for _, row in ranked.iterrows()
        ]

    def orders_by_day_of_week(self) -> List[DayOfWeekCount]:
        counts = self.df["weekday"].value_counts()
        return [
            DayOfWeekCount(day=day, count=int(counts.get(idx, 0)))
            for idx, day in enumerate(WEEKDAY_NAMES)
        ]

    def biggest_order(self) -> BiggestOrder:
        """First order holding the largest line total."""
        if self.df.empty:
            return BiggestOrder()
        row = self.df.loc[self.df["line_total"].idxmax()]
        return BiggestOrder(
            date=row["order_date"],
            amount=round_currency(row["line_total"]),
            items=int(row["quantity"]),
        )

    def late_night_orders(self) -> int:
        hours = self.df["hour"]
        late = (hours >= self.settings.late_night_start_hour) | (
            hours <= self.settings.late_night_end_hour
        )
        if not self.settings.count_date_only_as_late_night:
            late = late & self.df["has_time"]
        return int(late.fillna(False).sum())

    def build(self, reference_year: Optional[int] = None) -> WrappedStatistics:
        """
        Compute the full wrapped summary.

        Args:
            reference_year: Year reported on the summary

        Returns:
            WrappedStatistics for the loaded orders
        """
        year = reference_year or self.settings.reference_year
        n = self.order_count
        logger.debug(f"Aggregating {n} orders for {year}")

        spent = self.total_spent()
        items = self.total_items()
        avg_items = items / n if n else 0.0

        monthly = self.monthly_spending()
        busiest_name, busiest_orders = self.busiest_month(monthly)
        categories = self.top_categories()
        biggest = self.biggest_order()
        late_night = self.late_night_orders()

        facts = build_fun_facts(
            FactContext(
                late_night_orders=late_night,
                busiest_month=busiest_name,
                avg_items_per_order=avg_items,
                top_category=categories[0].category if categories else None,
                biggest_order=biggest,
            )
        )

        return WrappedStatistics(
            year=year,
            total_spent=round_currency(spent),
            total_orders=n,
            total_items=items,
            avg_order_value=round_currency(spent / n) if n else 0.0,
            avg_items_per_order=round_currency(avg_items),
            late_night_orders=late_night,
            busiest_month=busiest_name,
            busiest_month_orders=busiest_orders,
            top_categories=categories,
            top_items=self.top_items(),
            monthly_spending=monthly,
            orders_by_day_of_week=self.orders_by_day_of_week(),
            biggest_order=biggest,
            shopping_personality=shopping_personality(categories),
            fun_facts=facts,
        )


def aggregate(
    orders: Sequence[OrderRecord],
    reference_year: Optional[int] = None,
    settings: Optional[WrappedConfig] = None,
) -> WrappedStatistics:
    """Summarize a batch of orders; empty input gives an all-zero summary."""
    return OrderStatsService(orders, settings).build(reference_year)
