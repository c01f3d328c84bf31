"""
Builds a wrapped summary from pasted text, falling back to the sample year
when nothing usable was supplied.
"""

from typing import List, Optional

from libs.wrapped_shared.logging import get_logger

from .config import WrappedConfig, config
from .import_parser import parse_order_export
from .models import (
    DataSource,
    Notice,
    NoticeLevel,
    ParseMode,
    ParseResult,
    WrappedResult,
)
from .sample_data import SAMPLE_ORDERS
from .stats_service import aggregate

logger = get_logger(__name__)


def _parse_notices(parsed: ParseResult, settings: WrappedConfig) -> List[Notice]:
    notices: List[Notice] = []
    if parsed.truncated:
        notices.append(
            Notice(
                title="Input truncated",
                description=f"Only the first {settings.max_input_lines} lines were read.",
                level=NoticeLevel.WARNING,
            )
        )

    if parsed.is_empty:
        notices.append(
            Notice(
                title="Invalid Data",
                description="Could not parse your order data. Using sample data instead.",
                level=NoticeLevel.ERROR,
            )
        )
    elif parsed.mode == ParseMode.AUTO_DETECT:
        notices.append(
            Notice(
                title="Order export detected",
                description=f"Found {len(parsed.records)} orders from your export.",
            )
        )
    elif parsed.invalid_value_lines:
        notices.append(
            Notice(
                title="Some orders skipped",
                description=(
                    f"Skipped {parsed.invalid_value_lines} orders "
                    "with invalid prices or quantities."
                ),
                level=NoticeLevel.WARNING,
            )
        )
    return notices


def build_wrapped(
    raw_text: Optional[str] = None,
    use_sample: bool = False,
    reference_year: Optional[int] = None,
    settings: Optional[WrappedConfig] = None,
) -> WrappedResult:
    """
    Parse pasted order data and summarize it.

    Args:
        raw_text: Pasted export text; blank text selects the sample year
        use_sample: Skip parsing and summarize the sample orders
        reference_year: Year reported on the summary
        settings: Optional configuration override

    Returns:
        WrappedResult with the statistics, where they came from and any
        notices to show the user
    """
    settings = settings or config

    if use_sample or not (raw_text or "").strip():
        logger.info("Building wrapped summary from sample orders")
        return WrappedResult(
            stats=aggregate(SAMPLE_ORDERS, reference_year, settings),
            source=DataSource.SAMPLE,
        )

    parsed = parse_order_export(raw_text, settings)
    notices = _parse_notices(parsed, settings)

    if parsed.is_empty:
        logger.warning("Order data could not be parsed, using sample orders")
        return WrappedResult(
            stats=aggregate(SAMPLE_ORDERS, reference_year, settings),
            source=DataSource.SAMPLE,
            skipped_lines=parsed.skipped_lines,
            notices=notices,
        )

    return WrappedResult(
        stats=aggregate(parsed.records, reference_year, settings),
        source=DataSource.UPLOAD,
        parse_mode=parsed.mode,
        skipped_lines=parsed.skipped_lines,
        notices=notices,
    )
