"""
Import parser for pasted order history exports.

This module turns loosely structured CSV-like text into OrderRecord objects.
Two strategies are tried in order:

1. Auto-detection: the first line is read as a header and columns are
   located by name (see HEADER_PATTERNS).
2. Fixed position: every line, header included, is read as
   date, order id, title, category, price, quantity.

Rows with fewer than three fields, without a positive price up to MAX_PRICE,
or with a quantity above MAX_QUANTITY are dropped. The parser never raises;
any failure yields an empty result. Only a newline ends a line, so form feeds or
Unicode separators inside a title stay in their row.
"""

import math
import re
import uuid
from datetime import date
from typing import List, NamedTuple, Optional, Sequence, Tuple

from libs.wrapped_shared.logging import get_logger

from .config import WrappedConfig, config
from .models import (
    DEFAULT_CATEGORY,
    DEFAULT_TITLE,
    MAX_PRICE,
    MAX_QUANTITY,
    ColumnMapping,
    OrderRecord,
    ParseMode,
    ParseResult,
)

logger = get_logger(__name__)

MIN_FIELDS = 3

CURRENCY_CHARS = re.compile(r"[$£€,]")
_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"^[+-]?\d+")


class ColumnPattern(NamedTuple):
    """Header substrings that identify one ColumnMapping field."""

    column: str
    needles: Tuple[str, ...]


# Checked against lower-cased header cells; the first cell containing any
# needle wins.
HEADER_PATTERNS: Tuple[ColumnPattern, ...] = (
    ColumnPattern("date", ("order date", "date")),
    ColumnPattern("order_id", ("order id", "order number")),
    ColumnPattern("title", ("title", "product name", "item", "description")),
    ColumnPattern("category", ("category",)),
    ColumnPattern("price", ("total", "price", "amount")),
    ColumnPattern("quantity", ("quantity", "qty")),
)

FIXED_POSITION_COLUMNS = ColumnMapping(
    date=0, order_id=1, title=2, category=3, price=4, quantity=5
)


def split_delimited_line(line: str, delimiter: str = ",") -> List[str]:
    """
    Split one line of delimited text, honouring double quotes.

    A delimiter inside a quoted span belongs to the field, a doubled quote
    inside a quoted span is a literal quote, and every field is trimmed.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current).strip())
    return fields


def _find_column(cells: Sequence[str], needles: Tuple[str, ...]) -> Optional[int]:
    for idx, cell in enumerate(cells):
        if any(needle in cell for needle in needles):
            return idx
    return None


def detect_columns(header_line: str) -> Optional[ColumnMapping]:
    """
    Locate known columns in a header line.

    Args:
        header_line: First line of the export

    Returns:
        ColumnMapping when at least one of date, title or price was found,
        otherwise None
    """
    cells = [cell.lower() for cell in split_delimited_line(header_line)]
    mapping = ColumnMapping(
        **{
            pattern.column: _find_column(cells, pattern.needles)
            for pattern in HEADER_PATTERNS
        }
    )
    return mapping if mapping.is_usable else None


def parse_price(raw: Optional[str]) -> Optional[float]:
    """
    Read a monetary cell such as "$1,234.56".

    Returns:
        The value when it is positive and at most MAX_PRICE, otherwise None
    """
    text = CURRENCY_CHARS.sub("", raw or "").strip()
    match = _LEADING_FLOAT.match(text)
    if not match:
        return None
    value = float(match.group())
    if not math.isfinite(value) or value <= 0 or value > MAX_PRICE:
        return None
    return value


def parse_quantity(raw: Optional[str]) -> int:
    """Read a quantity cell; anything missing, non-numeric or below 1 is 1."""
    match = _LEADING_INT.match((raw or "").strip())
    if not match:
        return 1
    quantity = int(match.group())
    return quantity if quantity > 0 else 1


def generate_order_id() -> str:
    return f"order-{uuid.uuid4().hex[:12]}"


def _cell(parts: Sequence[str], idx: Optional[int]) -> str:
    if idx is None or idx >= len(parts):
        return ""
    return parts[idx]


def _build_record(parts: Sequence[str], mapping: ColumnMapping) -> Optional[OrderRecord]:
    price = parse_price(_cell(parts, mapping.price))
    if price is None:
        return None
    quantity = parse_quantity(_cell(parts, mapping.quantity))
    if quantity > MAX_QUANTITY:
        return None

    return OrderRecord(
        order_date=_cell(parts, mapping.date) or date.today().isoformat(),
        order_id=_cell(parts, mapping.order_id) or generate_order_id(),
        title=_cell(parts, mapping.title) or DEFAULT_TITLE,
        category=_cell(parts, mapping.category) or DEFAULT_CATEGORY,
        price=price,
        quantity=quantity,
    )


class RowOutcome(NamedTuple):
    records: List[OrderRecord]
    short: int
    invalid: int

    @property
    def skipped(self) -> int:
        return self.short + self.invalid


def _parse_rows(lines: Sequence[str], mapping: ColumnMapping) -> RowOutcome:
    records: List[OrderRecord] = []
    short = 0
    invalid = 0
    for line in lines:
        parts = split_delimited_line(line)
        if len(parts) < MIN_FIELDS:
            short += 1
            continue

        record = _build_record(parts, mapping)
        if record is None:
            logger.debug(f"Dropping row with an invalid price or quantity: {line[:80]}")
            invalid += 1
            continue
        records.append(record)
    return RowOutcome(records, short, invalid)


def _split_lines(raw_text: str) -> List[str]:
    return [line.strip() for line in raw_text.split("\n") if line.strip()]


def _parse(raw_text: str, settings: WrappedConfig) -> ParseResult:
    lines = _split_lines(raw_text or "")
    if not lines:
        return ParseResult()

    truncated = len(lines) > settings.max_input_lines
    if truncated:
        logger.warning(
            f"Input has {len(lines)} lines, reading the first {settings.max_input_lines}"
        )
        lines = lines[: settings.max_input_lines]

    if len(lines) >= 2:
        mapping = detect_columns(lines[0])
        if mapping is not None:
            outcome = _parse_rows(lines[1:], mapping)
            if outcome.records:
                logger.info(
                    f"Header detected, parsed {len(outcome.records)} orders "
                    f"({outcome.skipped} skipped)"
                )
                return ParseResult(
                    records=outcome.records,
                    mode=ParseMode.AUTO_DETECT,
                    skipped_lines=outcome.skipped,
                    invalid_value_lines=outcome.invalid,
                    truncated=truncated,
                )
            logger.info("Header detected but no valid rows, trying fixed positions")

    outcome = _parse_rows(lines, FIXED_POSITION_COLUMNS)
    if not outcome.records:
        logger.info(f"No valid orders found in {len(lines)} lines")
        return ParseResult(
            skipped_lines=outcome.skipped,
            invalid_value_lines=outcome.invalid,
            truncated=truncated,
        )

    logger.info(
        f"Parsed {len(outcome.records)} orders by position ({outcome.skipped} skipped)"
    )
    return ParseResult(
        records=outcome.records,
        mode=ParseMode.FIXED_POSITION,
        skipped_lines=outcome.skipped,
        invalid_value_lines=outcome.invalid,
        truncated=truncated,
    )


def parse_order_export(
    raw_text: Optional[str], settings: Optional[WrappedConfig] = None
) -> ParseResult:
    """
    Parse a pasted order export and report how it went.

    Args:
        raw_text: Text pasted by the user
        settings: Optional configuration override

    Returns:
        ParseResult; its records list is empty when nothing could be parsed
    """
    try:
        return _parse(raw_text or "", settings or config)
    except Exception:
        logger.exception("Unexpected error while parsing order export")
        return ParseResult()


def parse_orders(
    raw_text: Optional[str], settings: Optional[WrappedConfig] = None
) -> List[OrderRecord]:
    """Parse a pasted order export; an empty list means nothing was usable."""
    return list(parse_order_export(raw_text, settings).records)
