# services/wrapped/tests/unit/test_wrapped_service.py

import pytest

from wrapped.models import DataSource, NoticeLevel, ParseMode
from wrapped.sample_data import SAMPLE_ORDERS, SAMPLE_YEAR
from wrapped.wrapped_service import build_wrapped


@pytest.mark.unit
class TestBuildWrapped:
    def test_sample_requested(self, positional_text):
        result = build_wrapped(positional_text, use_sample=True)

        assert result.source == DataSource.SAMPLE
        assert result.stats.total_orders == len(SAMPLE_ORDERS)
        assert result.notices == []

    @pytest.mark.parametrize("text", [None, "", "  \n "])
    def test_blank_text_uses_sample(self, text):
        result = build_wrapped(text)
        assert result.source == DataSource.SAMPLE
        assert result.stats.total_orders == 22

    def test_positional_upload(self, positional_text):
        result = build_wrapped(positional_text)

        assert result.source == DataSource.UPLOAD
        assert result.parse_mode == ParseMode.FIXED_POSITION
        assert result.stats.total_spent == 25.0
        assert result.notices == []

    def test_detected_export_notice(self, export_text):
        result = build_wrapped(export_text)

        assert result.parse_mode == ParseMode.AUTO_DETECT
        assert [n.title for n in result.notices] == ["Order export detected"]
        assert result.notices[0].description == "Found 2 orders from your export."
        assert result.notices[0].level == NoticeLevel.INFO

    def test_skipped_rows_warning(self):
        text = (
            "2024-01-15,111-1,Widget,Electronics,$10.00,2\n"
            "2024-01-16,111-2,Broken,Electronics,invalid,1\n"
        )
        result = build_wrapped(text)

        assert result.skipped_lines == 1
        assert result.notices[0].title == "Some orders skipped"
        assert result.notices[0].level == NoticeLevel.WARNING
        assert result.notices[0].description.startswith("Skipped 1 orders")

    def test_short_rows_alone_raise_no_warning(self):
        text = "just,two\n2024-01-15,111-1,Widget,Toys,3.00,1\nonly-one"
        result = build_wrapped(text)

        assert result.source == DataSource.UPLOAD
        assert result.skipped_lines == 2
        assert result.notices == []

    def test_warning_counts_invalid_rows_only(self):
        text = (
            "short,row\n"
            "2024-01-15,111-1,Widget,Electronics,$10.00,2\n"
            "2024-01-16,111-2,Broken,Electronics,invalid,1\n"
        )
        result = build_wrapped(text)

        assert result.skipped_lines == 2
        assert result.notices[0].description == (
            "Skipped 1 orders with invalid prices or quantities."
        )

    def test_huge_values_do_not_break_the_summary(self):
        text = (
            "2024-01-15,1,A,Electronics,1e308,1\n"
            "2024-01-16,2,B,Electronics,$1.00,100000000000000000000\n"
            "2024-01-17,3,C,Electronics,$5.00,1\n"
        )
        result = build_wrapped(text)

        assert result.source == DataSource.UPLOAD
        assert result.stats.total_orders == 1
        assert result.stats.total_spent == 5.0

    def test_unparseable_text_falls_back_to_sample(self):
        result = build_wrapped("nothing useful here\nat all")

        assert result.source == DataSource.SAMPLE
        assert result.parse_mode is None
        assert result.stats.total_orders == len(SAMPLE_ORDERS)
        assert result.notices[-1].title == "Invalid Data"
        assert result.notices[-1].level == NoticeLevel.ERROR

    def test_truncation_notice(self, settings):
        limited = settings.model_copy(update={"max_input_lines": 1})
        text = "2024-01-15,1,A,X,$1.00,1\n2024-01-16,2,B,X,$1.00,1"
        result = build_wrapped(text, settings=limited)

        assert result.stats.total_orders == 1
        assert result.notices[0].title == "Input truncated"

    def test_reference_year(self, positional_text):
        assert build_wrapped(positional_text, reference_year=2023).stats.year == 2023
        assert build_wrapped(None).stats.year == SAMPLE_YEAR
