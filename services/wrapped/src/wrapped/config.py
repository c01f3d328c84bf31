"""Wrapped service configuration."""

from libs.wrapped_shared.config import BaseServiceConfig
from pydantic import Field


class WrappedConfig(BaseServiceConfig):
    """Wrapped service specific configuration."""

    # Service settings
    port: int = Field(8004, description="Port the HTTP adapter listens on")

    # Aggregation settings
    reference_year: int = Field(
        2024, ge=1, description="Year reported on the wrapped summary"
    )
    top_n: int = Field(5, ge=1, description="Length of the category and item rankings")
    late_night_start_hour: int = Field(
        22, ge=0, le=23, description="Orders at or after this hour are late-night"
    )
    late_night_end_hour: int = Field(
        5, ge=0, le=23, description="Orders at or before this hour are late-night"
    )
    count_date_only_as_late_night: bool = Field(
        False,
        description="Treat date-only values as midnight when counting late-night orders",
    )

    # Import settings
    max_input_lines: int = Field(
        50_000, ge=1, description="Non-blank lines read from a pasted export"
    )

    # Presentation hint, not enforced by the aggregator
    max_fun_facts_displayed: int = Field(4, ge=1)

    model_config = {
        "env_prefix": "WRAPPED_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance
config = WrappedConfig()
