"""Shared configuration base classes only."""

from pydantic import Field
from pydantic_settings import BaseSettings


class BaseServiceConfig(BaseSettings):
    """Base configuration class for services to extend."""

    port: int = Field(8000, description="Port the HTTP adapter listens on")
    log_level: str = Field("INFO", description="Root log level for service loggers")

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}
