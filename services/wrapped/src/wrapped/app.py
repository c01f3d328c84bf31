# services/wrapped/src/wrapped/app.py
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from libs.wrapped_shared.errors import service_error, validation_error
from libs.wrapped_shared.health import format_health_response
from libs.wrapped_shared.logging import get_logger

from .config import WrappedConfig, config
from .import_parser import parse_order_export
from .models import ParseRequest, ParseResult, WrappedRequest, WrappedResult, WrappedStatistics
from .sample_data import SAMPLE_ORDERS
from .stats_service import aggregate
from .wrapped_service import build_wrapped

logger = get_logger(__name__, config.log_level)


app = FastAPI(
    title="Wrapped Service",
    description="Year-in-review statistics for pasted order history exports",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_settings() -> WrappedConfig:
    """
    Dependency provider for service settings.
    In tests, this can be overridden to provide custom limits.
    """
    return config


@app.get("/health", tags=["wrapped"], operation_id="wrapped_health")
async def health(settings: WrappedConfig = Depends(get_settings)):
    """Service health check endpoint."""
    problems = [] if SAMPLE_ORDERS else ["sample orders are missing"]
    return format_health_response(
        version=app.version,
        details={
            "sample_orders": len(SAMPLE_ORDERS),
            "reference_year": settings.reference_year,
            "max_input_lines": settings.max_input_lines,
        },
        problems=problems,
    )


@app.post(
    "/wrapped",
    response_model=WrappedResult,
    tags=["wrapped"],
    operation_id="build_wrapped",
)
async def create_wrapped(
    request: WrappedRequest,
    settings: WrappedConfig = Depends(get_settings),
):
    """
    Build a wrapped summary from pasted order data.

    Unparseable or empty text falls back to the sample year; the notices in
    the response say when that happened.
    """
    try:
        return build_wrapped(
            request.text,
            use_sample=request.use_sample,
            reference_year=request.year,
            settings=settings,
        )
    except Exception as e:
        logger.error("Error building wrapped summary", exc_info=e)
        raise service_error(str(e))


@app.get(
    "/wrapped/sample",
    response_model=WrappedStatistics,
    tags=["wrapped"],
    operation_id="sample_wrapped",
)
async def sample_wrapped(settings: WrappedConfig = Depends(get_settings)):
    """Statistics for the built-in sample year."""
    try:
        return aggregate(SAMPLE_ORDERS, settings=settings)
    except Exception as e:
        logger.error("Error aggregating sample orders", exc_info=e)
        raise service_error(str(e))


@app.post(
    "/orders/parse",
    response_model=ParseResult,
    tags=["orders"],
    operation_id="parse_orders",
)
async def parse_orders(
    request: ParseRequest,
    settings: WrappedConfig = Depends(get_settings),
):
    """Parse pasted order data without summarizing it."""
    if not request.text.strip():
        raise validation_error("Order text must not be blank", field="text")
    return parse_order_export(request.text, settings)
