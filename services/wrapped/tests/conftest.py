# services/wrapped/tests/conftest.py
"""
Test configuration for wrapped service tests.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ["TESTING"] = "true"


def setup_python_path():
    """Set up Python path to allow imports from both service and shared libs."""
    project_root = Path(__file__).parent.parent.parent.parent.absolute()
    wrapped_src = Path(__file__).parent.parent / "src"

    paths_to_add = [str(wrapped_src), str(project_root)]
    for path in paths_to_add:
        if path not in sys.path:
            sys.path.insert(0, path)


# Set up paths immediately when module is imported
setup_python_path()

from wrapped.config import WrappedConfig  # noqa: E402
from wrapped.models import OrderRecord  # noqa: E402


@pytest.fixture
def settings():
    """Configuration with defaults, independent of the environment."""
    return WrappedConfig(_env_file=None)


@pytest.fixture
def positional_text():
    return (
        "2024-01-15,111-1,Widget,Electronics,$10.00,2\n"
        "2024-01-20,111-2,Gadget,Electronics,$5.00,1"
    )


@pytest.fixture
def export_text():
    """Export with a recognizable header row."""
    return (
        "Order Date,Order ID,Title,Category,Total,Quantity\n"
        '2024-03-04,112-0001,"Desk Lamp, LED",Home & Kitchen,"$1,024.50",1\n'
        "2024-03-09,112-0002,Notebook,Books,$4.25,4\n"
    )


@pytest.fixture
def make_order():
    """Factory for order records with sensible defaults."""

    def _make(
        order_date="2024-01-15",
        title="Widget",
        category="Electronics",
        price=10.0,
        quantity=1,
        order_id=None,
    ):
        return OrderRecord(
            order_date=order_date,
            order_id=order_id or f"id-{title}-{order_date}",
            title=title,
            category=category,
            price=price,
            quantity=quantity,
        )

    return _make
