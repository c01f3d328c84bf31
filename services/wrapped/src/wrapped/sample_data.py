"""Fixed sample year used when no usable order data is supplied."""

from typing import Tuple

from .models import OrderRecord


def _order(
    order_date: str, order_id: str, title: str, category: str, price: float, quantity: int
) -> OrderRecord:
    return OrderRecord(
        order_date=order_date,
        order_id=order_id,
        title=title,
        category=category,
        price=price,
        quantity=quantity,
    )


SAMPLE_YEAR = 2024

SAMPLE_ORDERS: Tuple[OrderRecord, ...] = (
    _order("2024-01-15", "111-1234567-1234567", "Wireless Earbuds", "Electronics", 79.99, 1),
    _order("2024-01-22", "111-2234567-1234567", "Python Programming Book", "Books", 34.99, 1),
    _order("2024-02-03", "111-3234567-1234567", "Yoga Mat", "Sports", 29.99, 1),
    _order("2024-02-14", "111-4234567-1234567", "Valentine's Day Chocolates", "Grocery", 24.99, 2),
    _order("2024-03-01", "111-5234567-1234567", "Standing Desk", "Home & Office", 349.99, 1),
    _order("2024-03-15", "111-6234567-1234567", "Mechanical Keyboard", "Electronics", 149.99, 1),
    _order("2024-04-20", "111-7234567-1234567", "Plant Pots Set", "Garden", 45.99, 3),
    _order("2024-05-10", "111-8234567-1234567", "Running Shoes", "Sports", 129.99, 1),
    _order("2024-06-01", "111-9234567-1234567", "Summer T-Shirts Pack", "Clothing", 59.99, 4),
    _order("2024-06-15", "111-1034567-1234567", "Portable Charger", "Electronics", 39.99, 2),
    _order("2024-07-04", "111-1134567-1234567", "BBQ Grill Set", "Home & Kitchen", 199.99, 1),
    _order("2024-07-20", "111-1234567-2234567", "Camping Tent", "Sports", 179.99, 1),
    _order("2024-08-05", "111-1334567-1234567", "Noise Canceling Headphones", "Electronics", 299.99, 1),
    _order("2024-08-25", "111-1434567-1234567", "Coffee Maker", "Home & Kitchen", 89.99, 1),
    _order("2024-09-10", "111-1534567-1234567", "Fall Jacket", "Clothing", 119.99, 1),
    _order("2024-10-31", "111-1634567-1234567", "Halloween Decorations", "Home", 49.99, 5),
    _order("2024-11-25", "111-1734567-1234567", "Black Friday TV Deal", "Electronics", 599.99, 1),
    _order("2024-11-26", "111-1834567-1234567", "Smart Watch", "Electronics", 249.99, 1),
    _order("2024-11-27", "111-1934567-1234567", "Winter Boots", "Clothing", 89.99, 2),
    _order("2024-12-01", "111-2034567-1234567", "Christmas Tree", "Home", 149.99, 1),
    _order("2024-12-15", "111-2134567-1234567", "Gift Wrapping Paper", "Home", 19.99, 10),
    _order("2024-12-18", "111-2234567-1234567", "Board Games Collection", "Toys", 79.99, 3),
)
