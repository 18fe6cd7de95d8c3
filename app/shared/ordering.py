"""Parsing of ``column:direction`` ordering strings."""

from pydantic import BaseModel


class OrderBy(BaseModel):
    """One sort key; a list of these is applied in order of precedence."""

    column: str
    direction: str


def parse_order_by(order_by: str) -> list[OrderBy]:
    """
    Split ``"col1:dir1,col2:dir2"`` into ordered pairs.

    The first pair is the primary sort key. Columns and directions are taken
    as-is; callers must check them against the sortable fields of the target
    table before building a query.

    Args:
        order_by: Comma-separated list of ``column:direction`` pairs

    Returns:
        List of OrderBy pairs in input order
    """
    orders = []
    for part in order_by.split(","):
        column, _, direction = part.partition(":")
        orders.append(OrderBy(column=column, direction=direction))
    return orders
