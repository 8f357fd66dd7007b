from ._order_too_high_error import OrderTooHighError


def check_order(order: int, max_order: int) -> None:
    """Validate a derivative order against the local polynomial degree."""
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")
    if order > max_order:
        raise OrderTooHighError(
            f"Cannot compute order-{order} derivative of a degree-{max_order} polynomial"
        )
