"""
Order lifecycle state machine.

Statuses run pending -> preparing -> out-for-delivery -> delivered, but an update
may set any recognized status: only membership is enforced, plus two rules:
delivered is terminal, and only pending orders can be deleted.
"""
from grubdash.errors import LifecycleError, ValidationError
from grubdash.validation import RequestContext

ORDER_STATUSES: tuple[str, ...] = (
    "pending",
    "preparing",
    "out-for-delivery",
    "delivered",
)
TERMINAL_STATUS = "delivered"
DELETABLE_STATUS = "pending"


def is_recognized_status(status: object) -> bool:
    return isinstance(status, str) and status in ORDER_STATUSES


def can_update(current_status: str | None) -> bool:
    return current_status != TERMINAL_STATUS


def can_delete(current_status: str | None) -> bool:
    return current_status == DELETABLE_STATUS


def status_is_recognized(ctx: RequestContext) -> None:
    if not is_recognized_status(ctx.data.get("status")):
        raise ValidationError(f"Order must have a status of {', '.join(ORDER_STATUSES)}")


def order_not_already_delivered(ctx: RequestContext) -> None:
    """Checks the stored order, whatever status the payload asks for."""
    if not can_update(ctx.entity.get("status")):
        raise LifecycleError("A delivered order cannot be changed")


def ensure_deletable(order: dict) -> None:
    if not can_delete(order.get("status")):
        raise LifecycleError("An order cannot be deleted unless it is pending")
