"""
Order handlers: create, list, read, update, destroy.

Update runs the full order chain followed by the id, status and delivered-lock
checks; destroy applies the pending-only delete rule.
"""
import logging
from typing import Any

from grubdash.errors import NotFoundError, ValidationError
from grubdash.models import Order
from grubdash.order_state import ensure_deletable, order_not_already_delivered, status_is_recognized
from grubdash.results import HandlerResult, created, no_content, ok
from grubdash.store import IdGenerator, Store
from grubdash.validation import (
    RequestContext,
    Validator,
    is_blank,
    is_positive_integer,
    require_existing,
    require_matching_id,
    require_non_empty,
    run_chain,
)

logger = logging.getLogger(__name__)

NOT_FOUND = "Order not found: {id}"


def dishes_is_non_empty_list(ctx: RequestContext) -> None:
    dishes = ctx.data.get("dishes")
    if is_blank(dishes):
        raise ValidationError("Order must include a dish")
    if not isinstance(dishes, list) or not dishes:
        raise ValidationError("Order must include at least one dish")


def every_line_has_positive_integer_quantity(ctx: RequestContext) -> None:
    for index, line in enumerate(ctx.data["dishes"]):
        quantity = line.get("quantity") if isinstance(line, dict) else None
        if not is_positive_integer(quantity):
            raise ValidationError(f"Dish {index} must have a quantity that is an integer greater than 0")


ORDER_CHAIN: list[Validator] = [
    require_non_empty("deliverTo", "Order"),
    require_non_empty("mobileNumber", "Order"),
    dishes_is_non_empty_list,
    every_line_has_positive_integer_quantity,
]


class OrderHandlers:
    def __init__(self, store: Store[Order], ids: IdGenerator):
        self.store = store
        self.ids = ids
        self._exists = require_existing(store, NOT_FOUND)
        self._update_chain: list[Validator] = [
            self._exists,
            *ORDER_CHAIN,
            require_matching_id("Order id does not match route id. Order: {id}, Route: {route_id}."),
            status_is_recognized,
            order_not_already_delivered,
        ]

    def create(self, payload: Any) -> HandlerResult:
        ctx = run_chain(ORDER_CHAIN, RequestContext(payload=payload))
        data = ctx.data
        # status is only ever assigned by update, whatever the create payload carries
        order: Order = {
            "id": self.ids.next(),
            "deliverTo": data["deliverTo"],
            "mobileNumber": data["mobileNumber"],
            "dishes": data["dishes"],
        }
        self.store.append(order)
        logger.info("Created order id=%s with %d line(s)", order["id"], len(order["dishes"]))
        return created(order)

    def list(self) -> HandlerResult:
        return ok(self.store.all())

    def read(self, order_id: str) -> HandlerResult:
        ctx = run_chain([self._exists], RequestContext(route_id=order_id))
        return ok(ctx.entity)

    def update(self, order_id: str, payload: Any) -> HandlerResult:
        ctx = run_chain(self._update_chain, RequestContext(payload=payload, route_id=order_id))
        order = ctx.entity
        data = ctx.data
        order["deliverTo"] = data["deliverTo"]
        order["mobileNumber"] = data["mobileNumber"]
        order["dishes"] = data["dishes"]
        order["status"] = data["status"]
        logger.info("Updated order id=%s status=%s", order_id, order["status"])
        return ok(order)

    def destroy(self, order_id: str) -> HandlerResult:
        index = self.store.find_index(lambda order: order.get("id") == order_id)
        if index == -1:
            raise NotFoundError(NOT_FOUND.format(id=order_id), resource_id=order_id)
        ensure_deletable(self.store.all()[index])
        self.store.remove_at(index)
        logger.info("Deleted order id=%s", order_id)
        return no_content()
