"""
Dish handlers: create, list, read, update. Dishes are never deleted.
"""
import logging
from typing import Any

from grubdash.models import Dish
from grubdash.results import HandlerResult, created, ok
from grubdash.store import IdGenerator, Store
from grubdash.validation import (
    RequestContext,
    Validator,
    require_existing,
    require_matching_id,
    require_non_empty,
    require_positive_integer,
    run_chain,
)

logger = logging.getLogger(__name__)

DISH_FIELDS = ("name", "description", "price", "image_url")

DISH_CHAIN: list[Validator] = [
    require_non_empty("name", "Dish"),
    require_non_empty("description", "Dish"),
    require_non_empty("image_url", "Dish"),
    require_positive_integer("price", "Dish must have a price that is an integer greater than 0"),
]


class DishHandlers:
    def __init__(self, store: Store[Dish], ids: IdGenerator):
        self.store = store
        self.ids = ids
        self._exists = require_existing(store, "Dish does not exist: {id}")
        self._update_chain: list[Validator] = [
            self._exists,
            *DISH_CHAIN,
            require_matching_id("Dish id does not match route id. Dish: {id}, Route: {route_id}"),
        ]

    def create(self, payload: Any) -> HandlerResult:
        ctx = run_chain(DISH_CHAIN, RequestContext(payload=payload))
        dish: Dish = {"id": self.ids.next(), **{field: ctx.data[field] for field in DISH_FIELDS}}
        self.store.append(dish)
        logger.info("Created dish id=%s", dish["id"])
        return created(dish)

    def list(self) -> HandlerResult:
        return ok(self.store.all())

    def read(self, dish_id: str) -> HandlerResult:
        ctx = run_chain([self._exists], RequestContext(route_id=dish_id))
        return ok(ctx.entity)

    def update(self, dish_id: str, payload: Any) -> HandlerResult:
        ctx = run_chain(self._update_chain, RequestContext(payload=payload, route_id=dish_id))
        dish = ctx.entity
        for field in DISH_FIELDS:
            dish[field] = ctx.data[field]
        logger.info("Updated dish id=%s", dish_id)
        return ok(dish)
