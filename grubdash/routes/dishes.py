from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import Response

from grubdash.dishes import DishHandlers
from grubdash.metrics import dishes_created_total
from grubdash.routes import to_response

router = APIRouter(prefix="/dishes", tags=["dishes"])


def _handlers(request: Request) -> DishHandlers:
    return request.app.state.handlers["dishes"]


@router.post("")
async def create_dish(request: Request, payload: Any = Body(default=None)) -> Response:
    """Validate name, description, image_url and price, then store a new dish."""
    result = _handlers(request).create(payload)
    dishes_created_total.inc()
    return to_response(result)


@router.get("")
async def list_dishes(request: Request) -> Response:
    return to_response(_handlers(request).list())


@router.get("/{dish_id}")
async def read_dish(dish_id: str, request: Request) -> Response:
    return to_response(_handlers(request).read(dish_id))


@router.put("/{dish_id}")
async def update_dish(dish_id: str, request: Request, payload: Any = Body(default=None)) -> Response:
    """Overwrite the four business fields of an existing dish; the id never changes."""
    return to_response(_handlers(request).update(dish_id, payload))
