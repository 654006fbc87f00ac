from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import Response

from grubdash.metrics import orders_created_total, orders_deleted_total, orders_in_store
from grubdash.orders import OrderHandlers
from grubdash.routes import to_response

router = APIRouter(prefix="/orders", tags=["orders"])


def _handlers(request: Request) -> OrderHandlers:
    return request.app.state.handlers["orders"]


@router.post("")
async def create_order(request: Request, payload: Any = Body(default=None)) -> Response:
    handlers = _handlers(request)
    result = handlers.create(payload)
    orders_created_total.inc()
    orders_in_store.set(len(handlers.store))
    return to_response(result)


@router.get("")
async def list_orders(request: Request) -> Response:
    return to_response(_handlers(request).list())


@router.get("/{order_id}")
async def read_order(order_id: str, request: Request) -> Response:
    return to_response(_handlers(request).read(order_id))


@router.put("/{order_id}")
async def update_order(order_id: str, request: Request, payload: Any = Body(default=None)) -> Response:
    """
    Full overwrite of deliverTo, mobileNumber, dishes and status.
    Delivered orders are rejected whatever status is requested.
    """
    return to_response(_handlers(request).update(order_id, payload))


@router.delete("/{order_id}")
async def delete_order(order_id: str, request: Request) -> Response:
    """Only pending orders can be deleted. 204, no body."""
    handlers = _handlers(request)
    result = handlers.destroy(order_id)
    orders_deleted_total.inc()
    orders_in_store.set(len(handlers.store))
    return to_response(result)
