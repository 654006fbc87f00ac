import json
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from grubdash.config import settings
from grubdash.dishes import DishHandlers
from grubdash.errors import GrubDashError, LifecycleError, NotFoundError
from grubdash.metrics import get_metrics_bytes, get_metrics_content_type, orders_in_store, requests_rejected_total
from grubdash.orders import OrderHandlers
from grubdash.routes import dishes, orders
from grubdash.store import IdGenerator, Store

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


def load_seed(seed_file: str | None) -> tuple[list[dict], list[dict]]:
    """Read initial dishes and orders from a JSON file; both empty when no file is configured."""
    if not seed_file:
        return [], []
    seed = json.loads(Path(seed_file).read_text(encoding="utf-8"))
    dish_seed = seed.get("dishes") or []
    order_seed = seed.get("orders") or []
    logger.info("Loaded %d dish(es) and %d order(s) from %s", len(dish_seed), len(order_seed), seed_file)
    return dish_seed, order_seed


def build_handlers(dish_seed: Iterable[dict] = (), order_seed: Iterable[dict] = ()) -> dict:
    """Resource handler map over fresh stores sharing one id generator."""
    ids = IdGenerator()
    return {
        "dishes": DishHandlers(Store(dish_seed), ids),
        "orders": OrderHandlers(Store(order_seed), ids),
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.handlers = build_handlers(*load_seed(settings.seed_file))
    orders_in_store.set(len(app.state.handlers["orders"].store))
    yield


app = FastAPI(title=settings.app_title, lifespan=lifespan)
app.include_router(dishes.router)
app.include_router(orders.router)


def _rejection_reason(exc: GrubDashError) -> str:
    if isinstance(exc, NotFoundError):
        return "not_found"
    if isinstance(exc, LifecycleError):
        return "lifecycle"
    return "validation"


@app.exception_handler(GrubDashError)
async def grubdash_error_handler(request: Request, exc: GrubDashError) -> JSONResponse:
    resource = request.url.path.strip("/").split("/", 1)[0]
    requests_rejected_total.labels(resource=resource, reason=_rejection_reason(exc)).inc()
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths (404) and unsupported methods (405) answer with the same error shape."""
    if exc.status_code == 404:
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def malformed_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Request body must be valid JSON"})


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/metrics")
async def metrics() -> Response:
    """Prometheus scrape endpoint."""
    return Response(
        content=get_metrics_bytes(),
        media_type=get_metrics_content_type(),
    )


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
