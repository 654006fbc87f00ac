from dataclasses import dataclass
from typing import Any


@dataclass
class HandlerResult:
    """Status code plus response body; body is None for 204 responses."""
    status_code: int
    body: dict[str, Any] | None = None


def ok(data: Any) -> HandlerResult:
    return HandlerResult(status_code=200, body={"data": data})


def created(data: Any) -> HandlerResult:
    return HandlerResult(status_code=201, body={"data": data})


def no_content() -> HandlerResult:
    return HandlerResult(status_code=204)
