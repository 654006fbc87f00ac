"""
Request validation chains.

A validator is a callable taking the RequestContext; it returns None on success
and raises a GrubDashError on failure. run_chain() runs validators in order, so
the first failure is the only one reported and nothing after it is evaluated.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from grubdash.errors import NotFoundError, ValidationError
from grubdash.store import Store


@dataclass
class RequestContext:
    payload: Any = None
    route_id: str | None = None
    # set by require_existing()
    entity: dict | None = None

    @property
    def data(self) -> dict:
        """payload["data"], or an empty dict when the payload or data is absent."""
        if not isinstance(self.payload, dict):
            return {}
        data = self.payload.get("data")
        return data if isinstance(data, dict) else {}


Validator = Callable[[RequestContext], None]


def run_chain(validators: Iterable[Validator], ctx: RequestContext) -> RequestContext:
    for validator in validators:
        validator(ctx)
    return ctx


def is_blank(value: Any) -> bool:
    """Missing, None, "", 0 or False. Empty lists and dicts are not blank."""
    return value is None or value in ("", 0)


def is_positive_integer(value: Any) -> bool:
    # bool is an int subclass but never a valid count or price
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        # JSON 2.0 is the integer 2
        return value.is_integer() and value > 0
    return isinstance(value, int) and value > 0


def require_non_empty(field: str, resource: str) -> Validator:
    def check(ctx: RequestContext) -> None:
        if is_blank(ctx.data.get(field)):
            raise ValidationError(f"{resource} must include a {field}")

    check.__name__ = f"require_non_empty_{field}"
    return check


def require_positive_integer(field: str, message: str) -> Validator:
    def check(ctx: RequestContext) -> None:
        if not is_positive_integer(ctx.data.get(field)):
            raise ValidationError(message)

    check.__name__ = f"require_positive_integer_{field}"
    return check


def require_existing(store: Store[dict], not_found: str) -> Validator:
    """
    Existence lookup keyed on the route id. On a hit the stored entity (not a copy)
    is placed on ctx.entity; on a miss raises NotFoundError with not_found
    formatted with the id.
    """
    def check(ctx: RequestContext) -> None:
        found = store.find(lambda item: item.get("id") == ctx.route_id)
        if found is None:
            raise NotFoundError(not_found.format(id=ctx.route_id), resource_id=ctx.route_id)
        ctx.entity = found

    return check


def require_matching_id(mismatch: str) -> Validator:
    """A payload id, when given, must equal the route id."""
    def check(ctx: RequestContext) -> None:
        payload_id = ctx.data.get("id")
        if payload_id and payload_id != ctx.route_id:
            raise ValidationError(mismatch.format(id=payload_id, route_id=ctx.route_id))

    return check
