"""
Error taxonomy raised by validators, lookups and lifecycle rules.
Each error carries the HTTP status the boundary should answer with.
"""


class GrubDashError(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(GrubDashError):
    """Payload failed a field or shape rule."""
    status_code = 400


class NotFoundError(GrubDashError):
    """No entity in the store matches the route id."""
    status_code = 404

    def __init__(self, message: str, resource_id: str | None = None):
        self.resource_id = resource_id
        super().__init__(message)


class LifecycleError(GrubDashError):
    """Order state forbids the requested update or delete."""
    status_code = 400
