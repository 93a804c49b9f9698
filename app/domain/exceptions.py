# app/domain/exceptions.py
"""Errors raised by the shop services.

Routers let them propagate; the handler registered in app.main turns
them into a JSON error response with the status code carried here.
"""


class ShopError(Exception):
    """Base class for every error the services raise on purpose."""

    status_code = 500

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
        self.message = message


class NotFoundError(ShopError):
    """A product, user or order does not exist."""

    status_code = 404


class ForbiddenError(ShopError):
    """The caller is not allowed to touch the resource."""

    status_code = 403


class UpstreamError(ShopError):
    """The store or the payment processor failed."""

    def __init__(self, message: str = "Internal error", status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ConflictError(ShopError):
    """The write clashes with existing data, e.g. a taken email."""

    status_code = 409
