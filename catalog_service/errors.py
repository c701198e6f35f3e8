"""
Error taxonomy for the catalog service.

Every failure a request can hit is one of the three classes below.
``CatalogState`` raises them and the handler registered in
``main.create_app`` renders them as ``{"message": ...}`` with the
matching HTTP status.
"""


class CatalogError(Exception):
    """Base class for request-level failures."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """Unknown book, or no review stored under the given username."""

    status_code = 404


class BadRequestError(CatalogError):
    """Missing registration fields, duplicate username or unreadable body."""

    status_code = 400


class UnauthorizedError(CatalogError):
    """Bad credentials, or a review mutation without a session flag."""

    status_code = 401
