"""
Domain errors raised by the service layer.

Front‑ends translate these into their own conventions: the REST API
maps them to HTTP status codes in ``api.errors`` and the GraphQL
schema returns them as execution errors.
"""


class CatalogError(Exception):
    """Base class for errors raised by catalog services."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """A juice or order with the requested id does not exist."""
