"""
FastAPI dependencies shared by the REST endpoints.
"""

from fastapi import Request

from ..services import Catalog


def get_catalog(request: Request) -> Catalog:
    """Return the catalog owned by the running application."""
    return request.app.state.catalog
