"""
Juice endpoints.

CRUD over the catalog plus an optional category filter and text
search on the listing.  Absent juices are reported by the service
layer as ``NotFoundError`` and turned into 404 responses by the
application's exception handlers.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...schemas.juice import JuiceCreate, JuiceRead, JuiceUpdate
from ...services import Catalog
from ..deps import get_catalog

router = APIRouter()


@router.get("", response_model=List[JuiceRead])
async def list_juices(
    category: Optional[str] = Query(None, description="Exact, case-sensitive category"),
    q: Optional[str] = Query(None, description="Case-insensitive search in name, description and category"),
    catalog: Catalog = Depends(get_catalog),
) -> List[JuiceRead]:
    """Return all juices in insertion order, optionally filtered."""
    return await catalog.juices.find_juices(category=category, query=q)


@router.get("/{juice_id}", response_model=JuiceRead)
async def get_juice(juice_id: str, catalog: Catalog = Depends(get_catalog)) -> JuiceRead:
    return await catalog.juices.get_juice(juice_id)


@router.post("", response_model=JuiceRead, status_code=status.HTTP_201_CREATED)
async def create_juice(juice_in: JuiceCreate, catalog: Catalog = Depends(get_catalog)) -> JuiceRead:
    """Add a juice.

    ``name`` and ``price`` are required; a price of ``0`` is valid.
    Omitted optional fields take their defaults.
    """
    return await catalog.juices.create_juice(juice_in)


@router.put("/{juice_id}", response_model=JuiceRead)
async def update_juice(
    juice_id: str,
    juice_in: JuiceUpdate,
    catalog: Catalog = Depends(get_catalog),
) -> JuiceRead:
    """Partially update a juice.

    Fields missing from the body, or sent as ``null``, keep their
    current value.  Falsy values such as ``0`` or ``""`` are applied.
    """
    return await catalog.juices.update_juice(juice_id, juice_in)


@router.delete("/{juice_id}", response_model=Dict[str, str])
async def delete_juice(juice_id: str, catalog: Catalog = Depends(get_catalog)) -> Dict[str, str]:
    await catalog.juices.delete_juice(juice_id)
    return {"message": "Juice deleted successfully"}
