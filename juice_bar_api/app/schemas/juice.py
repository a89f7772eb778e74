"""
Pydantic schemas for juices.

``JuiceCreate`` carries the fields accepted when adding a juice to the
catalog, with defaults for everything except ``name`` and ``price``.
``JuiceUpdate`` has every field optional; only fields that are
provided and not ``null`` are applied.  ``JuiceRead`` is the stored
record and the response shape of both front‑ends.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_CATEGORY = "Fruit"
DEFAULT_IMAGE_URL = "./images/first.jpg"


class JuiceBase(BaseModel):
    name: str = Field(..., examples=["Orange Juice"])
    description: str = Field("", examples=["Freshly squeezed oranges"])
    price: float = Field(..., ge=0, allow_inf_nan=False, examples=[4.99])
    category: str = Field(DEFAULT_CATEGORY, examples=["Fruit"])
    in_stock: bool = True
    image_url: str = DEFAULT_IMAGE_URL

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v


class JuiceCreate(JuiceBase):
    """Schema for adding a juice to the catalog."""
    pass


class JuiceRead(JuiceBase):
    """A juice as stored and returned by the API."""

    id: str


class JuiceUpdate(BaseModel):
    """Schema for updating a juice.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    category: Optional[str] = None
    in_stock: Optional[bool] = None
    image_url: Optional[str] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Name must not be blank")
        return v

    def changes(self) -> dict:
        """Return the fields explicitly set to a non-null value."""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}
