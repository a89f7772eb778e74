"""
Pydantic schemas for customer orders.

An order references juices by id; it does not own them.  The
``total`` is computed by the service when the order is created and
is not recalculated if juice prices change later.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

STATUS_PENDING = "pending"


class OrderCreate(BaseModel):
    """Schema for placing an order."""

    customer_name: str = Field(..., examples=["Pavan"])
    items: List[str] = Field(..., examples=[["1", "3"]])

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("customer_name")
    @classmethod
    def customer_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Customer name must not be blank")
        return v


class OrderStatusUpdate(BaseModel):
    """Body of a status change.  Any string is accepted."""

    status: str = Field(..., examples=["shipped"])


class OrderRead(BaseModel):
    """An order as stored and returned by the API."""

    id: str
    customer_name: str
    items: List[str]
    total: float
    status: str = STATUS_PENDING
    created_at: datetime

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
