"""
Strawberry object and input types.

Object types are built from the pydantic records returned by the
services; input types convert into the pydantic schemas the services
accept, dropping fields the client left out so that schema defaults
apply.
"""

from dataclasses import asdict
from typing import List, Optional

import strawberry
from strawberry.types import Info

from ..schemas.juice import JuiceCreate, JuiceRead, JuiceUpdate
from ..schemas.order import OrderCreate, OrderRead


def _provided(value) -> dict:
    return {k: v for k, v in asdict(value).items() if v is not None}


@strawberry.type(description="A catalog item.")
class Juice:
    id: strawberry.ID
    name: str
    description: str
    price: float
    category: str
    in_stock: bool
    image_url: Optional[str]

    @classmethod
    def from_record(cls, record: JuiceRead) -> "Juice":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            description=record.description,
            price=record.price,
            category=record.category,
            in_stock=record.in_stock,
            image_url=record.image_url,
        )


@strawberry.type(description="A customer purchase referencing juices by id.")
class Order:
    id: strawberry.ID
    customer_name: str
    items: List[str]
    total: float
    status: str
    created_at: str
    record: strawberry.Private[OrderRead]

    @strawberry.field(description="Referenced juices that still exist, in item order.")
    async def juices(self, info: Info) -> List[Juice]:
        records = await info.context["catalog"].orders.resolve_order_juices(self.record)
        return [Juice.from_record(r) for r in records]

    @classmethod
    def from_record(cls, record: OrderRead) -> "Order":
        return cls(
            id=strawberry.ID(record.id),
            customer_name=record.customer_name,
            items=list(record.items),
            total=record.total,
            status=record.status,
            created_at=record.created_at.isoformat(),
            record=record,
        )


@strawberry.input
class JuiceInput:
    name: str
    price: float
    description: Optional[str] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = None
    image_url: Optional[str] = None

    def to_schema(self) -> JuiceCreate:
        return JuiceCreate(**_provided(self))


@strawberry.input(description="Fields to change; omitted fields are kept.")
class JuiceUpdateInput:
    name: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = None
    image_url: Optional[str] = None

    def to_schema(self) -> JuiceUpdate:
        return JuiceUpdate(**_provided(self))


@strawberry.input
class OrderInput:
    customer_name: str
    items: List[str]

    def to_schema(self) -> OrderCreate:
        return OrderCreate(customer_name=self.customer_name, items=list(self.items))
