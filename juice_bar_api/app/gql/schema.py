"""
GraphQL schema: queries, mutations and subscriptions.

Resolvers delegate to the catalog services found in
``info.context["catalog"]``.  ``NotFoundError`` and any other
exception raised by a resolver is returned to the client unchanged as
a GraphQL execution error and logged server‑side.

Subscriptions stream records from the event broker as they are
created, over either WebSocket subprotocol strawberry supports.
"""

import logging
from typing import Annotated, Any, AsyncGenerator, Dict, List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext, Info

from ..core.events import JUICE_ADDED, ORDER_CREATED
from ..core.exceptions import NotFoundError
from ..services import Catalog
from .types import Juice, JuiceInput, JuiceUpdateInput, Order, OrderInput

logger = logging.getLogger(__name__)

IdArgument = Annotated[strawberry.ID, strawberry.argument(name="id")]


def _catalog(info: Info) -> Catalog:
    return info.context["catalog"]


@strawberry.type
class Query:
    @strawberry.field
    async def juices(self, info: Info) -> List[Juice]:
        return [Juice.from_record(r) for r in await _catalog(info).juices.list_juices()]

    @strawberry.field
    async def juice(self, info: Info, juice_id: IdArgument) -> Optional[Juice]:
        try:
            record = await _catalog(info).juices.get_juice(juice_id)
        except NotFoundError:
            return None
        return Juice.from_record(record)

    @strawberry.field
    async def juices_by_category(self, info: Info, category: str) -> List[Juice]:
        return [Juice.from_record(r) for r in await _catalog(info).juices.juices_by_category(category)]

    @strawberry.field
    async def search_juices(self, info: Info, query: str) -> List[Juice]:
        return [Juice.from_record(r) for r in await _catalog(info).juices.search_juices(query)]

    @strawberry.field
    async def orders(self, info: Info) -> List[Order]:
        return [Order.from_record(r) for r in await _catalog(info).orders.list_orders()]

    @strawberry.field
    async def order(self, info: Info, order_id: IdArgument) -> Optional[Order]:
        try:
            record = await _catalog(info).orders.get_order(order_id)
        except NotFoundError:
            return None
        return Order.from_record(record)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_juice(
        self, info: Info, juice_input: Annotated[JuiceInput, strawberry.argument(name="input")]
    ) -> Juice:
        return Juice.from_record(await _catalog(info).juices.create_juice(juice_input.to_schema()))

    @strawberry.mutation
    async def update_juice(
        self,
        info: Info,
        juice_id: IdArgument,
        juice_input: Annotated[JuiceUpdateInput, strawberry.argument(name="input")],
    ) -> Juice:
        record = await _catalog(info).juices.update_juice(juice_id, juice_input.to_schema())
        return Juice.from_record(record)

    @strawberry.mutation
    async def delete_juice(self, info: Info, juice_id: IdArgument) -> bool:
        return await _catalog(info).juices.delete_juice(juice_id)

    @strawberry.mutation
    async def create_order(
        self, info: Info, order_input: Annotated[OrderInput, strawberry.argument(name="input")]
    ) -> Order:
        return Order.from_record(await _catalog(info).orders.create_order(order_input.to_schema()))

    @strawberry.mutation
    async def update_order_status(self, info: Info, order_id: IdArgument, status: str) -> Order:
        return Order.from_record(await _catalog(info).orders.update_order_status(order_id, status))


@strawberry.type
class Subscription:
    @strawberry.subscription
    async def juice_added(self, info: Info) -> AsyncGenerator[Juice, None]:
        subscription = _catalog(info).broker.subscribe(JUICE_ADDED)
        try:
            async for record in subscription:
                yield Juice.from_record(record)
        finally:
            subscription.close()

    @strawberry.subscription
    async def order_created(self, info: Info) -> AsyncGenerator[Order, None]:
        subscription = _catalog(info).broker.subscribe(ORDER_CREATED)
        try:
            async for record in subscription:
                yield Order.from_record(record)
        finally:
            subscription.close()


class CatalogSchema(strawberry.Schema):
    """Schema that logs execution errors through the application logger."""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            logger.error("GraphQL error: %s", error.message, exc_info=error.original_error)


schema = CatalogSchema(query=Query, mutation=Mutation, subscription=Subscription)


def create_graphql_router(catalog: Catalog) -> GraphQLRouter:
    """Build the FastAPI router serving ``schema`` for ``catalog``.

    The interactive GraphQL IDE is disabled.
    """

    async def get_context() -> Dict[str, Any]:
        return {"catalog": catalog}

    return GraphQLRouter(schema, graphql_ide=None, context_getter=get_context)
