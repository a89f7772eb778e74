"""
GraphQL front‑end built with strawberry.

``schema.schema`` is the executable schema and ``create_graphql_router``
mounts it on FastAPI with the shared catalog in the resolver context.
"""

from .schema import create_graphql_router  # noqa: F401
