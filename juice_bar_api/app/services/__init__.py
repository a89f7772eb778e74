"""
Service layer abstraction.

Each service encapsulates the business logic for one record type and
is shared by the REST and GraphQL front‑ends, which only translate
requests and map errors.  ``Catalog`` wires both services to the same
store and broker.
"""

from .catalog import Catalog  # noqa: F401
