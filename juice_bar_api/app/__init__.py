"""
Application package initializer.

The service exposes one in‑memory catalog of juices and customer
orders through two front‑ends: a REST API under ``/api`` and a
GraphQL endpoint.  Both front‑ends are thin translation layers over
the shared services in ``services``; the record store itself lives in
``core.store`` and is owned by the application instance.
"""

from .main import app  # noqa: F401
