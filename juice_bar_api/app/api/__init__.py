"""
REST front‑end.

``router`` aggregates the domain routers and is mounted under
``/api`` by ``main.create_app``.  Error translation lives in
``errors`` and is registered on the application as a whole.
"""
