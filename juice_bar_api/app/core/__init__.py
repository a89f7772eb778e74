"""
Core infrastructure: configuration, logging, errors, the record store
and the in‑process event broker.
"""
