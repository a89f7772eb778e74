"""
Top‑level package for the Juice Bar API.

This file makes ``juice_bar_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``juice_bar_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
