"""
Endpoint subpackage for the REST API.

Each module defines an APIRouter for one domain.  The routers are
aggregated in ``router.py`` and included in the main application.
"""
