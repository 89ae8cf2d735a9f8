"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from cmsproxy.api import app

    uvicorn cmsproxy.api:app --reload
"""

from cmsproxy.api.app import app, create_app

__all__ = ["app", "create_app"]
