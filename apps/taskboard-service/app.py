"""
App assembly entry point.

Re-exports the FastAPI `app` from `core.api.main` so the service can be
served with `uvicorn app:app`.
"""

from core.api.main import app  # noqa: F401
