"""
Sample ToDo list API package.

Exposes the application factory and the default FastAPI app instance
(import path: src.api.app), e.g. for `uvicorn src.api:app`.
"""

from .main import app, create_app  # noqa: F401
