"""
Application package initializer.

The API is organised the usual way: ``core`` for configuration,
logging, errors and the database, ``schemas`` for Pydantic models,
``services`` for business logic, ``fixtures`` for the static utility
data and ``api`` for the versioned routers.
"""

from .main import app  # noqa: F401
