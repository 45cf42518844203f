"""
Application package initializer.

The project is split by concern: ``core`` (settings, logging, the
document store, error types), ``schemas`` (request and response
models), ``services`` (business logic per record type) and
``api/<version>`` (HTTP routers).  Each record type exposes a router
defined in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
