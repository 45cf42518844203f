"""
Top-level package for the E-commerce API.

All functionality lives in submodules under ``app``; import
``ecommerce_api.app.main`` for the ASGI application.
"""

__all__ = []
