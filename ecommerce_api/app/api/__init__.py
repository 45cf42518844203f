"""
API package containing versioned routes.

Each version subpackage (``v1``) exposes a top-level ``router`` which
includes the routers of all record types.
"""
