"""
Service layer.

Each service encapsulates the logic for one record type and works
against the ``DocumentStore`` it is constructed with, so API handlers
never touch persistence directly.
"""
