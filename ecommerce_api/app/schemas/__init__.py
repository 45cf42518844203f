"""
Pydantic schema definitions for API payloads.

Each record type (users, products, orders) defines its own models for
request and response bodies.
"""
