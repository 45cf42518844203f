"""
Error types shared by the store, the services and the endpoints.

Endpoints translate these into HTTP responses:

* ``ValidationError`` -> 400 with the list of errors as ``detail``
* ``InternalError``   -> 500 with the underlying message as ``detail``

A record that does not exist is not an error; services return ``None``
and the endpoint answers 404.
"""

from typing import Any, Dict, List


class StoreError(Exception):
    """The document store could not complete an operation."""


class StoreTimeoutError(StoreError):
    """A document store call did not finish within ``STORE_TIMEOUT``."""


class ValidationError(ValueError):
    """Input rejected before anything was persisted.

    ``errors`` holds JSON-serialisable dicts in the shape pydantic
    reports them (``type``, ``loc``, ``msg``, ``input``).
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__("; ".join(str(err.get("msg")) for err in errors) or "Invalid input")


class InternalError(Exception):
    """Unexpected failure while serving a request.

    The message of the original exception is preserved so it can be
    surfaced to the caller unchanged.
    """

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)
