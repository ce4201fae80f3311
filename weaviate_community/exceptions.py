# weaviate_community/exceptions.py
from __future__ import annotations
from typing import Any


class WeaviateError(Exception):
    """Base class for every error raised by this package."""


class QueryBuildError(WeaviateError, ValueError):
    """A query builder was constructed or built with missing required state."""


class QueryError(WeaviateError, ValueError):
    """Request parameters that cannot be combined, caught before sending."""


class TransportError(WeaviateError):
    """Connection, timeout or protocol failure below the HTTP status level."""


class ResponseDecodeError(TransportError):
    def __init__(self, action: str, text: str):
        super().__init__(f"could not decode JSON response of {action}: {text[:200]!r}")
        self.action = action
        self.text = text


class UnexpectedStatusError(WeaviateError):
    def __init__(self, status_code: int, action: str, body: Any | None = None):
        msg = f"status code {status_code} received when calling {action} endpoint."
        if body is not None:
            msg += f" Response: {body}"
        super().__init__(msg)
        self.status_code = status_code
        self.action = action
        self.body = body


class SchemaError(UnexpectedStatusError):
    pass


class ObjectsError(UnexpectedStatusError):
    pass


class BatchError(UnexpectedStatusError):
    pass


class BackupError(UnexpectedStatusError):
    pass


class ClassificationError(UnexpectedStatusError):
    pass


class MetaError(UnexpectedStatusError):
    pass


class NodesError(UnexpectedStatusError):
    pass


class ModuleError(UnexpectedStatusError):
    pass


class GraphQLError(UnexpectedStatusError):
    pass


class NotConfiguredError(UnexpectedStatusError):
    """The server answered, but the requested feature is not enabled on it."""
