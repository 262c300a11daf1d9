# backend/applicant_tracker/core/errors.py
"""
Error taxonomy.

- ServiceError and its four subclasses are the only outcomes the operations
  layer raises; each carries a stable `code` and the HTTP status the API
  answers with.
- ValidationError is raised by the field validator (pure, no I/O).
- PersistenceError is raised by the storage layer, already classified into a
  small `kind` so callers never look at driver-specific errors.
- ConfigError is raised at startup for unusable settings.
"""

from __future__ import annotations

from enum import Enum


class ServiceError(Exception):
    code = "unknown"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"<{type(self).__name__} code={self.code} message={self.message!r}>"


class InvalidArgument(ServiceError):
    code = "invalid_argument"
    http_status = 400


class NotFound(ServiceError):
    code = "not_found"
    http_status = 404


class AlreadyExists(ServiceError):
    code = "already_exists"
    http_status = 409


class Internal(ServiceError):
    code = "internal"
    http_status = 500


class ValidationError(ValueError):
    """Field-level validation failure; str(err) is the reason."""


class PersistenceErrorKind(str, Enum):
    UNIQUE_VIOLATION = "unique_violation"
    OTHER = "other"


class PersistenceError(Exception):
    def __init__(self, kind: PersistenceErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def is_unique_violation(self) -> bool:
        return self.kind is PersistenceErrorKind.UNIQUE_VIOLATION


class ConfigError(RuntimeError):
    pass


__all__ = [
    "ServiceError",
    "InvalidArgument",
    "NotFound",
    "AlreadyExists",
    "Internal",
    "ValidationError",
    "PersistenceErrorKind",
    "PersistenceError",
    "ConfigError",
]
