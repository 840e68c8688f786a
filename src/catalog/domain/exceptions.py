"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each subclass carries an ErrorKind tag so callers can tell them apart without
isinstance chains.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = ErrorKind.VALIDATION


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidArgumentError(DomainException):
    """An argument is outside the range an operation accepts."""

    kind = ErrorKind.INVALID_ARGUMENT
