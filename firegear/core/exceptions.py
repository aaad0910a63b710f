"""Domain-level exception hierarchy for service and repository layers."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for domain-specific failures."""

    code = "domain_error"


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    code = "not_found"


class ConflictError(DomainError):
    """Raised when a state conflict occurs (e.g. duplicate serial numbers)."""

    code = "conflict"


class ValidationError(DomainError):
    """Raised when input validation fails at the domain/service layer."""

    code = "validation_failed"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InfrastructureError(DomainError):
    """Raised when infrastructure (DB) is unavailable."""

    code = "service_unavailable"
