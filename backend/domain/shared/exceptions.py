"""
Domain Exceptions.

Custom exceptions for domain-level errors.
These exceptions represent business rule violations.
"""

from typing import Optional, Any, Dict


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "DOMAIN_ERROR"
        self.details = details or {}


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_type: str, value: Any, field: str = "ID"):
        super().__init__(
            message=f"{entity_type} not found with {field}: {value}",
            code="ENTITY_NOT_FOUND",
            details={"entity_type": entity_type, "field": field, "value": str(value)}
        )


class EntityAlreadyExistsException(DomainException):
    """Raised when trying to create an entity that already exists."""

    def __init__(self, entity_type: str, field: str, value: Any, updating: bool = False):
        prefix = f"Another {entity_type.lower()}" if updating else entity_type
        super().__init__(
            message=f"{prefix} with {field} '{value}' already exists",
            code="ENTITY_ALREADY_EXISTS",
            details={"entity_type": entity_type, "field": field, "value": str(value)}
        )


class ValidationException(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field, "value": str(value) if value is not None else None}
        )


class CircularReferenceException(DomainException):
    """Raised when a parent assignment would create a cycle in a hierarchy."""

    def __init__(self, entity_type: str, parent_id: Any, ancestor_id: Any):
        super().__init__(
            message=(
                f"Circular reference detected: {entity_type.lower()} {parent_id} "
                f"cannot be parent of its ancestor {ancestor_id}"
            ),
            code="CIRCULAR_REFERENCE",
            details={"parent_id": str(parent_id), "ancestor_id": str(ancestor_id)}
        )


class BusinessRuleViolationException(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, rule: str, message: str):
        super().__init__(
            message=message,
            code="BUSINESS_RULE_VIOLATION",
            details={"rule": rule}
        )


class DeletionBlockedException(BusinessRuleViolationException):
    """Raised when an entity still has dependent records."""

    def __init__(self, entity_type: str, entity_id: Any, count: int, dependents: str):
        super().__init__(
            rule="DELETE_WITH_DEPENDENTS",
            message=(
                f"Cannot delete {entity_type.lower()} with ID {entity_id} "
                f"because it has {count} associated {dependents}"
            ),
        )
        self.details.update({"dependents": dependents, "count": count})
