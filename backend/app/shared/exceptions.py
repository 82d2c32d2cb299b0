"""Custom exceptions for the document store application."""

from typing import Any, Dict, Optional


class DocumentStoreException(Exception):
    """Base exception for all document store errors."""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


# ==================== Domain Exceptions ====================

class DomainException(DocumentStoreException):
    """Base exception for domain layer errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    pass


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""
    
    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__("not found", details={"entity_type": entity_type, "entity_id": entity_id})


class ConflictError(DomainException):
    """Raised when an entity with the same identity already exists."""
    
    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} '{entity_id}' already exists"
        super().__init__(message, details={"entity_type": entity_type, "entity_id": entity_id})


# ==================== Document-Specific Exceptions ====================

class DocumentNotFoundError(EntityNotFoundError):
    """Raised when a document is not found."""
    
    def __init__(self, filename: str):
        super().__init__("Document", filename)


class DocumentConflictError(ConflictError):
    """Raised when a document with the same filename is already stored."""
    
    def __init__(self, filename: str):
        super().__init__("Document", filename)


# ==================== Infrastructure Exceptions ====================

class InfrastructureException(DocumentStoreException):
    """Base exception for infrastructure layer errors."""
    pass


class StorageError(InfrastructureException):
    """Base exception for storage-related errors."""
    pass


class RepositoryError(StorageError):
    """Raised when repository operations fail."""
    pass
