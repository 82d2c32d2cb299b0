"""Repository interfaces for the documents feature."""

from abc import ABC, abstractmethod
from typing import List

from app.features.documents.domain.entities import DocumentRecord


class DocumentRepository(ABC):
    """Interface for document persistence."""
    
    backend_name: str = "abstract"
    
    @abstractmethod
    async def list_all(self) -> List[DocumentRecord]:
        """List all documents in insertion order."""
        pass
    
    @abstractmethod
    async def get_by_filename(self, filename: str) -> DocumentRecord:
        """
        Get a document by its filename.
        
        Raises:
            DocumentNotFoundError: If no document has this filename
        """
        pass
    
    @abstractmethod
    async def add(self, record: DocumentRecord) -> DocumentRecord:
        """
        Insert a document if its filename is not already taken.
        
        The check and the insert happen atomically with respect to other
        calls on the same repository.
        
        Raises:
            DocumentConflictError: If a document with the same filename exists
        """
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of stored documents."""
        pass
