"""Use case for adding a new document to the store."""

from app.features.documents.domain.entities import DocumentRecord
from app.features.documents.domain.repository_interface import DocumentRepository
from app.features.documents.domain.value_objects import NewDocument
from app.shared.exceptions import DocumentConflictError
from app.core.logger import get_logger

logger = get_logger(__name__)


class AddDocument:
    """Validates a submitted document and stores it under its filename."""

    def __init__(self, document_repo: DocumentRepository, max_size_bytes: int):
        """Initialize the add document use case.
        
        Args:
            document_repo: Repository the document is stored in
            max_size_bytes: Upper bound on the UTF-8 encoded content size
        """
        self.document_repo = document_repo
        self.max_size_bytes = max_size_bytes
    
    async def execute(self, document: NewDocument) -> DocumentRecord:
        """Store a new document.
        
        Duplicate filenames are rejected; the first stored document is kept.
        
        Args:
            document: Validated document submitted by the client
            
        Returns:
            The stored DocumentRecord
            
        Raises:
            ValidationError: If the content exceeds the size limit
            DocumentConflictError: If the filename is already taken
        """
        document.validate_size(self.max_size_bytes)
        
        record = DocumentRecord(filename=document.filename, content=document.content)
        try:
            saved = await self.document_repo.add(record)
        except DocumentConflictError:
            logger.warning(f"Rejected duplicate document: {document.filename}")
            raise
        
        logger.info(f"Stored document {saved.filename} ({saved.size} bytes)")
        return saved
