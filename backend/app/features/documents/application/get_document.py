"""Use case for fetching a single document by filename."""

from app.features.documents.domain.entities import DocumentRecord
from app.features.documents.domain.repository_interface import DocumentRepository
from app.shared.exceptions import DocumentNotFoundError
from app.core.logger import get_logger

logger = get_logger(__name__)


class GetDocument:
    
    def __init__(self, document_repo: DocumentRepository):
        self.document_repo = document_repo
    
    async def execute(self, filename: str) -> DocumentRecord:
        """
        Look up a document by exact filename.
        
        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        try:
            return await self.document_repo.get_by_filename(filename)
        except DocumentNotFoundError:
            logger.info(f"Document not found: {filename}")
            raise
