"""Use case for listing every stored document."""

from typing import List

from app.features.documents.domain.entities import DocumentRecord
from app.features.documents.domain.repository_interface import DocumentRepository
from app.core.logger import get_logger

logger = get_logger(__name__)


class ListDocuments:
    
    def __init__(self, document_repo: DocumentRepository):
        self.document_repo = document_repo
    
    async def execute(self) -> List[DocumentRecord]:
        documents = await self.document_repo.list_all()
        logger.debug(f"Listed {len(documents)} documents")
        return documents
