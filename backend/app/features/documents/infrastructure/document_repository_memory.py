"""In-memory implementation of the DocumentRepository interface."""

import asyncio
from typing import Dict, List

from app.features.documents.domain.entities import DocumentRecord
from app.features.documents.domain.repository_interface import DocumentRepository
from app.shared.exceptions import DocumentConflictError, DocumentNotFoundError


class DocumentRepositoryMemory(DocumentRepository):
    """Process-local repository backed by an insertion-ordered dict."""

    backend_name = "memory"

    def __init__(self):
        self._documents: Dict[str, DocumentRecord] = {}
        self._lock = asyncio.Lock()

    async def list_all(self) -> List[DocumentRecord]:
        return list(self._documents.values())

    async def get_by_filename(self, filename: str) -> DocumentRecord:
        record = self._documents.get(filename)
        if record is None:
            raise DocumentNotFoundError(filename)
        return record

    async def add(self, record: DocumentRecord) -> DocumentRecord:
        async with self._lock:
            if record.filename in self._documents:
                raise DocumentConflictError(record.filename)
            self._documents[record.filename] = record
        return record

    async def count(self) -> int:
        return len(self._documents)
