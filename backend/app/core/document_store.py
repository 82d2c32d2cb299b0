"""Construction and seeding of the document store."""

import json
from pathlib import Path

from app.core.config import Settings
from app.core.logger import get_logger
from app.features.documents.domain.repository_interface import DocumentRepository
from app.features.documents.domain.value_objects import NewDocument
from app.features.documents.domain.entities import DocumentRecord
from app.features.documents.infrastructure.document_repository_file import DocumentRepositoryFile
from app.features.documents.infrastructure.document_repository_memory import DocumentRepositoryMemory
from app.shared.exceptions import DocumentConflictError, ValidationError

logger = get_logger(__name__)


def build_document_repository(settings: Settings) -> DocumentRepository:
    """Create the repository selected by ``document_store_backend``."""
    if settings.document_store_backend == "file":
        return DocumentRepositoryFile(settings.document_store_path)
    return DocumentRepositoryMemory()


def _read_seed_file(seed_path: Path) -> list:
    try:
        with Path(seed_path).open("r", encoding="utf-8") as fh:
            entries = json.load(fh)
    except (OSError, ValueError) as e:
        raise ValidationError(f"Could not read seed file {seed_path}: {e}")

    if not isinstance(entries, list):
        raise ValidationError(f"Seed file {seed_path} must contain a JSON array")
    return entries


def _seed_document(entry, seed_path: Path) -> NewDocument:
    if not isinstance(entry, dict):
        raise ValidationError(f"Invalid seed entry in {seed_path}: {entry!r}")
    filename = entry.get("filename")
    content = entry.get("content", "")
    if not isinstance(filename, str):
        raise ValidationError(f"Seed entry filename must be a string in {seed_path}: {entry!r}")
    if not isinstance(content, str):
        raise ValidationError(f"Seed entry content must be a string in {seed_path}: {entry!r}")
    return NewDocument(filename=filename, content=content)


async def load_seed_documents(repository: DocumentRepository, seed_path: Path, max_size_bytes: int) -> int:
    """
    Add the documents listed in a JSON seed file.
    
    The file holds an array of ``{"filename": ..., "content": ...}`` objects.
    Every entry is checked before anything is stored. Filenames already
    present in the repository are skipped.
    
    Returns:
        Number of documents added
    """
    entries = _read_seed_file(seed_path)
    documents = [_seed_document(entry, seed_path) for entry in entries]
    for document in documents:
        document.validate_size(max_size_bytes)

    added = 0
    for document in documents:
        try:
            await repository.add(DocumentRecord(filename=document.filename, content=document.content))
            added += 1
        except DocumentConflictError:
            logger.warning(f"Seed document {document.filename} already stored, skipping")

    logger.info(f"Loaded {added} seed documents from {seed_path}")
    return added
