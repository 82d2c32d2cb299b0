"""File-backed implementation of the DocumentRepository interface.

Each document lives in ``<directory>/<sha256 of filename>.json`` and the JSON
keeps the real filename, so on-disk names stay short whatever the document is
called. Creation uses exclusive open mode, so a document that already exists
on disk is never overwritten even if another process writes to the same
directory.
"""

import asyncio
import json
from pathlib import Path
from typing import List

from app.features.documents.domain.entities import DocumentRecord
from app.features.documents.domain.repository_interface import DocumentRepository
from app.shared.exceptions import DocumentConflictError, DocumentNotFoundError, RepositoryError
from app.shared.helpers import generate_hash, is_valid_filename
from app.core.logger import get_logger


logger = get_logger(__name__)

FILE_SUFFIX = ".json"


def document_file_name(filename: str) -> str:
    """On-disk name of the file holding the document called ``filename``."""
    return f"{generate_hash(filename)}{FILE_SUFFIX}"


# --- Mappers between domain entities and stored JSON ---

def _to_document_entity(path: Path) -> DocumentRecord:
    """Reads a stored JSON file into a DocumentRecord."""
    try:
        with path.open("r", encoding="utf-8") as fh:
            return DocumentRecord.from_dict(json.load(fh))
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise RepositoryError(f"Error reading document file {path.name}: {e}")


def _write_document_file(path: Path, record: DocumentRecord) -> None:
    """Writes a DocumentRecord to a new file, failing if the file exists."""
    try:
        with path.open("x", encoding="utf-8") as fh:
            json.dump(record.to_dict(), fh, ensure_ascii=False)
    except FileExistsError:
        raise DocumentConflictError(record.filename)
    except OSError as e:
        raise RepositoryError(f"Error saving document {record.filename}: {e}")


class DocumentRepositoryFile(DocumentRepository):
    """Directory-backed repository for documents."""

    backend_name = "file"

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._lock = asyncio.Lock()
        logger.info(f"File document store at {self.directory.resolve()}")

    def path_for(self, filename: str) -> Path:
        return self.directory / document_file_name(filename)

    def _document_files(self) -> List[Path]:
        return [p for p in self.directory.iterdir() if p.is_file() and p.name.endswith(FILE_SUFFIX)]

    def _read_all(self) -> List[DocumentRecord]:
        records = [_to_document_entity(path) for path in self._document_files()]
        records.sort(key=lambda r: (r.created_at, r.filename))
        return records

    def _read_one(self, filename: str) -> DocumentRecord:
        path = self.path_for(filename)
        if not path.is_file():
            raise DocumentNotFoundError(filename)
        record = _to_document_entity(path)
        if record.filename != filename:
            raise RepositoryError(f"Document file {path.name} holds {record.filename!r}, expected {filename!r}")
        return record

    async def _run(self, func, *args):
        # Blocking file I/O runs in the default executor
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, func, *args)

    async def list_all(self) -> List[DocumentRecord]:
        """Lists all documents ordered by creation time."""
        return await self._run(self._read_all)

    async def get_by_filename(self, filename: str) -> DocumentRecord:
        """Finds a document by its filename."""
        if not is_valid_filename(filename):
            raise DocumentNotFoundError(filename)
        return await self._run(self._read_one, filename)

    async def add(self, record: DocumentRecord) -> DocumentRecord:
        """Creates the document file; rejects filenames already on disk."""
        async with self._lock:
            await self._run(_write_document_file, self.path_for(record.filename), record)
        return record

    async def count(self) -> int:
        files = await self._run(self._document_files)
        return len(files)
