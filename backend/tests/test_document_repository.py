"""
Tests for the in-memory and file-backed document repositories.
"""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timedelta, timezone

import pytest

from app.features.documents.domain.entities import DocumentRecord
from app.features.documents.infrastructure.document_repository_file import DocumentRepositoryFile
from app.features.documents.infrastructure.document_repository_memory import DocumentRepositoryMemory
from app.shared.exceptions import DocumentConflictError, DocumentNotFoundError, RepositoryError


@pytest.fixture(params=["memory", "file"])
def repo(request, tmp_path):
    if request.param == "memory":
        return DocumentRepositoryMemory()
    return DocumentRepositoryFile(tmp_path / "store")


class TestRepositoryContract:
    """Behaviour shared by every backend."""

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, repo):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            await repo.get_by_filename("nope.txt")
        assert exc_info.value.details["entity_id"] == "nope.txt"

    @pytest.mark.asyncio
    async def test_add_then_get(self, repo):
        record = DocumentRecord(filename="a.txt", content="alpha")

        await repo.add(record)
        fetched = await repo.get_by_filename("a.txt")

        assert fetched.filename == "a.txt"
        assert fetched.content == "alpha"
        assert fetched.created_at == record.created_at

    @pytest.mark.asyncio
    async def test_duplicate_add_raises_conflict_and_keeps_first(self, repo):
        await repo.add(DocumentRecord(filename="a.txt", content="first"))

        with pytest.raises(DocumentConflictError):
            await repo.add(DocumentRecord(filename="a.txt", content="second"))

        assert (await repo.get_by_filename("a.txt")).content == "first"
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, repo):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i, name in enumerate(["z.txt", "m.txt", "a.txt"]):
            await repo.add(DocumentRecord(filename=name, content=name, created_at=base + timedelta(seconds=i)))

        listed = await repo.list_all()

        assert [r.filename for r in listed] == ["z.txt", "m.txt", "a.txt"]
        assert await repo.count() == 3

    @pytest.mark.asyncio
    async def test_concurrent_adds_same_filename_single_winner(self, repo):
        async def attempt(i):
            try:
                await repo.add(DocumentRecord(filename="race.txt", content=str(i)))
                return True
            except DocumentConflictError:
                return False

        results = await asyncio.gather(*(attempt(i) for i in range(8)))

        assert results.count(True) == 1
        assert await repo.count() == 1


class TestFileRepository:

    @pytest.mark.asyncio
    async def test_documents_survive_new_instance(self, tmp_path):
        directory = tmp_path / "store"
        await DocumentRepositoryFile(directory).add(DocumentRecord(filename="kept.md", content="héllo"))

        reopened = DocumentRepositoryFile(directory)

        fetched = await reopened.get_by_filename("kept.md")
        assert fetched.content == "héllo"
        assert fetched.size == len("héllo".encode("utf-8"))

    @pytest.mark.asyncio
    async def test_existing_file_on_disk_is_not_overwritten(self, tmp_path):
        directory = tmp_path / "store"
        repo = DocumentRepositoryFile(directory)
        await repo.add(DocumentRecord(filename="x.txt", content="original"))

        other = DocumentRepositoryFile(directory)
        with pytest.raises(DocumentConflictError):
            await other.add(DocumentRecord(filename="x.txt", content="replacement"))

        stored = json.loads(repo.path_for("x.txt").read_text(encoding="utf-8"))
        assert stored["content"] == "original"

    @pytest.mark.asyncio
    async def test_corrupt_file_raises_repository_error(self, tmp_path):
        directory = tmp_path / "store"
        repo = DocumentRepositoryFile(directory)
        repo.path_for("bad.txt").write_text("{not json", encoding="utf-8")

        with pytest.raises(RepositoryError):
            await repo.get_by_filename("bad.txt")
        with pytest.raises(RepositoryError):
            await repo.list_all()

    @pytest.mark.asyncio
    async def test_unrelated_files_are_ignored(self, tmp_path):
        directory = tmp_path / "store"
        repo = DocumentRepositoryFile(directory)
        (directory / "README").write_text("not a document", encoding="utf-8")

        assert await repo.list_all() == []
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_path_like_lookup_is_not_found(self, tmp_path):
        repo = DocumentRepositoryFile(tmp_path / "store")

        with pytest.raises(DocumentNotFoundError):
            await repo.get_by_filename("../outside")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filename", ["x" * 255, "é" * 255])
    async def test_long_filenames_fit_on_disk(self, tmp_path, filename):
        repo = DocumentRepositoryFile(tmp_path / "store")

        await repo.add(DocumentRecord(filename=filename, content="long"))

        assert (await repo.get_by_filename(filename)).content == "long"
        assert [r.filename for r in await repo.list_all()] == [filename]

    @pytest.mark.asyncio
    async def test_file_holding_other_document_is_repository_error(self, tmp_path):
        repo = DocumentRepositoryFile(tmp_path / "store")
        await repo.add(DocumentRecord(filename="a.txt", content="A"))
        repo.path_for("a.txt").rename(repo.path_for("b.txt"))

        with pytest.raises(RepositoryError):
            await repo.get_by_filename("b.txt")
