"""
Shared fixtures for the document store tests.

- Settings built in-process, never from the developer's .env
- A fresh repository per test, once per storage backend
- A FastAPI app and httpx client wired to that repository
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.features.documents.domain.repository_interface import DocumentRepository
from app.features.documents.infrastructure.document_repository_file import DocumentRepositoryFile
from app.features.documents.infrastructure.document_repository_memory import DocumentRepositoryMemory
from app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        host="127.0.0.1",
        port=4000,
        document_store_backend="memory",
        document_store_path=tmp_path / "documents",
        documents_seed_path=None,
        max_document_size_kb=1,
    )


@pytest.fixture(params=["memory", "file"])
def repository(request, tmp_path) -> DocumentRepository:
    if request.param == "memory":
        return DocumentRepositoryMemory()
    return DocumentRepositoryFile(tmp_path / "store")


@pytest.fixture
def app(settings, repository):
    return create_app(settings=settings, repository=repository)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
