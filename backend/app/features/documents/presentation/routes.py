"""API routes for the documents feature."""

from fastapi import APIRouter, Depends, Request, Response, status
from typing import List
from urllib.parse import quote

from app.core.config import Settings
from app.features.documents.application.add_document import AddDocument
from app.features.documents.application.get_document import GetDocument
from app.features.documents.application.list_documents import ListDocuments
from app.features.documents.domain.entities import DocumentRecord
from app.features.documents.domain.repository_interface import DocumentRepository
from app.features.documents.domain.value_objects import NewDocument
from app.features.documents.presentation.schemas import (
    DocumentResponse,
    ErrorResponse,
    ExtendedDocument,
    document_of_extended_document,
)


# --- Dependency Injection Setup ---

def get_settings(request: Request) -> Settings:
    """Dependency to provide the settings the app was created with."""
    return request.app.state.settings


def get_document_repository(request: Request) -> DocumentRepository:
    """Dependency to provide the app's document repository."""
    return request.app.state.document_repository


def get_list_use_case(repo: DocumentRepository = Depends(get_document_repository)) -> ListDocuments:
    return ListDocuments(repo)


def get_document_use_case(repo: DocumentRepository = Depends(get_document_repository)) -> GetDocument:
    return GetDocument(repo)


def get_add_use_case(
    repo: DocumentRepository = Depends(get_document_repository),
    settings: Settings = Depends(get_settings),
) -> AddDocument:
    """Dependency to provide the AddDocument use case with the configured size limit."""
    return AddDocument(document_repo=repo, max_size_bytes=settings.max_document_size_bytes)

# --- End of Dependency Injection ---


router = APIRouter(tags=["Documents"])


def _to_document_response(record: DocumentRecord) -> DocumentResponse:
    """Convert DocumentRecord to DocumentResponse."""
    return DocumentResponse.model_validate(record)


@router.get("/documents", response_model=List[DocumentResponse])
async def get_documents(use_case: ListDocuments = Depends(get_list_use_case)):
    """Lists all stored documents in insertion order."""
    records = await use_case.execute()
    return [_to_document_response(record) for record in records]


@router.get(
    "/document/{file_name}",
    response_model=DocumentResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_document(file_name: str, use_case: GetDocument = Depends(get_document_use_case)):
    """Fetches one document by its exact filename."""
    record = await use_case.execute(file_name)
    return _to_document_response(record)


@router.post(
    "/documents",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def add_document(
    body: ExtendedDocument,
    response: Response,
    use_case: AddDocument = Depends(get_add_use_case),
):
    """
    Adds a new document.
    
    Extended fields in the body are accepted and dropped before storage.
    A filename that is already stored is rejected with 409.
    """
    document = document_of_extended_document(body)
    record = await use_case.execute(NewDocument(filename=document.filename, content=document.content))
    response.headers["Location"] = f"/api/document/{quote(record.filename, safe='')}"
    return _to_document_response(record)
