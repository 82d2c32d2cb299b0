"""Pydantic schemas (DTOs) for the documents API."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime


class Document(BaseModel):
    """A document as exchanged over the API."""
    
    filename: str = Field(..., min_length=1, max_length=255, description="Unique document name")
    content: str = Field("", description="Document body")


class ExtendedDocument(Document):
    """Request schema for adding a document.
    
    Carries client-side fields that are accepted but not stored.
    """
    
    title: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    
    class Config:
        json_schema_extra = {
            "example": {
                "filename": "notes.md",
                "content": "# Meeting notes",
                "title": "Weekly sync",
                "tags": ["meetings"],
                "metadata": {"source": "editor"}
            }
        }


def document_of_extended_document(document: ExtendedDocument) -> Document:
    """Derive a plain Document, discarding the extended fields."""
    return Document(filename=document.filename, content=document.content)


class DocumentResponse(BaseModel):
    """Response model for a stored document."""
    filename: str
    content: str
    size: int
    created_at: datetime

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""
    error: str
    error_code: str
    details: dict = Field(default_factory=dict)
