"""
Main API router that aggregates all feature-specific routers.
"""

from fastapi import APIRouter

from app.features.documents.presentation.routes import router as documents_router

# This is the main router that will be included in the FastAPI app instance.
api_router = APIRouter()

# Documents routes own both /documents and /document/{file_name}, so no extra prefix.
api_router.include_router(documents_router)
