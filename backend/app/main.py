from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.core.document_store import build_document_repository, load_seed_documents
from app.core.error_handlers import register_error_handlers
from app.core.logger import get_logger, setup_logging
from app.features.documents.domain.repository_interface import DocumentRepository
from app.api_router import api_router

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[DocumentRepository] = None,
) -> FastAPI:
    """Build the API application.
    
    Args:
        settings: Settings to run with, defaults to the environment-loaded ones
        repository: Document repository to serve, built from settings when omitted
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)
    if repository is None:
        repository = build_document_repository(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handles application startup and shutdown events."""
        logger.info(f"Application startup ({repository.backend_name} document store)...")
        
        if settings.documents_seed_path:
            await load_seed_documents(
                repository, settings.documents_seed_path, settings.max_document_size_bytes
            )
        
        yield
        
        logger.info("Application shutdown...")

    app = FastAPI(
        title="Document Store API",
        description="List, fetch and add documents keyed by filename",
        version="0.1.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.document_repository = repository

    register_error_handlers(app)

    # Include the single, aggregated API router with a global prefix
    app.include_router(api_router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def read_root():
        """Root endpoint for health checks."""
        return {"status": "ok"}

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Health check endpoint that includes document store status."""
        repo: DocumentRepository = request.app.state.document_repository
        return {
            "status": "ok",
            "document_store": repo.backend_name,
            "documents": await repo.count(),
        }

    return app


app = create_app()
