from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    app_env: str = "development"
    host: str = "localhost"
    port: int = 4000
    log_level: str = "INFO"
    
    # Document store
    document_store_backend: Literal["memory", "file"] = "memory"
    document_store_path: Path = Path("data/documents")
    documents_seed_path: Optional[Path] = None
    max_document_size_kb: int = 1024  # Maximum document content size in KB
    
    @property
    def max_document_size_bytes(self) -> int:
        return self.max_document_size_kb * 1024
    
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
