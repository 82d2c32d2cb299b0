"""Domain entities for the documents feature."""

from datetime import datetime
from dataclasses import dataclass, field

from app.shared.helpers import content_size, current_timestamp


@dataclass(frozen=True)
class DocumentRecord:
    """Stored document, keyed by its unique filename."""
    
    filename: str
    content: str = ""
    created_at: datetime = field(default_factory=current_timestamp)
    
    @property
    def size(self) -> int:
        """Content size in bytes."""
        return content_size(self.content)
    
    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        return {
            "filename": self.filename,
            "content": self.content,
            "created_at": self.created_at.isoformat(),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "DocumentRecord":
        """Build a record from the dictionary produced by ``to_dict``."""
        return cls(
            filename=data["filename"],
            content=data.get("content", ""),
            created_at=datetime.fromisoformat(data["created_at"]),
        )
