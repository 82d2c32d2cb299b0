"""Value objects for the documents feature."""

from dataclasses import dataclass

from app.shared.helpers import bytes_to_kb, content_size, filename_problem
from app.shared.exceptions import ValidationError


@dataclass(frozen=True)
class NewDocument:
    """Value object representing a document submitted for storage."""
    
    filename: str
    content: str
    
    def __post_init__(self):
        """Validate the submitted document."""
        self._validate_filename()
    
    def _validate_filename(self) -> None:
        """Validate the filename can be used as a document key."""
        problem = filename_problem(self.filename)
        if problem:
            raise ValidationError(problem, details={"filename": self.filename})
    
    def validate_size(self, max_size_bytes: int) -> None:
        """Validate content size against an upper bound."""
        size = content_size(self.content)
        if size > max_size_bytes:
            raise ValidationError(
                f"Document size {bytes_to_kb(size)}KB exceeds maximum allowed size of "
                f"{bytes_to_kb(max_size_bytes)}KB",
                details={"filename": self.filename, "size": size},
            )
