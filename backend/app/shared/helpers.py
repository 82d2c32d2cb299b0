"""Shared helper functions."""

import hashlib
from datetime import datetime, timezone


MAX_FILENAME_LENGTH = 255
UNSAFE_FILENAME_CHARS = ['/', '\\', '\x00']


def current_timestamp() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


def generate_hash(content: str) -> str:
    """Generate SHA-256 hash of content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def content_size(content: str) -> int:
    """Size of text content in bytes once UTF-8 encoded."""
    return len(content.encode("utf-8"))


def bytes_to_kb(size_bytes: int) -> float:
    """Convert bytes to kilobytes."""
    return round(size_bytes / 1024, 2)


def filename_problem(filename: str) -> str | None:
    """Describe why a filename cannot be stored, or None if it is acceptable."""
    if not isinstance(filename, str):
        return "filename must be a string"
    if not filename or not filename.strip():
        return "filename is required"
    if len(filename) > MAX_FILENAME_LENGTH:
        return f"filename must be at most {MAX_FILENAME_LENGTH} characters"
    if filename in (".", ".."):
        return "filename cannot be '.' or '..'"
    for char in UNSAFE_FILENAME_CHARS:
        if char in filename:
            return f"filename contains an unsupported character: {char!r}"
    return None


def is_valid_filename(filename: str) -> bool:
    """Check if a filename can be used as a document key."""
    return filename_problem(filename) is None
