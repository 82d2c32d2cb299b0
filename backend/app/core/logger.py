import logging
import sys
from typing import Optional

from app.core.config import settings


_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging.
    
    Safe to call again with a different level; the console handler is only
    installed once.
    """
    global _console_handler
    log_level = getattr(logging, (level or settings.log_level).upper())
    
    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    if _console_handler is None:
        # Create formatter
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        
        # Create console handler
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(formatter)
        root_logger.addHandler(_console_handler)
    
    # Set specific logger levels
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    
    # Application logger
    logging.getLogger("document_store").setLevel(log_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance."""
    if name is None:
        name = "document_store"
    return logging.getLogger(name)


# Initialize logging on import
setup_logging()
