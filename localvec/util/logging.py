"""
Structured operation logging for the vector store.
"""

import logging
from typing import Any, Dict

from ..core.config import debug_enabled


def _truncate(value: str, limit: int = 50) -> str:
    return value[:limit] + "..." if len(value) > limit else value


class StructuredLogger:
    """Structured logger for store and vector operations."""

    def __init__(self, name: str = "localvec"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug_enabled() else logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None, level: int = logging.INFO):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.log(level, message)

    def log_store_operation(self, operation: str, path: str, details: Dict[str, Any] = None, status: str = "success"):
        """Log a store-level operation (open, close, migrate)."""
        log_details = {"path": path}
        if details:
            log_details.update(details)

        level = logging.ERROR if status == "failed" else logging.INFO
        self.log_operation(f"store.{operation}", status, log_details, level)

    def log_vector_operation(self, operation: str, record_id: Any, details: Dict[str, Any] = None, status: str = "success"):
        """Log a vector operation. Text values are truncated, embeddings are never logged."""
        log_details = {"record_id": record_id}
        if details:
            for k, v in details.items():
                log_details[k] = _truncate(v) if isinstance(v, str) else v

        if status == "failed":
            level = logging.ERROR
        elif status == "skipped":
            level = logging.WARNING
        else:
            level = logging.INFO
        self.log_operation(f"vector.{operation}", status, log_details, level)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()
