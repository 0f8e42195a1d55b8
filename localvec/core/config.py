"""
Configuration for the local vector store, read from the environment.
"""

import os
from pathlib import Path
from typing import List

# Database path configuration
DB_PATH = os.getenv("LOCALVEC_DB_PATH", "./data/vectors.db")

# Hits returned by a query when the caller gives no k; LOCALVEC_TOP_K overrides it for SemanticIndex
DEFAULT_TOP_K = 5

# Debug logging (default disabled)
DEBUG = os.getenv("LOCALVEC_DEBUG", "false").lower() == "true"

# Validate insert arguments with pydantic before binding (default disabled)
SCHEMA_VALIDATION_STRICT = os.getenv("LOCALVEC_SCHEMA_VALIDATION_STRICT", "false").lower() == "true"

# Version string
VERSION = "1.0.0"

MEMORY_PATH = ":memory:"


def get_db_path() -> str:
    """Get the configured database path."""
    return os.getenv("LOCALVEC_DB_PATH", DB_PATH)


def get_default_top_k() -> int:
    """Get the default number of hits per query."""
    return int(os.getenv("LOCALVEC_TOP_K", str(DEFAULT_TOP_K)))


def debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.getenv("LOCALVEC_DEBUG", str(DEBUG)).lower() == "true"


def schema_validation_strict() -> bool:
    """Check if strict insert validation is enabled."""
    return os.getenv("LOCALVEC_SCHEMA_VALIDATION_STRICT", str(SCHEMA_VALIDATION_STRICT)).lower() == "true"


def ensure_db_directory(path: str) -> None:
    """Ensure the directory holding the database file exists."""
    if path == MEMORY_PATH:
        return
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def get_store(path: str = None):
    """Open the store at `path`, or at the configured path when none is given."""
    from localvec.vector.store import LocalVectorStore
    return LocalVectorStore(path or get_db_path())


def validate_config() -> List[str]:
    """Validate configuration and return any issues."""
    issues = []

    if not get_db_path().strip():
        issues.append("LOCALVEC_DB_PATH must not be empty")

    try:
        top_k = get_default_top_k()
    except ValueError:
        issues.append(f"Invalid LOCALVEC_TOP_K: {os.getenv('LOCALVEC_TOP_K')}")
    else:
        if top_k < 1:
            issues.append("LOCALVEC_TOP_K must be >= 1")

    return issues
