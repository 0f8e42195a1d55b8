"""
Value types for stored records and query hits.
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass
class Record:
    """A stored text-embedding pair."""

    id: int
    """Store-assigned identifier, strictly increasing and never reused"""

    text: str
    """The original text"""

    embedding: np.ndarray
    """The embedding as float32 values"""

    metadata: Optional[str] = None
    """Caller-encoded metadata, None when absent"""

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        return (
            self.id == other.id
            and self.text == other.text
            and self.metadata == other.metadata
            and np.array_equal(self.embedding, other.embedding)
        )


@dataclass
class Hit:
    """A query result. Not persisted."""

    id: int
    text: str
    score: float
