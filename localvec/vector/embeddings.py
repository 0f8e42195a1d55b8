"""
Embedding producer boundary. The store never computes embeddings; callers
inject an implementation of IEmbeddingProvider where text must be embedded.
"""

from abc import ABC, abstractmethod
from typing import List


class EmbeddingError(Exception):
    """The embedding provider could not embed the given text."""


class IEmbeddingProvider(ABC):
    """Abstract interface for embedding providers."""

    @abstractmethod
    def embed_text(self, text: str) -> List[float]:
        """Generate embedding vector for given text."""
        pass

    @abstractmethod
    def get_dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        pass
