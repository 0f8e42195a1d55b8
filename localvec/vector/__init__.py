"""
Local vector store: SQLite-backed text-embedding pairs with exact cosine search.
"""

# Package initialization for vector module
from .store import LocalVectorStore
from .types import Record, Hit
from .similarity import cosine
from .codec import encode_embedding, decode_embedding, EmbeddingDecodeError
from .embeddings import IEmbeddingProvider, EmbeddingError

__all__ = [
    'LocalVectorStore',
    'Record',
    'Hit',
    'cosine',
    'encode_embedding',
    'decode_embedding',
    'EmbeddingDecodeError',
    'IEmbeddingProvider',
    'EmbeddingError'
]
