"""
localvec: a persistent local vector store with exact cosine search.
"""

from .core.config import VERSION
from .core.errors import StorageError, OpenFailed, WriteFailed, ReadFailed
from .core.search_service import SemanticIndex
from .vector import LocalVectorStore, Record, Hit, cosine, IEmbeddingProvider, EmbeddingError

__version__ = VERSION

__all__ = [
    'LocalVectorStore',
    'Record',
    'Hit',
    'cosine',
    'SemanticIndex',
    'IEmbeddingProvider',
    'EmbeddingError',
    'StorageError',
    'OpenFailed',
    'WriteFailed',
    'ReadFailed'
]
