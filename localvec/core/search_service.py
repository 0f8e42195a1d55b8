"""
Text-level indexing and search: embeds text with an injected provider and
stores or queries the result in an injected store.
"""

from typing import List, Optional

from .config import get_default_top_k
from ..util.logging import logger
from ..vector.embeddings import EmbeddingError, IEmbeddingProvider
from ..vector.store import LocalVectorStore
from ..vector.types import Hit


class SemanticIndex:
    """
    Pairs a LocalVectorStore with an embedding provider.

    Both collaborators are passed in; nothing here reaches for a global
    store or model.
    """

    def __init__(self, store: LocalVectorStore, embedding_provider: IEmbeddingProvider):
        self.store = store
        self.embedding_provider = embedding_provider

    def _embed(self, text: str) -> List[float]:
        try:
            return self.embedding_provider.embed_text(text)
        except EmbeddingError:
            raise
        except Exception as e:
            logger.log_vector_operation("embed", None, {"text": text, "error": str(e)}, status="failed")
            raise EmbeddingError(f"Unable to embed text: {e}") from e

    def index_text(self, text: str, metadata: Optional[str] = None) -> int:
        """Embed `text` and store it. Returns the new record id."""
        embedding = self._embed(text)
        return self.store.insert(text, embedding, metadata)

    def search(self, text: str, top_k: Optional[int] = None) -> List[Hit]:
        """
        Embed `text` and return the closest stored records.

        Args:
            text: The search text
            top_k: Maximum number of hits, defaults to LOCALVEC_TOP_K (5)

        Raises:
            EmbeddingError: The provider failed.
            ReadFailed: The store scan failed.
        """
        if top_k is None:
            top_k = get_default_top_k()
        embedding = self._embed(text)
        return self.store.query(embedding, k=top_k)
