"""
SemanticIndex: text in, hits out, with injected store and embedding provider.
"""

import pytest
from unittest.mock import MagicMock
from localvec.core.search_service import SemanticIndex
from localvec.core.errors import ReadFailed
from localvec.vector.embeddings import IEmbeddingProvider, EmbeddingError
from localvec.vector.store import LocalVectorStore


class KeywordEmbedding(IEmbeddingProvider):
    """Toy provider: one dimension per known keyword."""

    KEYWORDS = ["mail", "web", "shortcut", "open"]

    def embed_text(self, text):
        words = text.lower().split()
        return [float(words.count(k)) for k in self.KEYWORDS]

    def get_dimension(self):
        return len(self.KEYWORDS)


@pytest.fixture
def store(tmp_path):
    s = LocalVectorStore(str(tmp_path / "vectors.db"))
    yield s
    s.close()


def test_index_and_search(store):
    """Test that indexed text is found by a related query."""
    index = SemanticIndex(store, KeywordEmbedding())
    mail_id = index.index_text("search mail for invoices", metadata='{"intent": "mail"}')
    index.index_text("open web page")
    index.index_text("run shortcut")

    hits = index.search("find mail", top_k=1)

    assert len(hits) == 1
    assert hits[0].id == mail_id
    assert hits[0].text == "search mail for invoices"
    assert hits[0].score == pytest.approx(1.0)


def test_search_default_top_k(store, monkeypatch):
    monkeypatch.delenv("LOCALVEC_TOP_K", raising=False)
    index = SemanticIndex(store, KeywordEmbedding())
    for i in range(7):
        index.index_text(f"mail {i}")
    assert len(index.search("mail")) == 5


def test_search_top_k_from_environment(store, monkeypatch):
    monkeypatch.setenv("LOCALVEC_TOP_K", "2")
    index = SemanticIndex(store, KeywordEmbedding())
    for i in range(4):
        index.index_text(f"web {i}")
    assert len(index.search("web")) == 2


def test_index_text_passes_metadata(store):
    index = SemanticIndex(store, KeywordEmbedding())
    index.index_text("open mail", metadata="meta")
    assert store.records()[0].metadata == "meta"


def test_provider_failure_wrapped_and_nothing_stored(store):
    """Test that a failing provider raises EmbeddingError and stores nothing."""
    provider = MagicMock(spec=IEmbeddingProvider)
    provider.embed_text.side_effect = RuntimeError("model unavailable")
    index = SemanticIndex(store, provider)

    with pytest.raises(EmbeddingError) as exc_info:
        index.index_text("anything")
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert store.count() == 0

    with pytest.raises(EmbeddingError):
        index.search("anything")


def test_provider_embedding_error_not_rewrapped(store):
    provider = MagicMock(spec=IEmbeddingProvider)
    original = EmbeddingError("empty text")
    provider.embed_text.side_effect = original
    index = SemanticIndex(store, provider)

    with pytest.raises(EmbeddingError) as exc_info:
        index.search("")
    assert exc_info.value is original


def test_store_errors_propagate():
    """Test that storage failures reach the caller unchanged."""
    store = MagicMock()
    store.query.side_effect = ReadFailed("scan failed", "x.db")
    provider = MagicMock()
    provider.embed_text.return_value = [0.1] * 4

    index = SemanticIndex(store, provider)

    with pytest.raises(ReadFailed):
        index.search("query", top_k=3)
    store.query.assert_called_once_with([0.1] * 4, k=3)
