"""
LocalVectorStore: an on-disk store of text-embedding pairs backed by a single
SQLite table, with exact top-k retrieval by cosine similarity.

Every insert appends a new row; there is no update or delete. A query scans
all rows, scores each against the query vector and returns the k best hits.
No approximate index is kept, which is fine for small and medium corpora.
"""

import math
import sqlite3
import threading
from typing import List, Optional, Sequence

import numpy as np
from pydantic import ValidationError

from ..core import db
from ..core.config import DEFAULT_TOP_K, schema_validation_strict
from ..core.errors import ReadFailed, WriteFailed
from ..util.logging import logger
from .codec import EmbeddingDecodeError, decode_embedding, encode_embedding
from .schemas import InsertRequest
from .similarity import cosine
from .types import Hit, Record

INSERT_SQL = "INSERT INTO docs (text, emb, meta) VALUES (?, ?, ?)"
SCAN_SQL = "SELECT id, text, emb FROM docs ORDER BY id"
SCAN_WITH_META_SQL = "SELECT id, text, emb, meta FROM docs ORDER BY id"


def _rank_key(hit: Hit):
    # Higher score first, NaN after every number, then lower id first
    if math.isnan(hit.score):
        return (1, 0.0, hit.id)
    return (0, -hit.score, hit.id)


class LocalVectorStore:
    """Persistent vector store bound to one SQLite file.

    The store owns its connection until close(). All operations on one
    instance are serialized by an internal lock, so an instance may be
    shared between threads.

    Usage:
        with LocalVectorStore("data/vectors.db") as store:
            store.insert("hello", [1.0, 0.0])
            hits = store.query([1.0, 0.0], k=3)
    """

    def __init__(self, path: str):
        """
        Open or create the store at `path`.

        Args:
            path: Database file path. Missing parent directories are created.

        Raises:
            OpenFailed: The file cannot be opened, is not a database, or holds
                an incompatible docs table.
        """
        self.path = path
        self._lock = threading.Lock()
        self._conn: Optional[sqlite3.Connection] = db.connect(path)

    @classmethod
    def open(cls, path: str) -> "LocalVectorStore":
        return cls(path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self) -> None:
        """Release the database handle. Safe to call more than once."""
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        logger.log_store_operation("close", self.path)

    def insert(self, text: str, embedding: Sequence[float], metadata: Optional[str] = None) -> int:
        """
        Append a record and return its id.

        Args:
            text: The original text; may be empty.
            embedding: Vector of any length, stored as float32.
            metadata: Optional caller-encoded string (e.g. JSON).

        Raises:
            WriteFailed: Validation, binding or commit failed. Nothing is stored.
        """
        if schema_validation_strict():
            try:
                InsertRequest(text=text, embedding=embedding, metadata=metadata)
            except ValidationError as e:
                logger.log_vector_operation("insert", None, {"error": str(e)}, status="failed")
                raise WriteFailed(f"Schema validation failed for insert: {e}", self.path) from e

        try:
            blob = encode_embedding(embedding)
        except (TypeError, ValueError) as e:
            logger.log_vector_operation("insert", None, {"error": str(e)}, status="failed")
            raise WriteFailed(f"Unable to encode embedding: {e}", self.path) from e

        with self._lock:
            conn = self._require_open(WriteFailed)
            try:
                # Commits on success, rolls back on error
                with conn:
                    cursor = conn.execute(INSERT_SQL, (text, blob, metadata))
                record_id = cursor.lastrowid
            except sqlite3.Error as e:
                logger.log_vector_operation("insert", None, {"text": text, "error": str(e)}, status="failed")
                raise WriteFailed(f"Unable to insert record: {e}", self.path) from e

        logger.log_vector_operation("insert", record_id, {"text": text, "dimension": len(blob) // 4})
        return record_id

    def upsert(self, text: str, embedding: Sequence[float], metadata: Optional[str] = None) -> int:
        """Same as insert(): every call appends a new row, even for repeated text."""
        return self.insert(text, embedding, metadata)

    def query(self, vector: Sequence[float], k: int = DEFAULT_TOP_K) -> List[Hit]:
        """
        Return the k records most similar to `vector`, best first.

        Every row is scored with cosine() over the common prefix of the two
        vectors. Equal scores are ordered by lower id first; NaN scores sort
        last. Rows whose embedding cannot be decoded are skipped.

        Args:
            vector: Query embedding.
            k: Maximum number of hits. k <= 0 returns an empty list
                without scanning.

        Raises:
            ReadFailed: The scan could not be executed.
        """
        if k <= 0:
            with self._lock:
                self._require_open(ReadFailed)
            return []

        query_vector = np.asarray(vector, dtype=np.float32).reshape(-1)
        hits = []
        for record_id, text, blob in self._scan(SCAN_SQL, "query"):
            try:
                stored = decode_embedding(blob)
            except EmbeddingDecodeError as e:
                logger.log_vector_operation("decode", record_id, {"error": str(e)}, status="skipped")
                continue
            hits.append(Hit(id=record_id, text=text, score=cosine(query_vector, stored)))

        hits.sort(key=_rank_key)
        top = hits[:k]
        logger.log_vector_operation("query", None, {"k": k, "scanned": len(hits), "returned": len(top)})
        return top

    def records(self) -> List[Record]:
        """Return every decodable record in id order."""
        result = []
        for record_id, text, blob, meta in self._scan(SCAN_WITH_META_SQL, "records"):
            try:
                embedding = decode_embedding(blob)
            except EmbeddingDecodeError as e:
                logger.log_vector_operation("decode", record_id, {"error": str(e)}, status="skipped")
                continue
            result.append(Record(id=record_id, text=text, embedding=embedding, metadata=meta))
        return result

    def count(self) -> int:
        """Return the number of stored rows, decodable or not."""
        with self._lock:
            conn = self._require_open(ReadFailed)
            try:
                return conn.execute("SELECT COUNT(*) FROM docs").fetchone()[0]
            except sqlite3.Error as e:
                logger.log_vector_operation("count", None, {"error": str(e)}, status="failed")
                raise ReadFailed(f"Unable to count records: {e}", self.path) from e

    def _scan(self, sql: str, operation: str) -> list:
        # Rows are fetched in full so a failed scan never yields a partial result
        with self._lock:
            conn = self._require_open(ReadFailed)
            try:
                return conn.execute(sql).fetchall()
            except sqlite3.Error as e:
                logger.log_vector_operation(operation, None, {"error": str(e)}, status="failed")
                raise ReadFailed(f"Unable to scan records: {e}", self.path) from e

    def _require_open(self, error_cls) -> sqlite3.Connection:
        if self._conn is None:
            raise error_cls("Store is closed", self.path)
        return self._conn
