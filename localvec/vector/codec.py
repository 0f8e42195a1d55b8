"""
Embedding blob codec: little-endian IEEE-754 float32 values packed contiguously.
"""

from typing import Sequence
import numpy as np

FLOAT_DTYPE = np.dtype("<f4")
FLOAT_SIZE = FLOAT_DTYPE.itemsize


class EmbeddingDecodeError(ValueError):
    """A stored embedding value is not a well-formed float32 blob."""


def encode_embedding(embedding: Sequence[float]) -> bytes:
    """Pack an embedding into its storage blob.

    The embedding must be a one-dimensional sequence of numbers; it may be
    empty. None, strings, scalars and nested sequences raise TypeError or
    ValueError.
    """
    if embedding is None:
        raise TypeError("embedding is required")
    if isinstance(embedding, (str, bytes, bytearray)):
        raise TypeError(f"embedding must be a sequence of numbers, not {type(embedding).__name__}")
    array = np.asarray(embedding, dtype=FLOAT_DTYPE)
    if array.ndim != 1:
        raise ValueError(f"embedding must be one-dimensional, got {array.ndim} dimensions")
    return array.tobytes()


def decode_embedding(blob) -> np.ndarray:
    """Unpack a storage blob into a float32 vector.

    The float count is len(blob) // 4; trailing bytes of a partial float are
    ignored. An empty blob yields an empty vector. NULL and non-blob values
    raise EmbeddingDecodeError.
    """
    if blob is None:
        raise EmbeddingDecodeError("embedding blob is missing")
    if not isinstance(blob, (bytes, bytearray, memoryview)):
        raise EmbeddingDecodeError(f"embedding is stored as {type(blob).__name__}, not a blob")
    usable = len(blob) - len(blob) % FLOAT_SIZE
    return np.frombuffer(bytes(blob[:usable]), dtype=FLOAT_DTYPE).astype(np.float32)
