"""
Embedding blob encoding: packed little-endian float32.
"""

import struct
import pytest
import numpy as np
from localvec.vector.codec import encode_embedding, decode_embedding, EmbeddingDecodeError


def test_encode_is_little_endian_float32():
    """Test the exact byte layout of an encoded embedding."""
    blob = encode_embedding([1.0, -2.5, 0.0])
    assert blob == struct.pack("<3f", 1.0, -2.5, 0.0)
    assert len(blob) == 12


def test_encode_empty_embedding():
    assert encode_embedding([]) == b""


def test_decode_reads_existing_blob_layout():
    blob = struct.pack("<2f", 0.25, 3.0)
    vec = decode_embedding(blob)
    assert vec.dtype == np.float32
    assert vec.tolist() == [0.25, 3.0]


def test_float32_bits_survive():
    """Test that float32 values come back bit-identical."""
    values = np.array([0.1, 1e-30, -3.4e38, 7.0], dtype=np.float32)
    decoded = decode_embedding(encode_embedding(values))
    assert decoded.tobytes() == values.tobytes()


def test_decode_empty_blob():
    assert decode_embedding(b"").shape == (0,)


def test_decode_rejects_missing_blob():
    with pytest.raises(EmbeddingDecodeError):
        decode_embedding(None)


def test_decode_ignores_trailing_partial_float():
    """Test that the float count is the blob length divided by 4, rounded down."""
    assert decode_embedding(b"\x00\x00\x80").shape == (0,)
    assert decode_embedding(b"\x00\x00\x80\x3f\x00").tolist() == [1.0]
    assert decode_embedding(struct.pack("<2f", 2.0, -1.0) + b"\xff\xff\xff").tolist() == [2.0, -1.0]


def test_decode_accepts_memoryview():
    assert decode_embedding(memoryview(struct.pack("<f", 0.5))).tolist() == [0.5]


def test_decode_rejects_text_value():
    with pytest.raises(EmbeddingDecodeError):
        decode_embedding("not a blob")


@pytest.mark.parametrize("value", [None, "12", b"\x00\x00\x80\x3f", 5.0, 3])
def test_encode_rejects_non_sequences(value):
    """Test that None, strings and scalars are not packed as embeddings."""
    with pytest.raises((TypeError, ValueError)):
        encode_embedding(value)


def test_encode_rejects_nested_sequences():
    with pytest.raises(ValueError):
        encode_embedding([[1.0, 2.0], [3.0, 4.0]])


def test_encode_accepts_numpy_and_tuples():
    assert encode_embedding(np.array([1.0], dtype=np.float64)) == struct.pack("<f", 1.0)
    assert encode_embedding((1.0, 2.0)) == struct.pack("<2f", 1.0, 2.0)
