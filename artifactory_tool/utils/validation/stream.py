"""
Upload payload validation.

A stream is either a binary file-like object exposing ``read()`` or an
iterable producing ``bytes`` chunks.
"""

import io
import itertools
from collections.abc import Iterable, Mapping
from typing import Any, Iterator

from ..constants import DEFAULT_CHUNK_SIZE


def is_stream(obj: Any) -> bool:
    """Check whether ``obj`` can be consumed as a sequence of bytes."""
    if obj is None:
        return False
    if callable(getattr(obj, "read", None)):
        return True
    if isinstance(obj, (str, bytes, bytearray, memoryview, Mapping)):
        return False
    return isinstance(obj, Iterable)


def is_text_stream(obj: Any) -> bool:
    """Check whether ``obj`` is a file object opened in text mode."""
    if isinstance(obj, io.TextIOBase):
        return True
    mode = getattr(obj, "mode", None)
    return isinstance(mode, str) and "b" not in mode


def _read_chunks(stream: Any, chunk_size: int) -> Iterator[Any]:
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


def iter_stream_chunks(stream: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield the content of ``stream`` as bytes chunks.

    Raises:
        TypeError: If the stream produces something other than bytes
    """
    chunks = _read_chunks(stream, chunk_size) if callable(getattr(stream, "read", None)) else stream

    for chunk in chunks:
        if isinstance(chunk, str):
            raise TypeError("Upload streams must produce bytes, got str (open files in binary mode)")
        if not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise TypeError(f"Upload streams must produce bytes, got {type(chunk).__name__}")
        yield bytes(chunk)


def open_stream_chunks(stream: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Check the first chunk of ``stream`` and return an iterator over all of it.

    The first chunk is read eagerly so a text stream or a non-bytes iterable
    is rejected before anything is sent.

    Raises:
        TypeError: If the stream is in text mode or its first chunk is not bytes
    """
    if is_text_stream(stream):
        raise TypeError("Upload streams must produce bytes, got a text stream (open files in binary mode)")

    chunks = iter_stream_chunks(stream, chunk_size)
    try:
        first = next(chunks)
    except StopIteration:
        return iter(())
    return itertools.chain([first], chunks)


__all__ = ["is_stream", "is_text_stream", "iter_stream_chunks", "open_stream_chunks"]
