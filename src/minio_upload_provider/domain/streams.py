"""Turns readable streams into in-memory buffers."""

import asyncio
from typing import Any

CHUNK_SIZE = 64 * 1024


def is_async_stream(stream: Any) -> bool:
    return hasattr(stream, "__aiter__")


def _as_bytes(chunk: Any) -> bytes:
    if not isinstance(chunk, (bytes, bytearray, memoryview)):
        raise TypeError(f"Stream yielded {type(chunk).__name__}, expected bytes")
    return bytes(chunk)


def _read_all(stream: Any) -> bytes:
    chunks = []
    while chunk := stream.read(CHUNK_SIZE):
        chunks.append(_as_bytes(chunk))
    return b"".join(chunks)


async def materialize(stream: Any) -> bytes:
    """
    Reads a stream to completion and returns its bytes in arrival order.

    Accepts async iterables of byte chunks and blocking binary file-like
    objects. Blocking reads run in a worker thread. Errors raised by the
    stream propagate unchanged; text chunks raise ``TypeError``.
    """
    if is_async_stream(stream):
        return b"".join([_as_bytes(chunk) async for chunk in stream])
    return await asyncio.to_thread(_read_all, stream)
