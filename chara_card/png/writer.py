"""
PNG Chunk Writer
================

Serializes a chunk stream back into PNG bytes.
"""

import struct
from typing import Iterable

from .chunks import PNG_SIGNATURE, Chunk

_UINT32 = struct.Struct('>I')


class ChunkWriter:
    """Serialize chunks into a PNG byte buffer."""

    @staticmethod
    def write(chunks: Iterable[Chunk]) -> bytes:
        """
        Emit the signature followed by each chunk in order.

        Lengths and CRCs are computed from chunk data. Chunk ordering is
        not validated.
        """
        parts = [PNG_SIGNATURE]
        for chunk in chunks:
            parts.append(_UINT32.pack(chunk.length))
            parts.append(chunk.type)
            parts.append(chunk.data)
            parts.append(_UINT32.pack(chunk.crc))
        return b''.join(parts)
