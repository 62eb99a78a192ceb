"""
PNG Chunk Model
===============

In-memory representation of a PNG chunk stream.

Length and CRC are derived from ``type`` and ``data`` on demand; the
stream is an ordered list so duplicate ancillary chunk types survive.
"""

import zlib
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'

CHUNK_LENGTH_SIZE = 4
CHUNK_TYPE_SIZE = 4
CHUNK_CRC_SIZE = 4
# length + type + crc
CHUNK_OVERHEAD = CHUNK_LENGTH_SIZE + CHUNK_TYPE_SIZE + CHUNK_CRC_SIZE

# PNG lengths are limited to 2^31 - 1
MAX_CHUNK_LENGTH = 0x7FFFFFFF

TYPE_IHDR = b'IHDR'
TYPE_IEND = b'IEND'
TYPE_tEXt = b'tEXt'


def chunk_crc(chunk_type: bytes, data: bytes) -> int:
    """CRC-32 over type and data, as stored in the chunk trailer."""
    return zlib.crc32(data, zlib.crc32(chunk_type)) & 0xFFFFFFFF


@dataclass(frozen=True)
class Chunk:
    """A single PNG chunk."""
    type: bytes
    data: bytes = b''

    def __post_init__(self):
        if len(self.type) != CHUNK_TYPE_SIZE:
            raise ValueError(f"Chunk type must be {CHUNK_TYPE_SIZE} bytes, got {self.type!r}")

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def crc(self) -> int:
        return chunk_crc(self.type, self.data)

    @property
    def type_name(self) -> str:
        return self.type.decode('latin-1')


def split_text_chunk(data: bytes) -> Tuple[bytes, bytes]:
    """
    Split tEXt chunk data into (keyword, text) at the first NUL byte.

    Data without a separator is returned as (data, b'').
    """
    keyword, _, text = data.partition(b'\x00')
    return keyword, text


@dataclass
class ChunkStream:
    """Ordered sequence of chunks following the PNG signature."""
    chunks: List[Chunk] = field(default_factory=list)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self.chunks)

    def __getitem__(self, index: int) -> Chunk:
        return self.chunks[index]

    def types(self) -> List[str]:
        return [chunk.type_name for chunk in self.chunks]

    def index_of(self, chunk_type: bytes) -> Optional[int]:
        for i, chunk in enumerate(self.chunks):
            if chunk.type == chunk_type:
                return i
        return None
