"""PNG chunk reading and writing."""

from .chunks import (
    PNG_SIGNATURE,
    TYPE_IEND,
    TYPE_IHDR,
    TYPE_tEXt,
    Chunk,
    ChunkStream,
    chunk_crc,
    split_text_chunk,
)
from .errors import (
    PngDecodeError,
    PngError,
    PngErrorKind,
    PngFormatError,
    PngInvalidCharacterError,
    PngMissingCharacterError,
)
from .reader import ChunkReader
from .writer import ChunkWriter

__all__ = [
    "PNG_SIGNATURE",
    "TYPE_IEND",
    "TYPE_IHDR",
    "TYPE_tEXt",
    "Chunk",
    "ChunkStream",
    "chunk_crc",
    "split_text_chunk",
    "ChunkReader",
    "ChunkWriter",
    "PngError",
    "PngErrorKind",
    "PngFormatError",
    "PngDecodeError",
    "PngMissingCharacterError",
    "PngInvalidCharacterError",
]
