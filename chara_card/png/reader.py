"""
PNG Chunk Reader
================

Walks a PNG byte buffer into a ``ChunkStream``, checking the signature,
chunk bounds and every chunk CRC.
"""

import logging
import struct

from .chunks import (
    CHUNK_CRC_SIZE,
    CHUNK_LENGTH_SIZE,
    CHUNK_OVERHEAD,
    CHUNK_TYPE_SIZE,
    MAX_CHUNK_LENGTH,
    PNG_SIGNATURE,
    TYPE_IEND,
    TYPE_IHDR,
    Chunk,
    ChunkStream,
    chunk_crc,
)
from .errors import PngDecodeError, PngFormatError

logger = logging.getLogger(__name__)

_UINT32 = struct.Struct('>I')


class ChunkReader:
    """Parse PNG bytes into an ordered chunk stream."""

    @staticmethod
    def read(png_data: bytes) -> ChunkStream:
        """
        Read all chunks from IHDR up to and including IEND.

        Args:
            png_data: Complete PNG file contents

        Returns:
            ChunkStream in file order

        Raises:
            PngFormatError: If the PNG signature is missing or wrong
            PngDecodeError: If a chunk is truncated, overruns the buffer,
                fails its CRC check, IHDR is not first or appears twice,
                or the stream ends before IEND
        """
        buf = memoryview(png_data)
        size = len(buf)

        if size < len(PNG_SIGNATURE) or bytes(buf[:len(PNG_SIGNATURE)]) != PNG_SIGNATURE:
            raise PngFormatError("Invalid PNG signature: input is not a PNG file")

        stream = ChunkStream()
        offset = len(PNG_SIGNATURE)

        while True:
            if size - offset < CHUNK_OVERHEAD:
                if offset == size:
                    raise PngDecodeError(f"Unexpected end of PNG data at offset {offset}: missing IEND chunk")
                raise PngDecodeError(
                    f"Truncated chunk header at offset {offset}: "
                    f"{size - offset} bytes remain, need at least {CHUNK_OVERHEAD}"
                )

            (length,) = _UINT32.unpack_from(buf, offset)
            type_start = offset + CHUNK_LENGTH_SIZE
            data_start = type_start + CHUNK_TYPE_SIZE
            data_end = data_start + length
            crc_end = data_end + CHUNK_CRC_SIZE
            chunk_type = bytes(buf[type_start:data_start])

            if length > MAX_CHUNK_LENGTH or crc_end > size:
                raise PngDecodeError(
                    f"Chunk {chunk_type!r} at offset {offset} declares length {length}, "
                    f"which overruns the buffer ({size} bytes)"
                )

            data = bytes(buf[data_start:data_end])
            (stored_crc,) = _UINT32.unpack_from(buf, data_end)
            actual_crc = chunk_crc(chunk_type, data)
            if stored_crc != actual_crc:
                raise PngDecodeError(
                    f"CRC mismatch in chunk {chunk_type!r} at offset {offset}: "
                    f"stored 0x{stored_crc:08x}, computed 0x{actual_crc:08x}"
                )

            if not stream.chunks and chunk_type != TYPE_IHDR:
                raise PngDecodeError(f"First chunk must be IHDR, found {chunk_type!r}")
            if stream.chunks and chunk_type == TYPE_IHDR:
                raise PngDecodeError(f"Duplicate IHDR chunk at offset {offset}")

            stream.chunks.append(Chunk(chunk_type, data))
            logger.debug(f"Read chunk {chunk_type!r} (length {length}) at offset {offset}")
            offset = crc_end

            if chunk_type == TYPE_IEND:
                break

        if offset < size:
            logger.warning(f"Ignoring {size - offset} bytes after IEND chunk")

        return stream
