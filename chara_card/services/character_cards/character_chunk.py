"""
Character Chunk Codec
=====================

Finds, decodes, builds and replaces the tEXt chunk carrying the
base64-encoded character card JSON.
"""

import base64
import binascii
import json
import logging
from typing import List, Optional

from chara_card.config import CodecConfig
from chara_card.png import (
    TYPE_IEND,
    TYPE_IHDR,
    TYPE_tEXt,
    Chunk,
    ChunkStream,
    PngInvalidCharacterError,
    PngMissingCharacterError,
)

logger = logging.getLogger(__name__)


class CharacterChunkCodec:
    """Read and write the character payload chunk of a chunk stream."""

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()
        self._prefix = self.config.keyword.encode('latin-1') + b'\x00'

    def is_character_chunk(self, chunk: Chunk) -> bool:
        return chunk.type == TYPE_tEXt and chunk.data.startswith(self._prefix)

    def find_all(self, stream: ChunkStream) -> List[Chunk]:
        return [chunk for chunk in stream if self.is_character_chunk(chunk)]

    def extract(self, stream: ChunkStream) -> str:
        """
        Decode the character payload from the first character chunk.

        Args:
            stream: Chunk stream read from a PNG

        Returns:
            The embedded JSON text, exactly as stored

        Raises:
            PngMissingCharacterError: If no character chunk exists
            PngInvalidCharacterError: If the payload is not base64, not
                UTF-8, or (with validate_json) not well-formed JSON
        """
        found = self.find_all(stream)
        if not found:
            raise PngMissingCharacterError(
                f"No tEXt chunk with keyword '{self.config.keyword}' found in PNG"
            )
        if len(found) > 1:
            logger.warning(
                f"Found {len(found)} '{self.config.keyword}' chunks, using the first"
            )

        encoded = found[0].data[len(self._prefix):]
        logger.debug(f"Found '{self.config.keyword}' chunk with {len(encoded)} bytes of base64")

        try:
            raw = base64.b64decode(encoded, validate=self.config.strict_base64)
        except binascii.Error as e:
            raise PngInvalidCharacterError(f"Character data is not valid base64: {e}") from e

        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise PngInvalidCharacterError(f"Character data is not valid UTF-8: {e}") from e

        if self.config.validate_json:
            try:
                json.loads(text)
            except json.JSONDecodeError as e:
                raise PngInvalidCharacterError(f"Character data is not valid JSON: {e}") from e

        return text

    def build(self, payload: str) -> Chunk:
        """
        Build a character chunk holding base64(UTF-8(payload)) without line breaks.

        With validate_json, a payload that ``extract`` would reject raises
        PngInvalidCharacterError here instead.
        """
        if not isinstance(payload, str):
            raise TypeError(f"Character payload must be str, got {type(payload).__name__}")
        if self.config.validate_json:
            try:
                json.loads(payload)
            except json.JSONDecodeError as e:
                raise PngInvalidCharacterError(f"Character data is not valid JSON: {e}") from e
        encoded = base64.b64encode(payload.encode('utf-8'))
        return Chunk(TYPE_tEXt, self._prefix + encoded)

    def replace(self, stream: ChunkStream, payload: str) -> ChunkStream:
        """
        Return a new stream with every character chunk removed and a single
        new one inserted.

        The new chunk goes immediately before IEND, or right after IHDR when
        ``insert_position`` is ``after_ihdr``. All other chunks keep their
        bytes and relative order.
        """
        new_chunk = self.build(payload)

        kept = [chunk for chunk in stream if not self.is_character_chunk(chunk)]
        removed = len(stream) - len(kept)
        if removed > 1:
            logger.warning(f"Removing {removed} existing '{self.config.keyword}' chunks")
        elif removed:
            logger.debug(f"Replacing existing '{self.config.keyword}' chunk")

        result = ChunkStream(kept)
        if self.config.insert_position == "after_ihdr":
            ihdr_index = result.index_of(TYPE_IHDR)
            position = 0 if ihdr_index is None else ihdr_index + 1
        else:
            iend_index = result.index_of(TYPE_IEND)
            position = len(kept) if iend_index is None else iend_index

        result.chunks.insert(position, new_chunk)
        return result
