"""
PNG Character Card Codec
========================

Facade composing the chunk reader, the character chunk codec and the
chunk writer into ``parse`` and ``generate``.

Every call builds a fresh chunk stream; nothing is cached between calls.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from chara_card.config import CodecConfig
from chara_card.png import (
    TYPE_tEXt,
    ChunkReader,
    ChunkWriter,
    PngInvalidCharacterError,
    split_text_chunk,
)
from .character_chunk import CharacterChunkCodec

logger = logging.getLogger(__name__)


@dataclass
class ChunkInfo:
    """Summary of one chunk for inspection output."""
    type: str
    length: int
    crc: int
    keyword: Optional[str] = None


class PngCodec:
    """Embed and extract character card JSON in PNG images."""

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()
        self.character_codec = CharacterChunkCodec(self.config)

    def parse(self, png_data: bytes) -> str:
        """
        Extract the character JSON text from a PNG.

        Raises:
            PngFormatError, PngDecodeError, PngMissingCharacterError,
            PngInvalidCharacterError
        """
        stream = ChunkReader.read(png_data)
        return self.character_codec.extract(stream)

    def generate(self, png_data: bytes, json_text: str) -> bytes:
        """
        Return a copy of the PNG with its character chunk set to json_text.

        Format and decode errors in the input image propagate unchanged.
        """
        if not isinstance(json_text, str):
            raise TypeError(f"json_text must be str, got {type(json_text).__name__}")

        stream = ChunkReader.read(png_data)
        updated = self.character_codec.replace(stream, json_text)
        output = ChunkWriter.write(updated)

        logger.info(
            f"Generated character card: {len(stream)} chunks in, {len(updated)} chunks out, "
            f"{len(json_text)} character payload"
        )
        return output

    def inspect(self, png_data: bytes) -> List[ChunkInfo]:
        """List every chunk with its length, CRC and tEXt keyword."""
        infos = []
        for chunk in ChunkReader.read(png_data):
            keyword = None
            if chunk.type == TYPE_tEXt:
                keyword = split_text_chunk(chunk.data)[0].decode('latin-1')
            infos.append(ChunkInfo(chunk.type_name, chunk.length, chunk.crc, keyword))
        return infos

    def read_card(self, png_data: bytes) -> Dict[str, Any]:
        """Parse the embedded card and decode it into a dict."""
        text = self.parse(png_data)
        try:
            card = json.loads(text)
        except json.JSONDecodeError as e:
            raise PngInvalidCharacterError(f"Character data is not valid JSON: {e}") from e
        if not isinstance(card, dict):
            raise PngInvalidCharacterError(
                f"Character data must be a JSON object, got {type(card).__name__}"
            )
        return card

    def write_card(self, png_data: bytes, card: Dict[str, Any]) -> bytes:
        """Serialize a card dict compactly and embed it."""
        json_text = json.dumps(card, ensure_ascii=False, separators=(',', ':'))
        return self.generate(png_data, json_text)

    def parse_file(self, png_path: Union[str, Path]) -> str:
        """Read a PNG file and extract its character JSON."""
        return self.parse(Path(png_path).read_bytes())

    def generate_file(
        self,
        image_path: Union[str, Path],
        json_text: str,
        output_path: Union[str, Path]
    ) -> Path:
        """
        Embed json_text into the image at image_path and write the result.

        The output is only written after generation succeeds.
        """
        output_path = Path(output_path)
        png_data = self.generate(Path(image_path).read_bytes(), json_text)
        output_path.write_bytes(png_data)
        logger.info(f"Saved character card to {output_path}")
        return output_path


_default_codec = PngCodec()


def parse(png_data: bytes) -> str:
    """Extract character JSON text using the default configuration."""
    return _default_codec.parse(png_data)


def generate(png_data: bytes, json_text: str) -> bytes:
    """Embed character JSON text using the default configuration."""
    return _default_codec.generate(png_data, json_text)
