"""
Character Card System
====================

Character card JSON embedded in PNG images as a base64 tEXt chunk.

Supports:
- Extracting the card JSON from a PNG
- Embedding or replacing the card JSON without touching image data
- Detecting V1, V2 and V3 card specs
"""

from .character_chunk import CharacterChunkCodec
from .format_detector import CardSpec, FormatDetector
from .png_codec import ChunkInfo, PngCodec, generate, parse

__all__ = [
    'CharacterChunkCodec',
    'CardSpec',
    'FormatDetector',
    'ChunkInfo',
    'PngCodec',
    'generate',
    'parse',
]
