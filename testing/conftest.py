"""Shared fixtures for PNG character card tests."""

import base64
import struct
import zlib
from io import BytesIO

import pytest
from PIL import Image, PngImagePlugin

SIGNATURE = b'\x89PNG\r\n\x1a\n'


def raw_chunk(chunk_type: bytes, data: bytes, crc: int = None) -> bytes:
    """Assemble one chunk by hand, independent of the codec's writer."""
    if crc is None:
        crc = zlib.crc32(chunk_type + data) & 0xFFFFFFFF
    return struct.pack('>I', len(data)) + chunk_type + data + struct.pack('>I', crc)


def ihdr_data(width: int = 1, height: int = 1) -> bytes:
    # 8-bit RGB, no interlace
    return struct.pack('>IIBBBBB', width, height, 8, 2, 0, 0, 0)


def idat_data() -> bytes:
    # one scanline: filter byte + one RGB pixel
    return zlib.compress(b'\x00\xff\x00\x00')


def chara_data(payload: str, keyword: bytes = b'chara') -> bytes:
    return keyword + b'\x00' + base64.b64encode(payload.encode('utf-8'))


def build_png(*chunks: bytes) -> bytes:
    return SIGNATURE + b''.join(chunks)


def pillow_png(size=(1, 1), text=None) -> bytes:
    """Encode an RGB image with Pillow, optionally with tEXt entries."""
    png_info = None
    if text:
        png_info = PngImagePlugin.PngInfo()
        for key, value in text.items():
            png_info.add_text(key, value)
    output = BytesIO()
    Image.new('RGB', size, (255, 0, 0)).save(output, format='PNG', pnginfo=png_info)
    return output.getvalue()


@pytest.fixture
def minimal_png() -> bytes:
    """Hand-built 1x1 PNG: IHDR, IDAT, IEND."""
    return build_png(
        raw_chunk(b'IHDR', ihdr_data()),
        raw_chunk(b'IDAT', idat_data()),
        raw_chunk(b'IEND', b''),
    )


@pytest.fixture
def card_png() -> bytes:
    """1x1 PNG with a character chunk holding {"name":"Alice"}."""
    return build_png(
        raw_chunk(b'IHDR', ihdr_data()),
        raw_chunk(b'IDAT', idat_data()),
        raw_chunk(b'tEXt', chara_data('{"name":"Alice"}')),
        raw_chunk(b'IEND', b''),
    )
