"""
Chara Card - PNG Character Card Codec

Reads and writes character card JSON documents embedded in PNG avatar
images as base64-encoded tEXt chunks.
"""

__version__ = "0.1.0"
