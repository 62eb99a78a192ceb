"""Pydantic models for configuration validation."""

from pathlib import Path
from typing import Optional, Literal
from pydantic import BaseModel, Field, field_validator


class CodecConfig(BaseModel):
    """Character chunk codec configuration."""

    keyword: str = Field(default="chara", min_length=1, max_length=79)
    insert_position: Literal["before_iend", "after_ihdr"] = "before_iend"
    validate_json: bool = Field(default=True, description="Reject payloads that are not well-formed JSON")
    strict_base64: bool = Field(default=True, description="Reject base64 payloads containing non-alphabet bytes")

    @field_validator('keyword')
    @classmethod
    def validate_keyword(cls, v: str) -> str:
        """PNG keywords are Latin-1 without NUL or leading/trailing spaces."""
        try:
            v.encode('latin-1')
        except UnicodeEncodeError:
            raise ValueError('keyword must be Latin-1 text')
        if '\x00' in v:
            raise ValueError('keyword must not contain NUL')
        if v != v.strip(' '):
            raise ValueError('keyword must not have leading or trailing spaces')
        return v


class LoggingConfig(BaseModel):
    """Logging configuration for the command-line tool."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Optional[Path] = None

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class AppConfig(BaseModel):
    """Top-level configuration."""

    codec: CodecConfig = Field(default_factory=CodecConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
