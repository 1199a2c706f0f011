"""Configuration Pydantic models -- pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class ConversionConfig(BaseModel):
    model: str
    source_language: str
    target_language: str
    target_extension: str
    instructions_file: str
    response_file: str

    @field_validator('target_extension')
    @classmethod
    def _ensure_leading_dot(cls, value: str) -> str:
        if not value or value == '.':
            raise ValueError('target_extension must not be empty')
        if '/' in value or '\\' in value:
            raise ValueError(f'target_extension must not contain a path separator: {value!r}')
        return value if value.startswith('.') else f'.{value}'


class AppConfig(BaseModel):
    conversion: ConversionConfig
