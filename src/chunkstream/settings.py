"""
Настройки chunkstream

Значения можно переопределить через переменные окружения или .env,
у всех полей есть разумные значения по умолчанию.
"""
import json
from typing import Annotated, List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки приложения"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Application
    APP_NAME: str = "chunkstream"
    ENVIRONMENT: str = "development"  # "development" или "production" (JSON-логи)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

    # Chunker
    CHUNK_SIZE: int = 128  # Размер одного чтения из потока в байтах
    DELIMITER_BACKEND: str = "newline"  # "newline" или "byte" (DELIMITER_BYTE)
    DELIMITER_BYTE: bytes = b"\n"

    # Inputs
    INPUT_PATHS: Annotated[List[str], NoDecode] = ["data_input_example.txt", "data_input_example.zip"]
    ZIP_ENTRY: Optional[str] = None  # None - первая запись архива

    # Encoding detection
    ENCODING_SAMPLE_SIZE: int = 10240  # 10KB достаточно для определения
    ENCODING_MIN_CONFIDENCE: float = 0.7

    @field_validator('CHUNK_SIZE')
    @classmethod
    def check_chunk_size(cls, v):
        """Размер чтения должен быть положительным."""
        if v <= 0:
            raise ValueError(f"CHUNK_SIZE must be positive, got {v}")
        return v

    @field_validator('DELIMITER_BYTE', mode='before')
    @classmethod
    def parse_delimiter_byte(cls, v):
        r"""
        Разбор разделителя: одиночный символ, escape-последовательность (\n, \t, \0)
        или код вида 0x0A.
        """
        if isinstance(v, int):
            v = bytes([v])
        elif isinstance(v, str):
            if v.lower().startswith("0x"):
                v = bytes([int(v, 16)])
            else:
                v = v.encode("latin-1", errors="backslashreplace").decode("unicode_escape").encode("latin-1")
        if len(v) != 1:
            raise ValueError(f"DELIMITER_BYTE must be exactly one byte, got {v!r}")
        return v

    @field_validator('INPUT_PATHS', mode='before')
    @classmethod
    def parse_json_list(cls, v):
        """Парсинг JSON строки или comma-separated строки в список."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [x.strip() for x in v.split(',') if x.strip()]
        return v


settings = Settings()
