"""
Разделители записей для чанкера.

Поддерживает:
- newline: запись заканчивается переводом строки
- byte: запись заканчивается байтом из DELIMITER_BYTE
"""

from typing import Callable, Dict

from chunkstream.contracts import Delimiter
from chunkstream.logging_config import get_logger
from chunkstream.settings import settings

from .byte_delimiter import NEWLINE, ByteDelimiter, delimit_by_newline, strip_separator

logger = get_logger("chunkstream.delimiter")


# Реестр доступных разделителей
DELIMITERS: Dict[str, Callable[[], Delimiter]] = {
    "newline": lambda: delimit_by_newline,
    "byte": lambda: ByteDelimiter(settings.DELIMITER_BYTE),
}


def build_delimiter() -> Delimiter:
    """Создаёт разделитель на основе настроек."""
    backend = settings.DELIMITER_BACKEND

    if backend not in DELIMITERS:
        logger.warning(f"Unknown delimiter '{backend}', falling back to newline")
        backend = "newline"

    delimiter = DELIMITERS[backend]()
    logger.info(f"Using {backend} delimiter | separator={delimiter.separator!r}")
    return delimiter


__all__ = [
    "NEWLINE",
    "ByteDelimiter",
    "delimit_by_newline",
    "strip_separator",
    "DELIMITERS",
    "build_delimiter",
]
