"""
Обработчики записей.
"""

from chunkstream.logging_config import get_logger


class LoggingRecordHandler:
    """Пишет каждую запись в лог как текст вместе с её размером."""

    def __init__(self, encoding: str = "utf-8", logger_name: str = "chunkstream.handler"):
        self.encoding = encoding
        self.logger = get_logger(logger_name)

    def __call__(self, record: bytes) -> None:
        text = record.decode(self.encoding, errors="replace")
        self.logger.info(f"Text: {text}, size: [{len(record)}] characters")
