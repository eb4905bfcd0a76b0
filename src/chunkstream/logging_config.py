"""
Логирование для chunkstream.

Использует contextvars для маркировки всех событий одного потока единым emoji.
В production пишет JSON через python-json-logger.
"""

import logging
import random
import sys
from contextvars import ContextVar
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


# Контекстная переменная для хранения маркера текущего потока
stream_marker: ContextVar[str] = ContextVar('stream_marker', default='')

# Набор смайликов для маркировки потоков в логах
STREAM_MARKERS = [
    "🍎", "🍊", "🍋", "🍇", "🍉", "🍓", "🫐", "🍑", "🥝", "🍍",
    "🌸", "🌺", "🌻", "🌷", "🌹", "⭐", "🌟", "💫", "✨", "🔮",
    "🐱", "🐶", "🐸", "🦊", "🐼", "🐨", "🦁", "🐯", "🐻", "🐰",
]


def set_stream_marker(marker: Optional[str] = None) -> str:
    """
    Установить маркер для текущего потока.
    Если marker не указан - выбирает случайный.
    Возвращает установленный маркер.
    """
    if marker is None:
        marker = random.choice(STREAM_MARKERS)
    stream_marker.set(marker)
    return marker


def clear_stream_marker() -> None:
    """Очистить маркер потока."""
    stream_marker.set('')


def get_stream_marker() -> str:
    """Получить текущий маркер потока."""
    return stream_marker.get()


class MarkerFilter(logging.Filter):
    """Кладёт маркер потока в запись лога (поле `marker`)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.marker = stream_marker.get()
        return True


class MarkerFormatter(logging.Formatter):
    """Форматтер с поддержкой маркера потока из contextvars."""

    def format(self, record: logging.LogRecord) -> str:
        marker = getattr(record, "marker", None)
        if marker is None:
            marker = stream_marker.get()
        if not marker:
            return super().format(record)

        # Для ошибок добавляем ❌
        prefix = f"❌{marker}" if record.levelno >= logging.ERROR else marker
        original_msg = record.msg
        record.msg = f"{prefix} {record.msg}"
        try:
            return super().format(record)
        finally:
            record.msg = original_msg


def setup_logging(
    level: str = "INFO",
    environment: str = "development",
    fmt: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s",
) -> None:
    """Настроить логирование с поддержкой маркеров потоков."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Удаляем старые хендлеры
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(MarkerFilter())

    if environment == 'production':
        # JSON формат для production
        handler.setFormatter(JsonFormatter(
            '%(asctime)s %(name)s %(levelname)s %(marker)s %(message)s',
            timestamp=True
        ))
    else:
        handler.setFormatter(MarkerFormatter(fmt=fmt, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Получить логгер по имени."""
    return logging.getLogger(name)
