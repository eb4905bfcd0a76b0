"""
Base Source для chunkstream

Базовый класс для всех источников потока байтов.
"""

import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import BinaryIO, ContextManager, Iterator

from chunkstream.logging_config import get_logger
from chunkstream.settings import settings

from .encoding_detector import detect_encoding


class BaseSource(ABC):
    """Базовый класс. Реализует шаблон Template Method для открытия потока."""

    def __init__(self, source_name: str):
        self.logger = get_logger(f"chunkstream.source.{source_name}")

    @contextmanager
    def open(self, path: str) -> Iterator[BinaryIO]:
        """Финальный метод: проверяет путь и открывает поток через `_open`."""
        if not os.path.exists(path):
            self.logger.error(f"File not found | path={path}")
            raise FileNotFoundError(f"File not found | path={path}")

        with self._open(path) as stream:
            yield stream

    @abstractmethod
    def _open(self, path: str) -> ContextManager[BinaryIO]:
        """Реализация открытия в наследнике."""
        raise NotImplementedError

    def detect_encoding(self, path: str) -> str:
        """Кодировка записей по первым ENCODING_SAMPLE_SIZE байтам потока."""
        with self.open(path) as stream:
            sample = stream.read(settings.ENCODING_SAMPLE_SIZE)
        encoding = detect_encoding(sample, settings.ENCODING_MIN_CONFIDENCE)
        self.logger.info(f"Detected encoding | encoding={encoding}")
        return encoding
