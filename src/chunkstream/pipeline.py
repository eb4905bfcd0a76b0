"""
ProcessStream - обработка одного входного файла.

Шаги:
1. Source - выбор источника по расширению (файл или запись zip-архива)
2. Encoding - определение кодировки для обработчика
3. Chunk - чтение потока блоками и передача записей обработчику
"""

from __future__ import annotations
from dataclasses import dataclass, field

from chunkstream.contracts import Delimiter, HandlerFactory
from chunkstream.driver import process_in_chunks
from chunkstream.handlers import LoggingRecordHandler
from chunkstream.logging_config import clear_stream_marker, get_logger, set_stream_marker
from chunkstream.settings import settings
from chunkstream.sources import SourceRegistry


@dataclass
class ProcessStream:
    """Use-case для обработки одного входного файла."""

    source_registry: SourceRegistry
    delimiter: Delimiter
    chunk_size: int = field(default_factory=lambda: settings.CHUNK_SIZE)
    handler_factory: HandlerFactory = LoggingRecordHandler
    logger_name: str = field(default="chunkstream.pipeline")

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive | chunk_size={self.chunk_size}")
        self.logger = get_logger(self.logger_name)

    def __call__(self, path: str) -> bool:
        """
        Обработка файла через весь пайплайн.

        Args:
            path: Путь к файлу

        Returns:
            True если все записи обработаны
        """
        # Маркер в самом начале - дальше идентификация потока по нему
        set_stream_marker()
        self.logger.info(f"Start | path={path} chunk_size={self.chunk_size}")

        try:
            source = self.source_registry.get_source(path)
            if source is None:
                self.logger.error(f"Unsupported file type | path={path}")
                return False

            handler = self.handler_factory(source.detect_encoding(path))

            with source.open(path) as stream:
                records = process_in_chunks(stream, self.chunk_size, handler, self.delimiter)

            self.logger.info(f"Done | records={records}")
            return True

        except Exception as exc:
            self.logger.error(f"Stream failed | error={type(exc).__name__}: {exc}")
            return False

        finally:
            clear_stream_marker()
