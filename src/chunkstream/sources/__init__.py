"""
Источники потока байтов.

=== ИСТОЧНИКИ ===
- BaseSource - базовый класс для всех источников
- FileSource - обычный файл (.txt, .jsonl, .ndjson, .log, .csv)
- ZipEntrySource - одна запись zip-архива (.zip)

=== ИСПОЛЬЗОВАНИЕ ===

    registry = build_source_registry()
    with registry.open("data_input_example.zip") as stream:
        process_in_chunks(stream, 128, handler)
"""

import os
from contextlib import contextmanager
from typing import BinaryIO, Dict, Iterator, List, Optional, Tuple

from chunkstream.settings import settings

from .base_source import BaseSource
from .encoding_detector import detect_encoding
from .file_source import FileSource
from .zip_source import ZipEntrySource


class SourceRegistry:
    """Реестр источников по расширениям файлов."""

    def __init__(self, sources: Dict[Tuple[str, ...], BaseSource]):
        self._sources = sources
        self._ext_map: Dict[str, BaseSource] = {}
        for extensions, source in sources.items():
            for ext in extensions:
                self._ext_map[ext.lower()] = source

    def get_source(self, path: str) -> Optional[BaseSource]:
        """Получить источник по расширению файла."""
        ext = os.path.splitext(path)[1].lower()
        return self._ext_map.get(ext)

    def supported_extensions(self) -> List[str]:
        """Список поддерживаемых расширений."""
        return list(self._ext_map.keys())

    @contextmanager
    def open(self, path: str) -> Iterator[BinaryIO]:
        """Открыть поток через соответствующий источник."""
        source = self.get_source(path)
        if not source:
            raise ValueError(f"No source found for: {path}")
        with source.open(path) as stream:
            yield stream


def build_source_registry() -> SourceRegistry:
    """Создать реестр источников с настройками по умолчанию."""
    return SourceRegistry({
        (".txt", ".jsonl", ".ndjson", ".log", ".csv"): FileSource(),
        (".zip",): ZipEntrySource(entry_name=settings.ZIP_ENTRY),
    })


__all__ = [
    "BaseSource",
    "FileSource",
    "ZipEntrySource",
    "SourceRegistry",
    "build_source_registry",
    "detect_encoding",
]
