"""
Контракты chunkstream.

Все type aliases и Protocol'ы для компонентов чанкера.
"""

from __future__ import annotations
from typing import Callable, NamedTuple, Optional, Protocol


class ByteStream(Protocol):
    """
    Источник байтов: последовательное чтение, один проход.

    read() возвращает не больше size байт; b"" означает конец потока,
    исключение - ошибку чтения.
    """

    def read(self, size: int = -1) -> bytes:
        ...


class DelimitResult(NamedTuple):
    """Результат разделителя: (готово, запись, остаток)."""

    ready: bool
    record: bytes
    remainder: bytes


class Delimiter(Protocol):
    """Стратегия выделения записи из накопленного буфера."""

    # Байт-разделитель, который вырезается из записи перед передачей обработчику.
    # None - стратегия без разделителя (например, length-prefixed).
    separator: Optional[bytes]

    # True - пустые сегменты внутри потока не являются записями
    drops_empty: bool

    def __call__(self, buffer: bytes) -> DelimitResult:
        ...


# === Component Contracts ===

# RecordHandler: (record) -> None, исключение прерывает обработку потока
RecordHandler = Callable[[bytes], None]

# HandlerFactory: (encoding) -> RecordHandler
HandlerFactory = Callable[[str], RecordHandler]
