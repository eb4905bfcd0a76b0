"""
Chunk driver: построчная обработка потока с ограниченной памятью.

Поток читается блоками фиксированного размера, блоки копятся в буфере,
пока разделитель не найдёт в нём готовую запись. Запись отдаётся
обработчику, остаток переносится в следующую итерацию. Памяти нужно
O(chunk_size + самая длинная запись), а не размер всего потока.
"""

from dataclasses import dataclass
from typing import Optional

from chunkstream.contracts import ByteStream, Delimiter, RecordHandler
from chunkstream.delimiters import delimit_by_newline, strip_separator
from chunkstream.logging_config import get_logger

logger = get_logger("chunkstream.driver")


@dataclass
class ChunkState:
    """Буферы одного вызова process_in_chunks."""

    accumulation: bytes = b""
    remainder: bytes = b""
    end_of_stream: bool = False


def _next_record(
    source: ByteStream,
    chunk_size: int,
    delimiter: Delimiter,
    state: ChunkState,
) -> bool:
    """
    Накопить в state.accumulation следующую запись.

    Returns:
        True если запись выделена разделителем, False если поток закончился
        и в accumulation лежит финальная запись
    """
    state.accumulation = b""

    while True:
        # остаток с прошлой итерации обрабатывается раньше нового чтения
        if state.remainder:
            block, state.remainder = state.remainder, b""
        else:
            block = source.read(chunk_size)
            if not block:
                state.end_of_stream = True
                return False

        ready, state.accumulation, state.remainder = delimiter(state.accumulation + block)
        if ready:
            return True


def process_in_chunks(
    source: ByteStream,
    chunk_size: int,
    handler: RecordHandler,
    delimiter: Optional[Delimiter] = None,
) -> int:
    """
    Разбить поток на записи и отдать каждую обработчику.

    Записи отдаются по одной, в порядке потока, до следующего чтения.
    Если разделитель выбрасывает пустые сегменты (drops_empty), пустая запись
    между двумя разделителями подряд пропускается; первая и последняя запись
    потока отдаются всегда, даже пустые.

    Args:
        source: Поток с методом read(size); driver его не закрывает
        chunk_size: Размер одного чтения в байтах, > 0
        handler: Обработчик записи; исключение прерывает обработку
        delimiter: Разделитель записей, по умолчанию перевод строки

    Returns:
        Количество записей, переданных обработчику

    Raises:
        ValueError: chunk_size <= 0 (до первого чтения)
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive | chunk_size={chunk_size}")

    if delimiter is None:
        delimiter = delimit_by_newline

    drops_empty = getattr(delimiter, "drops_empty", False)
    state = ChunkState()
    delivered = 0

    while not state.end_of_stream:
        delimited = _next_record(source, chunk_size, delimiter, state)
        record = strip_separator(state.accumulation, getattr(delimiter, "separator", None))

        if delimited and not record and delivered and drops_empty:
            logger.debug("Skipped empty record")
            continue

        handler(record)
        delivered += 1
        logger.debug(f"Record delivered | index={delivered} size={len(record)}")

    logger.debug(f"End of stream | records={delivered}")
    return delivered
