"""
chunkstream - точка входа.

Обрабатывает входные файлы по очереди: обычный текстовый файл и запись
zip-архива, каждая строка попадает в лог. Останавливается на первой ошибке.
"""

import argparse
from typing import List, Optional

from chunkstream.delimiters import build_delimiter
from chunkstream.logging_config import get_logger, setup_logging
from chunkstream.pipeline import ProcessStream
from chunkstream.settings import settings
from chunkstream.sources import build_source_registry


def positive_int(value: str) -> int:
    """Тип argparse для размера чтения: целое > 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chunkstream",
        description="Line-by-line processing of large files and zip archive entries",
    )
    parser.add_argument("paths", nargs="*", help="Input files (default: INPUT_PATHS)")
    parser.add_argument("--chunk-size", type=positive_int, default=settings.CHUNK_SIZE, help="Read size in bytes")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция. Возвращает код выхода."""
    args = parse_args(argv)

    # 1. Настройка логирования
    setup_logging(settings.LOG_LEVEL, settings.ENVIRONMENT, settings.LOG_FORMAT)
    logger = get_logger("chunkstream.main")

    paths = args.paths or settings.INPUT_PATHS

    # 2. Сборка компонентов
    source_registry = build_source_registry()
    logger.info(f"Sources: {source_registry.supported_extensions()}")

    process_stream = ProcessStream(
        source_registry=source_registry,
        delimiter=build_delimiter(),
        chunk_size=args.chunk_size,
    )

    # 3. Обработка входов по очереди
    for path in paths:
        if not process_stream(path):
            logger.error(f"Exit due to failed input | path={path}")
            return 1

    logger.info(f"All inputs processed | count={len(paths)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
