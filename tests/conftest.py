"""
Pytest fixtures для тестирования chunkstream
"""
import logging
import sys
import zipfile
from pathlib import Path
from typing import List, Optional

import pytest

# Добавляем src в путь для импортов
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


class SlicedStream:
    """
    Поток в памяти, который отдаёт не больше `width` байт за одно чтение
    и запоминает запрошенные размеры.
    """

    def __init__(self, data: bytes, width: Optional[int] = None, fail_after: Optional[int] = None):
        self.data = data
        self.width = width
        self.fail_after = fail_after
        self.position = 0
        self.requested: List[int] = []
        self.closed = False

    def read(self, size: int = -1) -> bytes:
        self.requested.append(size)
        if self.fail_after is not None and self.position >= self.fail_after:
            raise OSError("disk read failed")
        if size < 0:
            size = len(self.data)
        if self.width is not None:
            size = min(size, self.width)
        if self.fail_after is not None:
            size = min(size, self.fail_after - self.position)
        block = self.data[self.position:self.position + size]
        self.position += len(block)
        return block

    def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Настройка логирования для тестов - в консоль только ошибки"""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s'))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.ERROR)

    yield


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging в тестах заменяет хендлеры - возвращаем тестовые"""
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level

    yield

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def make_stream():
    """Фабрика потоков в памяти"""
    def _create(data: bytes, width: Optional[int] = None, fail_after: Optional[int] = None) -> SlicedStream:
        return SlicedStream(data, width=width, fail_after=fail_after)
    return _create


@pytest.fixture
def collector():
    """Обработчик, который складывает записи в список"""
    class Collector:
        def __init__(self):
            self.records: List[bytes] = []

        def __call__(self, record: bytes) -> None:
            self.records.append(record)

    return Collector()


@pytest.fixture
def text_file(tmp_path) -> Path:
    """Текстовый файл с JSON строками"""
    path = tmp_path / "records.jsonl"
    path.write_bytes(b'{"id": 1}\n{"id": 2}\n{"id": 3}')
    return path


@pytest.fixture
def zip_file(tmp_path) -> Path:
    """Zip-архив с директорией и двумя текстовыми записями"""
    path = tmp_path / "archive.zip"
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("nested/", b"")
        archive.writestr("nested/first.txt", b"alpha\nbeta\ngamma")
        archive.writestr("second.txt", b"one\ntwo\n")
    return path
