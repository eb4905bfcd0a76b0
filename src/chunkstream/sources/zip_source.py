"""
Запись zip-архива как поток байтов.

Запись распаковывается на лету через zipfile, целиком в память не читается.
"""

import zipfile
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from .base_source import BaseSource


class ZipEntrySource(BaseSource):
    """
    Открывает одну запись zip-архива

    Выбор записи:
    1. entry_name, если задан
    2. иначе первая запись, которая не является директорией
    """

    def __init__(self, entry_name: Optional[str] = None):
        super().__init__("zip")
        self.entry_name = entry_name

    @contextmanager
    def _open(self, path: str) -> Iterator[BinaryIO]:
        with zipfile.ZipFile(path) as archive:
            entry = self.select_entry(archive)
            self.logger.info(f"Opening zip entry | path={path} entry={entry.filename} size={entry.file_size}")
            with archive.open(entry) as stream:
                yield stream

    def select_entry(self, archive: zipfile.ZipFile) -> zipfile.ZipInfo:
        """
        Найти запись архива для чтения

        Raises:
            ValueError: записи с таким именем нет или в архиве нет файлов
        """
        if self.entry_name is not None:
            try:
                return archive.getinfo(self.entry_name)
            except KeyError:
                raise ValueError(f"Entry not found in archive | entry={self.entry_name}") from None

        for entry in archive.infolist():
            if not entry.is_dir():
                return entry

        raise ValueError(f"Archive has no file entries | archive={archive.filename}")
