"""
Обычный файл как поток байтов.
"""

from typing import BinaryIO

from .base_source import BaseSource


class FileSource(BaseSource):
    """Открывает файл на диске в бинарном режиме."""

    def __init__(self):
        super().__init__("file")

    def _open(self, path: str) -> BinaryIO:
        self.logger.info(f"Opening file | path={path}")
        return open(path, 'rb')
