"""
Разделитель по одиночному байту (по умолчанию перевод строки).
"""

from typing import Optional

from chunkstream.contracts import DelimitResult

NEWLINE = b"\n"


class ByteDelimiter:
    """
    Делит накопленный буфер по первому вхождению байта-разделителя.

    Всё до первого разделителя - готовая запись. Всё после него - остаток:
    пустые сегменты выбрасываются, после каждого сохранённого сегмента,
    кроме последнего, разделитель возвращается на место, чтобы остаток можно
    было снова прогнать через разделитель на следующей итерации.
    """

    # пустые сегменты остатка выбрасываются, driver пропускает пустые записи внутри потока
    drops_empty = True

    def __init__(self, separator: bytes = NEWLINE):
        if len(separator) != 1:
            raise ValueError(f"Separator must be exactly one byte | separator={separator!r}")
        self.separator = bytes(separator)

    def __call__(self, buffer: bytes) -> DelimitResult:
        parts = bytes(buffer).split(self.separator)

        if len(parts) == 1:
            return DelimitResult(False, bytes(buffer), b"")

        record, rest = parts[0], parts[1:]
        last = len(rest) - 1

        remainder = bytearray()
        for index, part in enumerate(rest):
            if not part:
                continue
            remainder += part
            # у последнего сегмента разделителя не было
            if index < last:
                remainder += self.separator

        return DelimitResult(True, record, bytes(remainder))

    def __repr__(self) -> str:
        return f"ByteDelimiter({self.separator!r})"


def strip_separator(record: bytes, separator: Optional[bytes]) -> bytes:
    """Удалить байты разделителя из записи."""
    if not separator:
        return record
    return record.replace(separator, b"")


# Разделитель по переводу строки
delimit_by_newline = ByteDelimiter(NEWLINE)
