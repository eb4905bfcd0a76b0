"""
chunkstream - построчная обработка больших потоков с ограниченной памятью.
"""

from chunkstream.delimiters import ByteDelimiter, delimit_by_newline
from chunkstream.driver import process_in_chunks

__version__ = "1.0.0"

__all__ = ["ByteDelimiter", "delimit_by_newline", "process_in_chunks"]
