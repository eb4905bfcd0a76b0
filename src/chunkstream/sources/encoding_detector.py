"""
Encoding Detector - автоопределение кодировки записей

Использует chardet по первым байтам потока.
"""

import chardet

from chunkstream.logging_config import get_logger

logger = get_logger("chunkstream.source.encoding_detector")

# Нормализация названий кодировок
ENCODING_MAP = {
    'windows-1251': 'windows-1251',
    'cp1251': 'windows-1251',
    'utf-8': 'utf-8',
    'utf8': 'utf-8',
    'ascii': 'ascii',
    'iso-8859-1': 'latin-1',
    'latin-1': 'latin-1',
}


def detect_encoding(sample: bytes, min_confidence: float = 0.7) -> str:
    """
    Определить кодировку по образцу байтов

    Args:
        sample: Первые байты потока
        min_confidence: Порог уверенности chardet, ниже - UTF-8

    Returns:
        Название кодировки (utf-8, windows-1251, etc.)
    """
    if not sample:
        return 'utf-8'

    detected = chardet.detect(sample)
    encoding = detected.get('encoding') or 'utf-8'
    confidence = detected.get('confidence') or 0.0

    logger.debug(f"Encoding detection | encoding={encoding} confidence={confidence:.2f}")

    if confidence < min_confidence:
        logger.warning(f"Low confidence in encoding detection | confidence={confidence:.2f} using_utf8=true")
        return 'utf-8'

    return ENCODING_MAP.get(encoding.lower(), encoding)
