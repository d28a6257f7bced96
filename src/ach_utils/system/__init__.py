"""
System modules для ach_utils

Граничные утилиты: имена файлов, сетевой адрес хоста, случайные строки.
"""

from ach_utils.system.filenames import (
    FILE_TIMESTAMP_FORMAT,
    format_file_timestamp,
    make_file_name,
)
from ach_utils.system.network import get_local_ip
from ach_utils.system.randomness import RANDOM_ALPHABET, random_hex_string

__all__ = [
    # Filenames
    "FILE_TIMESTAMP_FORMAT",
    "format_file_timestamp",
    "make_file_name",
    # Network
    "get_local_ip",
    # Randomness
    "RANDOM_ALPHABET",
    "random_hex_string",
]
