"""
StatusCode — Код возврата подпрограммы

Signed 4-digit status (диапазон -9999..9999), записывается в выходной
параметр. 0 означает успех.

Code  Meaning
----  -------
  0   SUCCESS     — сумма вычислена и записана
  1   SIZE_ERROR  — сумма не помещается в разрядную сетку, выход не записан
"""

from enum import IntEnum
from typing import Final

STATUS_CODE_DIGITS: Final[int] = 4

STATUS_CODE_MAX: Final[int] = 10**STATUS_CODE_DIGITS - 1

STATUS_CODE_MIN: Final[int] = -STATUS_CODE_MAX


class StatusCode(IntEnum):
    """Коды возврата"""

    SUCCESS = 0
    SIZE_ERROR = 1


def validate_status_code(code: int) -> int:
    """
    Проверка, что код помещается в signed 4-digit поле.

    Raises:
        ValueError: Если код вне диапазона -9999..9999
    """
    if not STATUS_CODE_MIN <= code <= STATUS_CODE_MAX:
        raise ValueError(
            f"Status code {code} out of range [{STATUS_CODE_MIN}, {STATUS_CODE_MAX}]"
        )
    return code
