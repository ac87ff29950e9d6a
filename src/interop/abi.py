"""
ABI — Кодирование результата проверки для вызывающего контракта

Результат передаётся как одно значение Solidity типа bool, закодированное
по стандартному ABI: одно 32-байтовое big-endian слово, 0x…01 для true
и 0x…00 для false.
"""

from typing import BinaryIO, Final

from eth_abi import decode, encode

# Размер ABI слова (байт)
ABI_WORD_SIZE: Final[int] = 32


def encode_bool(value: bool) -> bytes:
    """
    ABI-кодирование одного bool.

    Examples:
        >>> encode_bool(True).hex()[-2:]
        '01'
        >>> len(encode_bool(False))
        32
    """
    return encode(["bool"], [bool(value)])


def decode_bool(data: bytes) -> bool:
    """
    Декодирование ABI слова bool.

    Raises:
        eth_abi.exceptions.DecodingError: Если data не является ABI bool
    """
    (value,) = decode(["bool"], data)
    return value


def write_outcome(passed: bool, stream: BinaryIO) -> None:
    """
    Запись закодированного результата в бинарный поток.

    Слово кодируется целиком до записи: в поток попадают либо все 32 байта,
    либо ничего.
    """
    payload = encode_bool(passed)
    stream.write(payload)
    stream.flush()
