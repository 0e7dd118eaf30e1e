"""Byte and 32-bit integer codecs over a 256-word list.

Each byte maps to the word at that position in the word list. Decoding
lowercases each word first, so "TRUE", "True" and "true" are the same.

Integers are encoded big-endian with leading zero bytes dropped, keeping at
least the last byte: 0 is one word, 0xDEADBEEF is four.

Example:
    >>> encode_u32_joined(0xDEADBEEF)
    'table potato school true'
    >>> decode_u32_joined('Table  potato\\tschool TRUE')
    3735928559
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

import numpy as np

from wordcodec.core.errors import InvalidWordError, TooManyWordsError
from wordcodec.core.wordlist import Wordlist, load_wordlist

U32_MAX = 0xFFFFFFFF
U32_MAX_WORDS = 4
DECODE_CHUNK = 1024

WordlistLike = Wordlist | str | os.PathLike | None


def _as_uint8(data: bytes | bytearray | memoryview | Iterable[int]) -> np.ndarray:
    if isinstance(data, np.ndarray):
        if not np.issubdtype(data.dtype, np.integer):
            raise TypeError(f'Byte arrays must have an integer dtype, got {data.dtype}')
        if data.size and (data.min() < 0 or data.max() > 255):
            raise ValueError('Byte values must be in range(0, 256)')
        return data.astype(np.uint8, copy=False).ravel()
    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data)  # raises ValueError for values outside 0..255
    return np.frombuffer(data, dtype=np.uint8)


def encode_bytes(data: bytes | bytearray | memoryview | Iterable[int], wordlist: WordlistLike = None) -> list[str]:
    """Encode bytes as words, one word per byte, in order."""
    return load_wordlist(wordlist).encode_array(_as_uint8(data))


def decode_bytes(words: Sequence[str], wordlist: WordlistLike = None) -> bytes:
    """Decode words back into bytes.

    Raises InvalidWordError for the first word not in the word list; its
    ``index`` is that word's position. Words are looked up a chunk at a
    time and nothing after the failing chunk is touched.
    """
    wl = load_wordlist(wordlist)
    words = list(words)
    out = bytearray()
    for start in range(0, len(words), DECODE_CHUNK):
        for offset, value in enumerate(wl.lookup_many(words[start : start + DECODE_CHUNK])):
            if value is None:
                raise InvalidWordError(start + offset, words[start + offset])
            out.append(value)
    return bytes(out)


def u32_to_bytes(num: int) -> bytes:
    """Big-endian bytes of num with leading zero bytes removed (at least one byte)."""
    if isinstance(num, bool) or not isinstance(num, (int, np.integer)):
        raise TypeError(f'Expected an int, got {type(num).__name__}')
    num = int(num)
    if not 0 <= num <= U32_MAX:
        raise ValueError(f'Value out of range for a 32-bit unsigned int: {num}')
    raw = num.to_bytes(U32_MAX_WORDS, 'big')
    trimmed = raw.lstrip(b'\x00')
    return trimmed or raw[-1:]


def encode_u32(num: int, wordlist: WordlistLike = None) -> list[str]:
    """Encode a 32-bit unsigned int as 1 to 4 words."""
    return encode_bytes(u32_to_bytes(num), wordlist)


def encode_u32_joined(num: int, wordlist: WordlistLike = None) -> str:
    """Same as encode_u32, joined into a phrase with single spaces."""
    return ' '.join(encode_u32(num, wordlist))


def decode_u32(words: Sequence[str], wordlist: WordlistLike = None) -> int:
    """Decode 1 to 4 words (as produced by encode_u32) into an int.

    An invalid word raises InvalidWordError with its position, even when
    there are also too many words. More than four valid words raises
    TooManyWordsError, whose index is 4.
    """
    data = decode_bytes(words, wordlist)
    if len(data) > U32_MAX_WORDS:
        raise TooManyWordsError(len(data))
    result = 0
    for b in data:
        result = (result << 8) | b
    return result


def decode_u32_joined(phrase: str, wordlist: WordlistLike = None) -> int:
    """Decode a phrase (as produced by encode_u32_joined). Any whitespace separates words."""
    return decode_u32(phrase.split(), wordlist)
