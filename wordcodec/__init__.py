"""wordcodec — reversible byte <-> word encoding over a 256-word list.

    >>> from wordcodec import encode_u32_joined, decode_u32_joined
    >>> encode_u32_joined(1234)
    'ant stamp'
    >>> decode_u32_joined('ANT stamp')
    1234
"""

from wordcodec.codec import (
    decode_bytes,
    decode_u32,
    decode_u32_joined,
    encode_bytes,
    encode_u32,
    encode_u32_joined,
    u32_to_bytes,
)
from wordcodec.core.errors import (
    DecodeError,
    InvalidWordError,
    TooManyWordsError,
    WordcodecError,
    WordlistError,
)
from wordcodec.core.wordlist import (
    DEFAULT_LANGUAGE,
    MAX_WORD_LENGTH,
    Wordlist,
    available_languages,
    get_wordlist,
    load_wordlist,
)

__version__ = '0.1.0'

__all__ = [
    'DEFAULT_LANGUAGE',
    'MAX_WORD_LENGTH',
    'DecodeError',
    'InvalidWordError',
    'TooManyWordsError',
    'WordcodecError',
    'Wordlist',
    'WordlistError',
    'available_languages',
    'decode_bytes',
    'decode_u32',
    'decode_u32_joined',
    'encode_bytes',
    'encode_u32',
    'encode_u32_joined',
    'get_wordlist',
    'load_wordlist',
    'u32_to_bytes',
]
