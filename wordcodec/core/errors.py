"""Exception hierarchy for wordcodec.

Decoding failures carry an ``index``: the 0-based position of the first
word that could not be resolved. ``TooManyWordsError`` reuses the same
channel with the fixed index 4 (see the class docstring).
"""


class WordcodecError(Exception):
    """Base class for every error raised by wordcodec."""


class WordlistError(WordcodecError):
    """A word list is missing or violates the 256-word table invariants."""


class DecodeError(WordcodecError, ValueError):
    """A word sequence could not be decoded."""

    def __init__(self, index: int, message: str):
        super().__init__(message)
        self.index = index


class InvalidWordError(DecodeError):
    """A word is not in the word list. ``index`` is its position in the input."""

    def __init__(self, index: int, word: str):
        super().__init__(index, f'Invalid word at index {index}: {word!r}')
        self.word = word


class TooManyWordsError(DecodeError):
    """More than four words were given to a u32 decoder.

    ``index`` is always 4, whatever the actual length. Callers treat an
    index of 4 from decode_u32 as "input too long"; it is not the position
    of a bad word. ``count`` holds the real number of words.
    """

    INDEX = 4

    def __init__(self, count: int):
        super().__init__(self.INDEX, f'Too many words for a 32-bit value: got {count}, max 4')
        self.count = count
