"""Word list loading and lookup.

A word list is exactly 256 words, one per byte value. Position in the list
is the byte value, so the list is also the encoding table. Every list must be:

  - exactly 256 entries
  - lowercase ASCII letters only, 1 to MAX_WORD_LENGTH characters
  - strictly ascending (sorted and unique), so decoding can binary-search it

Bundled lists live in wordcodec/words/<language>.txt, one word per line.
They are read once per process and cached. A list that breaks the rules
raises WordlistError at load time; for bundled data that is a build error.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path

import numpy as np

from wordcodec.core.errors import WordlistError

logger = logging.getLogger(__name__)

WORDLIST_SIZE = 256
MAX_WORD_LENGTH = 6
DEFAULT_LANGUAGE = 'en'

_WORDS_DIR = 'words'
_SUFFIX = '.txt'


def _check_word(lineno: int, word: str) -> None:
    if not word:
        raise WordlistError(f'Line {lineno}: empty word')
    if not (word.isascii() and word.isalpha() and word.islower()):
        raise WordlistError(f'Line {lineno}: {word!r} is not lowercase ASCII letters')
    if len(word) > MAX_WORD_LENGTH:
        raise WordlistError(f'Line {lineno}: {word!r} is longer than {MAX_WORD_LENGTH} characters')


def validate_words(words: Sequence[str]) -> None:
    """Raise WordlistError unless words form a valid 256-word table."""
    if len(words) != WORDLIST_SIZE:
        raise WordlistError(f'Expected {WORDLIST_SIZE} words, got {len(words)}')
    previous = None
    for lineno, word in enumerate(words, start=1):
        _check_word(lineno, word)
        if previous is not None and word <= previous:
            what = 'duplicate' if word == previous else 'out of order'
            raise WordlistError(f'Line {lineno}: {word!r} is {what} (after {previous!r})')
        previous = word


@dataclass(frozen=True)
class Wordlist:
    """An immutable, validated 256-word table.

    Usage:

        wl = Wordlist.from_file('words/de.txt')
        wl.word_for_byte(0xDE)
        wl.byte_for_word('Table')
    """

    words: tuple[str, ...] = field(repr=False)
    name: str = 'custom'
    _table: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        words = tuple(self.words)
        validate_words(words)
        table = np.array(words, dtype=f'<U{MAX_WORD_LENGTH}')
        table.flags.writeable = False
        object.__setattr__(self, 'words', words)
        object.__setattr__(self, '_table', table)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.byte_for_word(word) is not None

    @classmethod
    def from_text(cls, text: str, name: str = 'custom') -> Wordlist:
        """Parse one word per line. A trailing newline is fine, blank lines are not."""
        return cls([line.strip() for line in text.splitlines()], name=name)

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> Wordlist:
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise WordlistError(f'Cannot read word list {path}: {e}') from e
        return cls.from_text(text, name=str(path))

    def word_for_byte(self, value: int) -> str:
        """Return the word for a byte value (0..255)."""
        if not 0 <= value < WORDLIST_SIZE:
            raise ValueError(f'Byte value out of range: {value}')
        return self.words[value]

    def byte_for_word(self, word: str) -> int | None:
        """Return the byte value for a word, ignoring case, or None if unknown."""
        return self.lookup_many([word])[0]

    def lookup_many(self, words: Sequence[str]) -> list[int | None]:
        """Vectorized byte_for_word over a sequence of words.

        Words that cannot be in the table by length alone map to None without
        being folded or copied into the search array, so the array is always
        MAX_WORD_LENGTH characters wide.
        """
        result: list[int | None] = [None] * len(words)
        slots: list[int] = []
        folded: list[str] = []
        for i, word in enumerate(words):
            # lower() never shortens a str, so a long raw word is a miss
            if not word or len(word) > MAX_WORD_LENGTH:
                continue
            word = word.lower()
            if len(word) <= MAX_WORD_LENGTH:
                slots.append(i)
                folded.append(word)
        if not folded:
            return result
        positions = np.searchsorted(self._table, np.array(folded, dtype=f'<U{MAX_WORD_LENGTH}'))
        for i, word, pos in zip(slots, folded, positions.tolist()):
            # numpy drops trailing NULs when converting, so confirm on the Python str
            if pos < WORDLIST_SIZE and self.words[pos] == word:
                result[i] = pos
        return result

    def encode_array(self, data: np.ndarray) -> list[str]:
        """Map a uint8 array to words in one indexing pass."""
        return self._table[data].tolist()


def _words_dir():
    return resources.files('wordcodec').joinpath(_WORDS_DIR)


def available_languages() -> list[str]:
    """Names of the bundled word lists."""
    return sorted(_bundled_languages())


@functools.lru_cache(maxsize=None)
def _bundled_languages() -> frozenset[str]:
    # Package data does not change while the process runs; list it once
    return frozenset(
        entry.name[: -len(_SUFFIX)]
        for entry in _words_dir().iterdir()
        if entry.name.endswith(_SUFFIX)
    )


def get_wordlist(language: str = DEFAULT_LANGUAGE) -> Wordlist:
    """Load a bundled word list by language name. Cached for the process lifetime."""
    return _bundled_wordlist(language)


@functools.lru_cache(maxsize=None)
def _bundled_wordlist(language: str) -> Wordlist:
    resource = _words_dir().joinpath(f'{language}{_SUFFIX}')
    if not resource.is_file():
        raise WordlistError(
            f'Unknown word list: {language}. Available: {", ".join(available_languages())}'
        )
    logger.debug('Loading bundled word list %r', language)
    return Wordlist.from_text(resource.read_text(encoding='utf-8'), name=language)


@functools.lru_cache(maxsize=None)
def _wordlist_from_path(path: str) -> Wordlist:
    logger.info('Loading word list file %s', path)
    return Wordlist.from_file(path)


def load_wordlist(source: Wordlist | str | os.PathLike | None = None) -> Wordlist:
    """Resolve a Wordlist, a bundled language name, or a path to a word list file.

    None gives the default bundled list. A string that names a bundled
    language wins over a file of the same name.
    """
    if source is None:
        return get_wordlist(DEFAULT_LANGUAGE)
    if isinstance(source, Wordlist):
        return source
    if isinstance(source, str) and source in _bundled_languages():
        return get_wordlist(source)
    path = Path(source)
    if path.is_file():
        return _wordlist_from_path(str(path.resolve()))
    raise WordlistError(
        f'Unknown word list: {source}. Available: {", ".join(available_languages())} or a file path'
    )
