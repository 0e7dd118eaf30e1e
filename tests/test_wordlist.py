"""Tests for wordcodec.core.wordlist — loading, validation and lookup."""

from pathlib import Path

import pytest
import wordcodec.core.wordlist as wordlist_module
from wordcodec.core.errors import WordlistError
from wordcodec.core.wordlist import (
    MAX_WORD_LENGTH,
    WORDLIST_SIZE,
    Wordlist,
    available_languages,
    get_wordlist,
    load_wordlist,
    validate_words,
)

LETTERS = 'abcdefghijklmnop'


def make_words() -> list[str]:
    """256 two-letter words, already sorted: aa, ab, ... pp."""
    return [a + b for a in LETTERS for b in LETTERS]


class TestBundledEnglish:
    """The shipped en.txt must satisfy every table invariant."""

    @pytest.fixture(scope='class')
    def words(self) -> tuple[str, ...]:
        return get_wordlist('en').words

    def test_size(self, words) -> None:
        assert len(words) == WORDLIST_SIZE

    def test_sorted_strictly(self, words) -> None:
        assert list(words) == sorted(words)
        assert all(a < b for a, b in zip(words, words[1:]))

    def test_unique(self, words) -> None:
        assert len(set(words)) == WORDLIST_SIZE

    def test_charset_and_length(self, words) -> None:
        for word in words:
            assert word.isascii() and word.isalpha() and word.islower(), word
            assert 1 <= len(word) <= MAX_WORD_LENGTH, word

    def test_known_positions(self, words) -> None:
        assert words[0x00] == 'able'
        assert words[0x04] == 'ant'
        assert words[0x05] == 'apple'
        assert words[0xAD] == 'potato'
        assert words[0xBE] == 'school'
        assert words[0xD2] == 'stamp'
        assert words[0xDE] == 'table'
        assert words[0xEF] == 'true'

    def test_listed_as_available(self) -> None:
        assert 'en' in available_languages()

    def test_cached(self) -> None:
        assert get_wordlist() is get_wordlist('en')
        assert load_wordlist() is get_wordlist('en')
        assert load_wordlist('en') is get_wordlist('en')


class TestValidation:
    def test_valid_list(self) -> None:
        validate_words(make_words())

    def test_too_few(self) -> None:
        with pytest.raises(WordlistError, match='Expected 256 words, got 255'):
            Wordlist(make_words()[:-1])

    def test_too_many(self) -> None:
        with pytest.raises(WordlistError, match='got 257'):
            Wordlist(make_words() + ['zz'])

    def test_duplicate(self) -> None:
        words = make_words()
        words[10] = words[9]
        with pytest.raises(WordlistError, match='duplicate'):
            Wordlist(words)

    def test_unsorted(self) -> None:
        words = make_words()
        words[0], words[1] = words[1], words[0]
        with pytest.raises(WordlistError, match='Line 2.*out of order'):
            Wordlist(words)

    def test_uppercase(self) -> None:
        words = make_words()
        words[3] = words[3].upper()
        with pytest.raises(WordlistError, match='lowercase'):
            Wordlist(words)

    def test_non_ascii(self) -> None:
        words = make_words()
        words[255] = 'pé'
        with pytest.raises(WordlistError, match='lowercase ASCII'):
            Wordlist(words)

    def test_too_long(self) -> None:
        words = make_words()
        words[-1] = 'p' + 'z' * MAX_WORD_LENGTH
        with pytest.raises(WordlistError, match='longer than 6'):
            Wordlist(words)

    def test_six_letters_allowed(self) -> None:
        words = make_words()
        words[-1] = 'pzzzzz'
        assert Wordlist(words).words[-1] == 'pzzzzz'

    def test_blank_line(self) -> None:
        words = make_words()
        text = '\n'.join(words[:100]) + '\n\n' + '\n'.join(words[101:])
        with pytest.raises(WordlistError, match='empty word'):
            Wordlist.from_text(text)


class TestLoading:
    def test_from_text_trailing_newline(self) -> None:
        wl = Wordlist.from_text('\n'.join(make_words()) + '\n', name='letters')
        assert len(wl) == 256
        assert wl.name == 'letters'

    def test_from_text_strips_whitespace(self) -> None:
        wl = Wordlist.from_text('\r\n'.join(f'  {w} ' for w in make_words()))
        assert wl.words[0] == 'aa'

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / 'letters.txt'
        path.write_text('\n'.join(make_words()) + '\n', encoding='utf-8')
        wl = Wordlist.from_file(path)
        assert wl.word_for_byte(255) == 'pp'
        assert wl.name == str(path)

    def test_from_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(WordlistError, match='Cannot read'):
            Wordlist.from_file(tmp_path / 'missing.txt')

    def test_load_wordlist_path(self, tmp_path: Path) -> None:
        path = tmp_path / 'letters.txt'
        path.write_text('\n'.join(make_words()), encoding='utf-8')
        wl = load_wordlist(path)
        assert wl.byte_for_word('PP') == 255
        assert load_wordlist(str(path)) is wl

    def test_load_wordlist_passthrough(self) -> None:
        wl = Wordlist(make_words())
        assert load_wordlist(wl) is wl

    def test_unknown_language(self) -> None:
        with pytest.raises(WordlistError, match='Available: .*en'):
            get_wordlist('klingon')

    def test_unknown_source(self, tmp_path: Path) -> None:
        with pytest.raises(WordlistError, match='Unknown word list'):
            load_wordlist(tmp_path / 'nope.txt')


class TestImmutable:
    def test_cannot_reassign(self) -> None:
        wl = Wordlist(make_words())
        with pytest.raises(AttributeError):
            wl.words = ()

    def test_words_is_tuple(self) -> None:
        assert isinstance(Wordlist(make_words()).words, tuple)

    def test_table_read_only(self) -> None:
        wl = Wordlist(make_words())
        with pytest.raises(ValueError):
            wl._table[0] = 'zz'


class TestLookup:
    @pytest.fixture
    def wl(self) -> Wordlist:
        return get_wordlist('en')

    def test_word_for_byte(self, wl) -> None:
        assert wl.word_for_byte(0) == 'able'
        assert wl.word_for_byte(255) == 'zebra'

    @pytest.mark.parametrize('value', [-1, 256, 1000])
    def test_word_for_byte_out_of_range(self, wl, value) -> None:
        with pytest.raises(ValueError):
            wl.word_for_byte(value)

    def test_every_word_maps_back(self, wl) -> None:
        for i, word in enumerate(wl.words):
            assert wl.byte_for_word(word) == i

    @pytest.mark.parametrize('word', ['TRUE', 'True', 'tRuE', 'true'])
    def test_case_insensitive(self, wl, word) -> None:
        assert wl.byte_for_word(word) == 0xEF

    @pytest.mark.parametrize(
        'word',
        ['', 'nonsense', 'zzzzzz', 'aaa', 'tru', 'truee', ' true', 'true\x00', 'TABLEİ', '\U0001f600'],
    )
    def test_unknown_returns_none(self, wl, word) -> None:
        assert wl.byte_for_word(word) is None

    def test_lookup_many(self, wl) -> None:
        assert wl.lookup_many(['able', 'NOPE', 'Zebra']) == [0, None, 255]
        assert wl.lookup_many([]) == []

    def test_contains(self, wl) -> None:
        assert 'Potato' in wl
        assert 'nonsense' not in wl
        assert 5 not in wl

    @pytest.mark.parametrize('word', ['z' * (MAX_WORD_LENGTH + 1), 'TABLE' * 1_000, 'İ' * MAX_WORD_LENGTH])
    def test_overlong_word_is_none(self, wl, word) -> None:
        assert wl.byte_for_word(word) is None

    def test_lookup_many_long_words_keep_positions(self, wl) -> None:
        words = ['x' * 5_000, 'ANT', 'able' * 2, 'zebra']
        assert wl.lookup_many(words) == [None, 4, None, 255]

    def test_lookup_many_skips_folding_long_words(self, wl) -> None:
        lowered = []

        class Word(str):
            def lower(self) -> str:
                lowered.append(str(self))
                return super().lower()

        assert wl.lookup_many([Word('Able'), Word('Q' * 50)]) == [0, None]
        assert lowered == ['Able']


class TestLanguageCache:
    def test_language_name_does_not_list_directory(self, monkeypatch) -> None:
        load_wordlist('en')
        listed = []
        monkeypatch.setattr(wordlist_module, '_words_dir', lambda: listed.append(1))
        for _ in range(3):
            assert load_wordlist('en') is get_wordlist('en')
        assert 'en' in available_languages()
        assert listed == []

    def test_available_languages_returns_fresh_list(self) -> None:
        langs = available_languages()
        langs.append('klingon')
        assert 'klingon' not in available_languages()
