"""Turn a list of words into a fast matcher."""

import abc
from typing import Any, Iterable, Iterator, List, Optional, Set, Union

import regex as re  # type: ignore


class Tokenizer(abc.ABC):
    """Match words against one large regex built from a word list."""

    _pattern: Union[Any, Set[str]]
    # These go at the beginning of the regex.
    _extra_regex: List[str] = []

    _filename: Optional[str] = None
    _data: Optional[Iterable[str]]

    def __init__(self,
                 filename: Optional[str] = None,
                 data: Optional[Iterable[str]] = None,
                 name: Optional[str] = None) -> None:
        if filename is None:
            filename = self._filename
        self.name = name or self.__class__.__name__
        self._data = data
        self._extra_words: List[str] = []
        if filename:
            with open(filename, 'r', encoding='utf-8') as f:
                self._extra_words = [
                    l.strip() for l in f
                    if l.strip() and not l.startswith('#')
                ]

        self._pattern = self.build_pattern()

    def build_pattern(self) -> Union[Any, Set[str]]:
        alternatives = self._extra_regex + sorted(
            set([self.make_pattern(word) for word in self.words()]),
            reverse=True)
        if not alternatives:
            # An empty alternation would match everything.
            return re.compile(r'(?!)')
        return re.compile('|'.join(alternatives))

    def words(self) -> Iterator[str]:
        """All words: class records, then file lines, then in-memory data."""
        for word in self.read_records():
            yield word
        for word in self._extra_words:
            yield word
        for word in self._data or []:
            yield word

    @abc.abstractmethod
    def read_records(self) -> Iterable[str]:
        """Generator that returns the built-in words."""
        return []

    def make_pattern(self, word: str) -> str:
        """Convert word into a pattern fragment."""
        return re.escape(word.lower())

    def match(self, word: str):
        return self._pattern.search(word.lower())

    def __contains__(self, word: str) -> bool:
        return self.match(word) is not None


class HashTokenizer(Tokenizer):
    """Exact, case-insensitive word membership."""

    def build_pattern(self) -> Set[str]:
        return set(word.lower() for word in self.words())

    def match(self, word: str) -> Optional[str]:
        if word.lower() in self._pattern:
            return word
        return None

    def __len__(self) -> int:
        return len(self._pattern)

    @abc.abstractmethod
    def read_records(self) -> Iterable[str]:
        """Generator that returns the built-in words."""
        return []
