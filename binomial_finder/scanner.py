"""Find word pairs shaped like binomial names.

Text is split into word tokens (maximal runs of ASCII letters, digits and
underscore) with their offsets. Adjacent tokens separated only by whitespace
are then tested against two shapes:

  standard     Capitalized word + lowercase word    "Homo sapiens"
  abbreviated  Capital letter and period + lowercase word    "E. coli"

Because genus and species tokens have disjoint shapes, matches of one shape
never overlap each other. Both shapes are always scanned in full.
"""

from typing import Iterator, List, NamedTuple

import regex as re  # type: ignore

WORD = re.compile(r'[A-Za-z0-9_]+')
WHITESPACE = re.compile(r'\s+')
CAPITALIZED = re.compile(r'[A-Z][a-z]+')
INITIAL = re.compile(r'[A-Z]')
LOWERCASE = re.compile(r'[a-z]+')

QUOTES = str.maketrans({
    '“': '"', '”': '"',
    '‘': "'", '’': "'",
})


class Token(NamedTuple):
    text: str
    start: int
    end: int


class Candidate(NamedTuple):
    """A word pair that looks like a binomial; not yet validated."""

    text: str      # Full matched text, e.g. "E. coli".
    genus: str     # Genus token, keeping the period of an abbreviation.
    species: str
    position: int  # Offset of text in the scanned string.


def normalize_text(text: str) -> str:
    """Collapse whitespace, straighten curly quotes and trim.

    All positions reported by the scanner refer to this normalized form.
    """
    return WHITESPACE.sub(' ', text).translate(QUOTES).strip()


def tokenize(text: str) -> List[Token]:
    return [Token(m.group(), m.start(), m.end()) for m in WORD.finditer(text)]


def _separated_by_space(text: str, start: int, end: int) -> bool:
    gap = text[start:end]
    return bool(gap) and gap.isspace()


def scan_standard(text: str, tokens: List[Token]) -> Iterator[Candidate]:
    """Capitalized word followed by a lowercase word."""
    for genus, species in zip(tokens, tokens[1:]):
        if not CAPITALIZED.fullmatch(genus.text):
            continue
        if not _separated_by_space(text, genus.end, species.start):
            continue
        if not LOWERCASE.fullmatch(species.text):
            continue
        yield Candidate(text[genus.start:species.end], genus.text,
                        species.text, genus.start)


def scan_abbreviated(text: str, tokens: List[Token]) -> Iterator[Candidate]:
    """Single capital letter and period followed by a lowercase word."""
    for genus, species in zip(tokens, tokens[1:]):
        if not INITIAL.fullmatch(genus.text):
            continue
        if text[genus.end:genus.end + 1] != '.':
            continue
        if not _separated_by_space(text, genus.end + 1, species.start):
            continue
        if not LOWERCASE.fullmatch(species.text):
            continue
        yield Candidate(text[genus.start:species.end], genus.text + '.',
                        species.text, genus.start)


def scan(text: str) -> Iterator[Candidate]:
    """All standard candidates, then all abbreviated ones, each left to right."""
    tokens = tokenize(text)
    yield from scan_standard(text, tokens)
    yield from scan_abbreviated(text, tokens)
