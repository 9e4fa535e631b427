"""Extract binomial names (Genus species) from plain text.

Usage:
    binomial-finder [--dataset FILE ...] [--csv] FILE [FILE ...]

Example:
    binomial-finder --dataset datasets/Taxon.tsv article.txt
    binomial-finder --csv --context-length 60 *.txt > names.csv

Environment Variables:
    BINOMIAL_DATASETS - Comma-separated dataset locations loaded when no
                        --dataset is given (paths or http(s) URLs)
    CONTEXT_LENGTH    - Characters of context kept around each match
    VERBOSITY         - 0=silent, 1=warnings, 2=info, 3=debug
"""

import argparse
import asyncio
import logging
import sys
import time
from typing import Iterable, List, Optional

import regex as re  # type: ignore

from .env_config import get_env_config
from .reference_store import ReferenceStore
from .scanner import Candidate, normalize_text, scan
from .terms import CONFIDENCE, BiologicalTerm, ExtractionResult, write_terms_csv
from .tokenizer import Tokenizer, HashTokenizer
from .vocabulary import EnglishWords, GenusFragments, SpeciesSuffixes

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_LENGTH = 100

GENUS_SHAPE = re.compile(r'[A-Z][a-z]+')
INITIAL_SHAPE = re.compile(r'[A-Z]')
SPECIES_SHAPE = re.compile(r'[a-z]+')
MIN_SPECIES_LENGTH = 3

# Values returned by acceptance_basis(), strongest first.
REFERENCE = 'reference'
GENUS = 'genus'
HEURISTIC = 'heuristic'


class GenusSpeciesExtractor(object):
    """Find and validate binomial names in text.

    A candidate pair is accepted when, in order of precedence, the pair is
    in the reference store, the genus is in the reference store, or the
    words look Latin enough (see acceptance_basis()).
    """

    def __init__(self,
                 store: Optional[ReferenceStore] = None,
                 context_length: int = DEFAULT_CONTEXT_LENGTH,
                 stop_words: Optional[HashTokenizer] = None,
                 genus_fragments: Optional[Tokenizer] = None,
                 species_suffixes: Optional[Tokenizer] = None) -> None:
        self.store = store if store is not None else ReferenceStore()
        self.context_length = context_length
        if stop_words is None:
            stop_words = EnglishWords(name='stop words')
        if genus_fragments is None:
            genus_fragments = GenusFragments(name='genus fragments')
        if species_suffixes is None:
            species_suffixes = SpeciesSuffixes(name='species suffixes')
        self.stop_words = stop_words
        self.genus_fragments = genus_fragments
        self.species_suffixes = species_suffixes

    async def extract_terms(self, text: str) -> ExtractionResult:
        """Return the accepted binomials in text, ordered by position.

        Positions and contexts refer to normalize_text(text). The reference
        store is loaded on first use.

        Raises:
          TypeError if text is not a str.
        """
        if not isinstance(text, str):
            raise TypeError(f'Expected text, got {type(text).__name__}')
        start_time = time.perf_counter()

        await self.store.load_default()

        clean_text = normalize_text(text)
        terms: List[BiologicalTerm] = []
        found = set()

        for candidate in scan(clean_text):
            key = candidate.text.lower()
            if key in found:
                continue
            if self.is_english_word(candidate.genus) or self.is_english_word(candidate.species):
                continue
            if not self.is_valid_biological_term(candidate.genus, candidate.species):
                continue

            terms.append(self._make_term(clean_text, candidate))
            found.add(key)

        terms.sort(key=lambda term: term.position)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f'Found {len(terms)} terms in {len(clean_text)} characters '
                    f'({processing_time:.1f} ms)')
        return ExtractionResult(terms=terms, processing_time=processing_time)

    def _make_term(self, text: str, candidate: Candidate) -> BiologicalTerm:
        return BiologicalTerm(
            genus=candidate.genus.replace('.', ''),
            species=candidate.species,
            full_name=f'{candidate.genus} {candidate.species}',
            context=self.extract_context(text, candidate.position, self.context_length),
            confidence=CONFIDENCE,
            position=candidate.position,
        )

    def is_english_word(self, word: str) -> bool:
        return word in self.stop_words

    def acceptance_basis(self, genus: str, species: str) -> Optional[str]:
        """Name the first rule that accepts the pair, or None.

        Args:
          genus - Genus token; "E." style abbreviations keep their period.
          species - Specific epithet.
        Returns:
          REFERENCE if the pair is in the store, GENUS if the genus is (for
          an abbreviation, if some stored genus has that initial), HEURISTIC
          if the genus contains a known root or the epithet has a known
          ending.
        """
        abbreviated = genus.endswith('.')
        clean_genus = genus.replace('.', '')

        shape = INITIAL_SHAPE if abbreviated else GENUS_SHAPE
        if not shape.fullmatch(clean_genus):
            return None
        if not SPECIES_SHAPE.fullmatch(species) or len(species) < MIN_SPECIES_LENGTH:
            return None

        if self.store.is_valid_term(clean_genus, species):
            return REFERENCE
        if abbreviated:
            if self.store.is_known_abbreviation(clean_genus):
                return GENUS
        elif self.store.is_known_genus(clean_genus):
            return GENUS

        if clean_genus in self.genus_fragments or species in self.species_suffixes:
            return HEURISTIC
        return None

    def is_valid_biological_term(self, genus: str, species: str) -> bool:
        basis = self.acceptance_basis(genus, species)
        logger.debug(f'{genus} {species}: {basis or "rejected"}')
        return basis is not None

    @staticmethod
    def extract_context(text: str, position: int, length: int) -> str:
        """About length characters of text centered on position, trimmed."""
        half = length // 2
        start = max(0, position - half)
        end = min(len(text), position + half)
        return text[start:end].strip()


async def extract_files(extractor: GenusSpeciesExtractor,
                        filenames: Iterable[str]):
    """Yield (filename, ExtractionResult), one document at a time."""
    for filename in filenames:
        with open(filename, 'r', encoding='utf-8', errors='replace') as f:
            text = f.read()
        yield filename, await extractor.extract_terms(text)


def define_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description='Find binomial scientific names in text files.')
    parser.add_argument('file', type=str, nargs='+',
                        help='UTF-8 text files to search')
    parser.add_argument('--dataset', type=str, action='append', default=[],
                        help='Reference dataset (.csv, otherwise tab-separated); '
                        'may be repeated')
    parser.add_argument('--csv', action='store_true',
                        help='Write one CSV table of filename, genus, species, full_name')
    # Read by get_env_config(); declared here so their values are not taken as files.
    parser.add_argument('--context-length', type=int,
                        help='Characters of context around each match (default: 100)')
    parser.add_argument('--verbosity', type=int,
                        help='0=silent, 1=warnings, 2=info, 3=debug (default: 1)')
    parser.add_argument('--fetch-timeout', type=int,
                        help='Seconds to wait for an http(s) dataset (default: 30)')
    parser.add_argument('--stop-words-file', type=str,
                        help='Extra stop words, one per line')
    parser.add_argument('--dataset-sources', type=str,
                        help='Comma-separated default dataset locations')
    return parser.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    levels = {0: logging.ERROR, 1: logging.WARNING, 2: logging.INFO}
    logging.basicConfig(
        level=levels.get(verbosity, logging.DEBUG),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


async def run(args, config) -> None:
    store = ReferenceStore(sources=config['dataset_sources'],
                           timeout=config['fetch_timeout'])
    if args.dataset:
        store.load_files(args.dataset)

    stop_words = EnglishWords(filename=config['stop_words_file'] or None,
                              name='stop words')
    extractor = GenusSpeciesExtractor(store,
                                      context_length=config['context_length'],
                                      stop_words=stop_words)

    header = True
    async for filename, result in extract_files(extractor, args.file):
        if args.csv:
            write_terms_csv(result.terms, sys.stdout, filename=filename, header=header)
            header = False
            continue
        print(f'{filename}: {result.total_found} terms '
              f'({result.processing_time:.1f} ms)')
        for term in result.terms:
            print(f'  {term.position:>8}  {term.full_name:<32}  {term.context}')


def main(argv: Optional[List[str]] = None) -> None:
    args = define_args(argv)
    config = get_env_config(argv)
    configure_logging(config['verbosity'])
    asyncio.run(run(args, config))


if __name__ == '__main__':
    main()
