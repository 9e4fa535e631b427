"""Known genus/species pairs loaded from tabular nomenclature data.

Datasets are header-row tables, comma delimited for .csv files and tab
delimited otherwise (GBIF/Catalogue of Life Taxon.tsv and NameUsage.tsv
exports work unchanged). Column names vary between sources, so each field
is resolved from a list of spellings; see resolve_row().

A store is populated either explicitly (ingest(), load_files()) or lazily
through load_default(), which tries DEFAULT_SOURCES once per store and
falls back to a small built-in dataset when none of them can be read.
"""

import asyncio
import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Set

import requests

logger = logging.getLogger(__name__)

GENUS_COLUMNS = ['Genus', 'genus', 'GENUS']
SPECIES_COLUMNS = ['Species', 'species', 'SPECIES', 'specificEpithet', 'specific_epithet']
COMBINED_COLUMNS = ['scientificName', 'canonicalName']
OPTIONAL_COLUMNS = {
    'common_name': ['Common_Name', 'commonName', 'vernacularName'],
    'kingdom': ['Kingdom', 'kingdom', 'KINGDOM'],
    'family': ['Family', 'family', 'FAMILY'],
    'author': ['Author', 'author', 'scientificNameAuthorship'],
    'year': ['Year', 'year', 'namePublishedInYear'],
}


@dataclass
class ReferenceEntry:
    """One accepted taxon.

    Only genus and species are interpreted; the other fields are carried
    through from the source row as-is.
    """
    genus: str
    species: str
    common_name: Optional[str] = None
    kingdom: Optional[str] = None
    family: Optional[str] = None
    author: Optional[str] = None
    year: Optional[str] = None

    @property
    def key(self) -> str:
        return make_key(self.genus, self.species)


MINIMAL_DATASET = [
    ReferenceEntry('Homo', 'sapiens', 'Human', 'Animalia', 'Hominidae'),
    ReferenceEntry('Canis', 'lupus', 'Gray Wolf', 'Animalia', 'Canidae'),
    ReferenceEntry('Felis', 'catus', 'Domestic Cat', 'Animalia', 'Felidae'),
    ReferenceEntry('Escherichia', 'coli', 'E. coli', 'Bacteria', 'Enterobacteriaceae'),
    ReferenceEntry('Arabidopsis', 'thaliana', 'Thale Cress', 'Plantae', 'Brassicaceae'),
    ReferenceEntry('Saccharomyces', 'cerevisiae', "Brewer's Yeast", 'Fungi', 'Saccharomycetaceae'),
]


def make_key(genus: str, species: str) -> str:
    return f'{genus} {species}'.lower()


def _first_value(row: Mapping[str, Any], columns: Iterable[str]) -> Optional[str]:
    for column in columns:
        value = row.get(column)
        if isinstance(value, str) and value.strip():
            return value
    return None


def _combined_token(row: Mapping[str, Any], index: int) -> Optional[str]:
    """Token `index` of the first combined scientific name column that has one."""
    for column in COMBINED_COLUMNS:
        value = row.get(column)
        if not isinstance(value, str):
            continue
        tokens = value.split()
        if len(tokens) > index:
            return tokens[index]
    return None


def resolve_row(row: Mapping[str, Any]) -> Optional[ReferenceEntry]:
    """Build a ReferenceEntry from one table row, or None if it is unusable.

    Genus and species come from the dedicated columns when present, and
    otherwise from the first and second words of scientificName or
    canonicalName. Both must be longer than one character after trimming.
    """
    genus = _first_value(row, GENUS_COLUMNS) or _combined_token(row, 0)
    species = _first_value(row, SPECIES_COLUMNS) or _combined_token(row, 1)
    if genus is None or species is None:
        return None
    genus = genus.strip()
    species = species.strip()
    if len(genus) <= 1 or len(species) <= 1:
        return None

    optional = {
        field: _first_value(row, columns)
        for field, columns in OPTIONAL_COLUMNS.items()
    }
    return ReferenceEntry(genus=genus, species=species, **optional)


def resolve_rows(rows: Iterable[Any]) -> Iterator[ReferenceEntry]:
    """resolve_row() over many rows, silently skipping the unusable ones."""
    for row in rows:
        try:
            entry = resolve_row(row)
        except (AttributeError, TypeError) as e:
            logger.debug(f'Dropping malformed reference row {row!r}: {e}')
            continue
        if entry is not None:
            yield entry


def parse_dataset_text(text: str, is_csv: bool = False) -> Iterator[Dict[str, str]]:
    """Yield one dict per data row of a header-row table."""
    delimiter = ',' if is_csv else '\t'
    for row in csv.DictReader(io.StringIO(text), delimiter=delimiter):
        # DictReader yields blank lines as rows of empty values.
        if any(isinstance(v, str) and v.strip() for v in row.values()):
            yield row


def is_csv_location(location: str) -> bool:
    return location.lower().endswith('.csv')


class ReferenceStore(object):
    """Constant-time membership tests over a loaded taxonomy.

    The store is effectively read-only once loaded; it only changes through
    ingest(), load_files(), load_default() or clear().
    """

    DEFAULT_SOURCES = [
        'datasets/Taxon.tsv',
        'datasets/NameUsage.tsv',
        'data/biological-terms.tsv',
    ]

    def __init__(self,
                 sources: Optional[List[str]] = None,
                 timeout: int = 30) -> None:
        self.sources = list(self.DEFAULT_SOURCES if sources is None else sources)
        self.timeout = timeout
        self._entries: Dict[str, ReferenceEntry] = {}
        self._genera: Set[str] = set()
        self._initials: Set[str] = set()
        self._loaded = False
        self._loading: Optional[asyncio.Future] = None
        # Bumped whenever the contents are replaced, so a default load that
        # started earlier knows its results are stale.
        self._generation = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'ReferenceStore(size={len(self)}, loaded={self._loaded})'

    def _reset(self) -> None:
        self._entries.clear()
        self._genera.clear()
        self._initials.clear()
        self._loaded = False
        self._loading = None
        self._generation += 1

    def _add(self, entry: ReferenceEntry) -> None:
        self._entries[entry.key] = entry
        self._genera.add(entry.genus)
        self._initials.add(entry.genus[0])

    def _add_rows(self, rows: Iterable[Any]) -> int:
        added = 0
        for entry in resolve_rows(rows):
            self._add(entry)
            added += 1
        return added

    def ingest(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """Replace the store contents with the usable rows."""
        self._reset()
        added = self._add_rows(rows)
        self._loaded = True
        logger.info(f'Ingested {added} rows, {len(self)} biological terms')

    def load_files(self, paths: Iterable[str]) -> None:
        """Replace the store contents with the union of several dataset files.

        Raises:
          OSError if a file cannot be read.
        """
        self._reset()
        count = 0
        for path in paths:
            text = Path(path).read_text(encoding='utf-8')
            self._add_rows(parse_dataset_text(text, is_csv=is_csv_location(str(path))))
            count += 1
        self._loaded = True
        logger.info(f'Loaded {len(self)} biological terms from {count} dataset files')

    async def load_default(self) -> None:
        """Load DEFAULT_SOURCES once.

        Concurrent callers share the first caller's load instead of starting
        their own. A load overtaken by ingest(), load_files() or clear()
        discards what it read; after clear() the waiting callers start a
        fresh one.
        """
        while not self._loaded:
            if self._loading is None or self._loading.cancelled():
                self._loading = asyncio.ensure_future(
                    self._load_built_in(self._generation))
            await self._loading

    def _fetch_source(self, location: str) -> str:
        if location.startswith(('http://', 'https://')):
            response = requests.get(location, timeout=self.timeout)
            response.raise_for_status()
            return response.text
        return Path(location).read_text(encoding='utf-8')

    async def _load_built_in(self, generation: int) -> None:
        entries: List[ReferenceEntry] = []
        loaded_any = False
        for location in self.sources:
            try:
                text = await asyncio.to_thread(self._fetch_source, location)
                rows = list(resolve_rows(
                    parse_dataset_text(text, is_csv=is_csv_location(location))))
            except (OSError, UnicodeDecodeError, csv.Error, requests.RequestException) as e:
                logger.warning(f'Could not load dataset from {location}: {e}')
                rows = None
            if generation != self._generation:
                logger.debug('Store was replaced during the default load; '
                             'discarding it')
                return
            if rows is None:
                continue
            logger.debug(f'{location}: {len(rows)} rows')
            entries.extend(rows)
            loaded_any = True

        if loaded_any:
            for entry in entries:
                self._add(entry)
        else:
            self.load_minimal_dataset()

        self._loaded = True
        logger.info(f'Loaded {len(self)} biological terms from built-in datasets')

    def load_minimal_dataset(self) -> None:
        for entry in MINIMAL_DATASET:
            self._add(entry)

    def is_valid_term(self, genus: str, species: str) -> bool:
        return make_key(genus, species) in self._entries

    def is_known_genus(self, genus: str) -> bool:
        # Case-sensitive, unlike is_valid_term().
        return genus in self._genera

    def is_known_abbreviation(self, initial: str) -> bool:
        """True if some known genus starts with this capital letter."""
        return initial in self._initials

    def lookup(self, genus: str, species: str) -> Optional[ReferenceEntry]:
        return self._entries.get(make_key(genus, species))

    def all_entries(self) -> List[ReferenceEntry]:
        return list(self._entries.values())

    def size(self) -> int:
        return len(self._entries)

    def is_loaded(self) -> bool:
        return self._loaded

    def clear(self) -> None:
        """Forget everything, including a finished load_default()."""
        self._reset()
