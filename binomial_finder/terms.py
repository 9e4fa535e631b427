"""Results of an extraction run."""

import csv
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Iterable, List, Optional, TextIO

CONFIDENCE = 100
ACCURACY = 100


@dataclass
class BiologicalTerm:
    """One accepted binomial.

    Attributes:
        genus: Genus token with any trailing period removed ("E" for "E. coli")
        species: Specific epithet as it appeared in the text
        full_name: Genus token and species as matched, e.g. "E. coli"
        context: Normalized text surrounding the match
        confidence: Always CONFIDENCE, whichever rule accepted the term
        position: Offset of the match in the normalized text
    """
    FIELDNAMES: ClassVar[List[str]] = ['genus', 'species', 'full_name']

    genus: str
    species: str
    full_name: str
    context: str
    confidence: int
    position: int

    def as_row(self) -> Dict[str, str]:
        """Flat projection for tabular export."""
        return {name: getattr(self, name) for name in self.FIELDNAMES}


@dataclass
class ExtractionResult:
    terms: List[BiologicalTerm]
    processing_time: float  # Milliseconds.
    accuracy: int = ACCURACY
    total_found: int = field(init=False)

    def __post_init__(self):
        self.total_found = len(self.terms)

    def full_names(self) -> List[str]:
        return [term.full_name for term in self.terms]


def write_terms_csv(terms: Iterable[BiologicalTerm],
                    stream: TextIO,
                    filename: Optional[str] = None,
                    header: bool = True) -> None:
    """Write genus, species and full_name columns.

    With filename, a leading filename column tags every row so the output
    of several documents can be concatenated into one table.
    """
    fieldnames = BiologicalTerm.FIELDNAMES
    if filename is not None:
        fieldnames = ['filename'] + fieldnames
    writer = csv.DictWriter(stream, fieldnames=fieldnames)
    if header:
        writer.writeheader()
    for term in terms:
        row = term.as_row()
        if filename is not None:
            row['filename'] = filename
        writer.writerow(row)
