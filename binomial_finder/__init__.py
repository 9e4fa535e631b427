"""
Binomial name finder

Detects scientific names (Genus species) in plain text, validating each
candidate against a reference taxonomy with a morphological fallback.
"""

from .extractor import GenusSpeciesExtractor
from .reference_store import ReferenceEntry, ReferenceStore, parse_dataset_text
from .scanner import Candidate, normalize_text
from .terms import BiologicalTerm, ExtractionResult, write_terms_csv

__version__ = "0.1.0"
__all__ = [
    "GenusSpeciesExtractor",
    "ReferenceEntry",
    "ReferenceStore",
    "parse_dataset_text",
    "Candidate",
    "normalize_text",
    "BiologicalTerm",
    "ExtractionResult",
    "write_terms_csv",
]
