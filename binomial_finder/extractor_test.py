import asyncio
import csv
import io
import textwrap
import unittest
from unittest import mock

import pytest

from . import extractor
from .extractor import GENUS, HEURISTIC, REFERENCE, GenusSpeciesExtractor
from .reference_store import MINIMAL_DATASET, ReferenceStore
from .vocabulary import EnglishWords


def make_extractor(rows=None, **kwargs) -> GenusSpeciesExtractor:
    """An extractor over exactly these rows; None means the default load."""
    store = ReferenceStore(sources=[])
    if rows is not None:
        store.ingest(rows)
    return GenusSpeciesExtractor(store, **kwargs)


def extract(ex: GenusSpeciesExtractor, text):
    return asyncio.run(ex.extract_terms(text))


class TestScenarios(unittest.TestCase):

    def test_exact_reference_match(self):
        ex = make_extractor([{'genus': 'Escherichia', 'species': 'coli'}])
        result = extract(ex, 'Escherichia coli is a bacterium.')
        self.assertEqual(result.total_found, 1)
        term = result.terms[0]
        self.assertEqual(term.full_name, 'Escherichia coli')
        self.assertEqual(term.genus, 'Escherichia')
        self.assertEqual(term.species, 'coli')
        self.assertEqual(term.position, 0)
        self.assertEqual(term.confidence, 100)
        self.assertEqual(term.context, 'Escherichia coli is a bacterium.')
        self.assertEqual(result.accuracy, 100)

    def test_abbreviated_genus_via_known_genus(self):
        ex = make_extractor([{'genus': 'Escherichia', 'species': 'coli'}])
        result = extract(ex, 'E. coli grows fast.')
        self.assertEqual(result.total_found, 1)
        term = result.terms[0]
        self.assertEqual(term.genus, 'E')
        self.assertEqual(term.species, 'coli')
        self.assertEqual(term.full_name, 'E. coli')
        self.assertEqual(term.position, 0)
        self.assertEqual(ex.acceptance_basis('E.', 'coli'), GENUS)

    def test_capitalized_words(self):
        ex = make_extractor([{'genus': 'Escherichia', 'species': 'coli'}])
        self.assertEqual(extract(ex, 'The Dog ran.').terms, [])

    def test_heuristic_without_reference_data(self):
        ex = make_extractor([])
        result = extract(ex, 'Xanthomonas oryzae causes blight.')
        self.assertEqual(result.full_names(), ['Xanthomonas oryzae'])
        self.assertEqual(ex.acceptance_basis('Xanthomonas', 'oryzae'), HEURISTIC)

    def test_duplicates_reported_once(self):
        ex = make_extractor()
        result = extract(ex, 'Homo sapiens. Later, Homo sapiens again.')
        self.assertEqual(result.total_found, 1)
        self.assertEqual(result.terms[0].full_name, 'Homo sapiens')
        self.assertEqual(result.terms[0].position, 0)


class TestAcceptancePolicy(unittest.TestCase):

    def test_reference_match_beats_failed_heuristic(self):
        self.assertEqual(extract(make_extractor([]), 'Dog ran').terms, [])

        ex = make_extractor([{'genus': 'Dog', 'species': 'ran'}])
        self.assertEqual(ex.acceptance_basis('Dog', 'ran'), REFERENCE)
        self.assertEqual(extract(ex, 'Dog ran').full_names(), ['Dog ran'])

    def test_known_genus_ignores_species(self):
        ex = make_extractor([{'genus': 'Dog', 'species': 'barks'}])
        self.assertEqual(ex.acceptance_basis('Dog', 'ran'), GENUS)

    def test_reference_lookup_is_case_insensitive(self):
        ex = make_extractor([{'genus': 'dog', 'species': 'RAN'}])
        self.assertEqual(ex.acceptance_basis('Dog', 'ran'), REFERENCE)

    def test_known_genus_is_case_sensitive(self):
        ex = make_extractor([{'genus': 'DOG', 'species': 'barks'}])
        self.assertIsNone(ex.acceptance_basis('Dog', 'ran'))
        self.assertEqual(extract(ex, 'Dog ran').terms, [])

    def test_structure(self):
        ex = make_extractor([{'genus': 'Homo', 'species': 'sapiens'}])
        # Species too short, even with a known genus.
        self.assertIsNone(ex.acceptance_basis('Homo', 'sa'))
        self.assertIsNone(ex.acceptance_basis('HOmo', 'sapiens'))
        self.assertIsNone(ex.acceptance_basis('Homo', 'Sapiens'))
        self.assertIsNone(ex.acceptance_basis('Ho.', 'sapiens'))
        self.assertFalse(ex.is_valid_biological_term('Homo', 'sa'))
        self.assertTrue(ex.is_valid_biological_term('Homo', 'sapiens'))

    def test_unknown_abbreviation_uses_heuristic(self):
        ex = make_extractor([])
        self.assertEqual(ex.acceptance_basis('Q.', 'robur'), None)
        self.assertEqual(ex.acceptance_basis('S.', 'aureus'), HEURISTIC)


class TestExtractTerms(unittest.TestCase):

    def test_common_words_only(self):
        ex = make_extractor([])
        text = 'The cat. Very many. Many species. Some water.'
        self.assertEqual(extract(ex, text).total_found, 0)

    def test_empty_text(self):
        result = extract(make_extractor(), '')
        self.assertEqual(result.terms, [])
        self.assertEqual(result.total_found, 0)

    def test_rejects_non_text(self):
        with self.assertRaises(TypeError):
            extract(make_extractor(), None)
        with self.assertRaises(TypeError):
            extract(make_extractor(), b'Homo sapiens')

    def test_ordered_by_position(self):
        ex = make_extractor()
        result = extract(ex, 'E. coli lives alongside Homo sapiens and Canis lupus.')
        self.assertEqual(result.full_names(),
                         ['E. coli', 'Homo sapiens', 'Canis lupus'])
        positions = [term.position for term in result.terms]
        self.assertEqual(positions, sorted(positions))
        self.assertEqual(result.total_found, len(result.terms))

    def test_genus_roots_are_not_stop_words(self):
        ex = make_extractor([{'genus': 'Ulmus', 'species': 'americana'}])
        result = extract(
            ex, 'Ulmus americana and Varicella zoster and Pseudomonas virus.')
        self.assertEqual(result.full_names(),
                         ['Ulmus americana', 'Varicella zoster', 'Pseudomonas virus'])
        self.assertEqual(ex.acceptance_basis('Ulmus', 'americana'), REFERENCE)
        self.assertEqual(ex.acceptance_basis('Varicella', 'zoster'), HEURISTIC)

    def test_abbreviated_and_full_forms_both_kept(self):
        ex = make_extractor()
        result = extract(ex, 'Escherichia coli, also written E. coli, or e. coli.')
        self.assertEqual(result.full_names(), ['Escherichia coli', 'E. coli'])

    def test_positions_refer_to_normalized_text(self):
        ex = make_extractor()
        result = extract(ex, '  Look:\n\n   Homo \t sapiens  ')
        term = result.terms[0]
        self.assertEqual(term.full_name, 'Homo sapiens')
        self.assertEqual(term.position, len('Look: '))

    def test_idempotent(self):
        ex = make_extractor()
        text = textwrap.dedent("""\
            Arabidopsis thaliana and Felis catus were sampled.
            E. coli was grown. Xanthomonas oryzae too.""")
        first = extract(ex, text)
        second = extract(ex, text)
        self.assertEqual(first.terms, second.terms)
        self.assertEqual(first.total_found, second.total_found)
        self.assertEqual(first.accuracy, second.accuracy)

    def test_context_window(self):
        ex = make_extractor(context_length=20)
        text = 'a' * 30 + ' Homo sapiens ' + 'b' * 30
        term = extract(ex, text).terms[0]
        self.assertEqual(term.position, 31)
        self.assertEqual(term.context, 'aaaaaaaaa Homo sapie')

    def test_custom_stop_words(self):
        ex = make_extractor(stop_words=EnglishWords(data=['sapiens']))
        self.assertEqual(extract(ex, 'Homo sapiens').terms, [])

    def test_loads_reference_data_on_first_use(self):
        store = ReferenceStore(sources=[])
        ex = GenusSpeciesExtractor(store)
        self.assertFalse(store.is_loaded())
        result = extract(ex, 'Canis lupus')
        self.assertTrue(store.is_loaded())
        self.assertEqual(store.size(), len(MINIMAL_DATASET))
        self.assertEqual(result.full_names(), ['Canis lupus'])

    def test_concurrent_extractions_share_one_load(self):
        store = ReferenceStore(sources=['a.tsv'])
        ex = GenusSpeciesExtractor(store)

        async def both():
            return await asyncio.gather(ex.extract_terms('Homo sapiens'),
                                        ex.extract_terms('Felis catus'))

        with mock.patch.object(store, '_fetch_source',
                               side_effect=OSError('no such file')) as fetch:
            results = asyncio.run(both())
        self.assertEqual(fetch.call_count, 1)
        self.assertEqual([r.full_names() for r in results],
                         [['Homo sapiens'], ['Felis catus']])


class TestExtractContext(unittest.TestCase):

    def test_centered(self):
        self.assertEqual(GenusSpeciesExtractor.extract_context('abcdefghij', 5, 4), 'defg')

    def test_clipped_and_trimmed(self):
        self.assertEqual(GenusSpeciesExtractor.extract_context(' abc ', 0, 100), 'abc')


class TestMain:
    """Tests for the command line."""

    def test_csv_output(self, tmp_path, capsys):
        dataset = tmp_path / 'names.csv'
        dataset.write_text('scientificName\nHomo sapiens\n', encoding='utf-8')
        doc1 = tmp_path / 'one.txt'
        doc1.write_text('Homo sapiens and Canis lupus.', encoding='utf-8')
        doc2 = tmp_path / 'two.txt'
        doc2.write_text('Nothing here.', encoding='utf-8')

        extractor.main(['--dataset', str(dataset), '--csv', '--verbosity', '0',
                        str(doc1), str(doc2)])

        rows = list(csv.DictReader(io.StringIO(capsys.readouterr().out)))
        # Canis lupus is not in the dataset; it passes on its epithet ending.
        assert rows == [
            {'filename': str(doc1), 'genus': 'Homo', 'species': 'sapiens',
             'full_name': 'Homo sapiens'},
            {'filename': str(doc1), 'genus': 'Canis', 'species': 'lupus',
             'full_name': 'Canis lupus'},
        ]

    def test_summary_output(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setenv('BINOMIAL_DATASETS', str(tmp_path / 'missing.tsv'))
        doc = tmp_path / 'doc.txt'
        doc.write_text('Felis catus sleeps.', encoding='utf-8')

        extractor.main(['--verbosity', '0', str(doc)])

        out = capsys.readouterr().out
        assert f'{doc}: 1 terms' in out
        assert 'Felis catus' in out

    def test_requires_files(self):
        with pytest.raises(SystemExit):
            extractor.main([])


if __name__ == '__main__':
    unittest.main()
