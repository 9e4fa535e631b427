"""Word lists used to judge candidate binomials.

EnglishWords rejects common prose ("The cat", "Many species"). GenusFragments
and SpeciesSuffixes are the morphological fallback used when the reference
data has nothing to say about a pair.
"""

from typing import Iterator

from .tokenizer import HashTokenizer, Tokenizer


class EnglishWords(HashTokenizer):
    """High-frequency English words that are never part of a binomial."""

    _words = [
        'the', 'and', 'for', 'are', 'but', 'not', 'you', 'all', 'can', 'had',
        'was', 'one', 'our', 'out', 'day', 'get', 'has', 'him', 'his', 'how',
        'man', 'new', 'now', 'old', 'see', 'two', 'way', 'who', 'boy', 'did',
        'its', 'let', 'put', 'say', 'she', 'too', 'use', 'about', 'after',
        'again', 'against', 'also', 'any', 'because', 'been', 'before',
        'being', 'between', 'both', 'came', 'come', 'could', 'does', 'each',
        'even', 'first', 'from', 'give', 'good', 'great', 'have', 'here',
        'into', 'just', 'know', 'last', 'life', 'like', 'little', 'long',
        'look', 'made', 'make', 'many', 'may', 'more', 'most', 'much', 'must',
        'never', 'only', 'other', 'over', 'own', 'right', 'said', 'same',
        'should', 'since', 'some', 'still', 'such', 'take', 'than', 'that',
        'their', 'them', 'there', 'these', 'they', 'this', 'those', 'through',
        'time', 'under', 'until', 'very', 'want', 'water', 'well', 'were',
        'what', 'when', 'where', 'which', 'while', 'will', 'with', 'work',
        'would', 'year', 'your', 'able', 'above', 'across', 'add', 'almost',
        'along', 'always', 'among', 'another', 'around', 'away', 'back',
        'become', 'began', 'begin', 'behind', 'below', 'best', 'better', 'big',
        'black', 'bring', 'build', 'call', 'cannot', 'case', 'change', 'close',
        'country', 'course', 'cut', 'different', 'done', 'down', 'during',
        'early', 'end', 'enough', 'every', 'example', 'eye', 'face', 'fact',
        'family', 'far', 'feel', 'few', 'find', 'follow', 'found', 'general',
        'government', 'group', 'hand', 'hard', 'head', 'help', 'high', 'home',
        'however', 'important', 'include', 'interest', 'keep', 'kind', 'large',
        'later', 'learn', 'leave', 'left', 'level', 'line', 'live', 'local',
        'lot', 'might', 'money', 'move', 'name', 'national', 'need', 'next',
        'night', 'number', 'off', 'often', 'open', 'order', 'part', 'people',
        'place', 'point', 'possible', 'power', 'problem', 'program', 'provide',
        'public', 'question', 'real', 'reason', 'report', 'result', 'room',
        'run', 'school', 'seem', 'service', 'set', 'several', 'show', 'side',
        'small', 'social', 'something', 'start', 'state', 'story', 'study',
        'system', 'tell', 'think', 'though', 'today', 'together', 'turn',
        'understand', 'upon', 'used', 'using', 'value', 'various', 'week',
        'white', 'within', 'without', 'word', 'words', 'working', 'world',
        'write', 'young',
    ]

    def read_records(self) -> Iterator[str]:
        for word in self._words:
            yield(word)


class GenusFragments(Tokenizer):
    """Greek and Latin roots found anywhere inside a genus name."""

    _fragments = [
        'amphi', 'anthus', 'antho', 'arch', 'archi', 'archaeo', 'arctos',
        'arcto', 'phago', 'bacter', 'coccus', 'phyta', 'myces', 'virus',
        'rhiza', 'ptera', 'cephalus', 'therium', 'quadri', 'un', 'xanthos',
        'zoster', 'zygos', 'ulmus', 'ulos', 'unus', 'ura', 'actino', 'aero',
        'allo', 'angio', 'baro', 'bath', 'brachy', 'brady', 'caco', 'cardio',
        'caryo', 'chloro', 'crypto', 'cyano', 'dendr', 'derm', 'dipl',
        'glabro', 'glauc', 'gyno', 'heli', 'hemi', 'macro', 'micro', 'mono',
        'poly', 'pseudo', 'rhizo', 'rhodo', 'stoma', 'stachy', 'tricho',
        'xero', 'zo',
    ]

    def read_records(self) -> Iterator[str]:
        for word in self._fragments:
            yield(word)


class SpeciesSuffixes(Tokenizer):
    """Endings typical of Latin and Greek specific epithets."""

    _suffixes = [
        'aceus', 'acus', 'alis', 'anus', 'arius', 'ascens', 'atus', 'ella',
        'ensis', 'escens', 'etta', 'eus', 'ians', 'ianus', 'ica', 'icus',
        'ineus', 'inus', 'ioides', 'ops', 'opsis', 'osus', 'otus', 'ullus',
        'ulus', 'urus', 'utus', 'issimus', 'ellus', 'culus', 'vorus', 'aceous',
        'acious', 'iferous', 'cellus', 'cillus', 'cule', 'escent', 'estris',
        'iana', 'ianum', 'icum', 'ineae', 'itic', 'ius', 'oides', 'oideus',
        'ose', 'ulum', 'uus', 'ana', 'anum', 'elongatus', 'emarginatus',
        'adal', 'adicus', 'adiscens', 'aneus', 'aria', 'icans', 'idis', 'inae',
        'itos', 'ium', 'oticus', 'ulosus', 'uta', 'uous', 'aster', 'astrum',
        'cola', 'fer', 'fera', 'ferum', 'fugus', 'ger', 'gera', 'gerum',
        'legus', 'lentus', 'morphus', 'nomen', 'nomia', 'philus', 'phila',
        'phobus', 'phobia', 'podus', 'pedis', 'soma', 'somus', 'stomus',
        'trophus', 'cula', 'culum', 'iscus', 'isca', 'unculus', 'uncula',
        'icola', 'igenus', 'igena', 'ivagus', 'faciens', 'fluus', 'genus',
        'gena', 'parus', 'volus', 'ior', 'ulentus', 'stasis', 'clast', 'plasm',
        'phyte', 'cyte', 'blast', 'zoon', 'zoa', 'phyll', 'phyl', 'karyon',
        'mycin', 'tome', 'tropin', 'phrenia', 'lemma', 'logy', 'lysis',
        'logous', 'mer', 'some', 'scope', 'chrome', 'rrhiza', 'rrhizae',
        'rrhea', 'rrheic', 'plasia', 'phoresis', 'poiesis', 'thrix', 'rrhaphy',
        'carp', 'cyst', 'spor', 'thelial', 'gamy', 'gyny', 'andry', 'dactyl',
        'odont', 'gnath', 'derm', 'onych', 'saur', 'poda', 'glossa', 'rrhine',
        'pteryx', 'tarsus', 'rhinus', 'gaster', 'hylus', 'nectes', 'tylus',
        'cheirus', 'brachia', 'natha', 'branchia', 'stoma', 'thamnus', 'taxis',
        'tomeus', 'trochus', 'vulva', 'tricha', 'theca', 'lobus', 'calyx',
        'nectar', 'carpa', 'xenus', 'stigma', 'zoite', 'somae', 'plast',
        'phobous', 'philous', 'chore', 'morphous', 'coccus', 'spora', 'zoma',
        'strobila', 'ferax', 'gnatha', 'trix', 'metra', 'phane', 'salpinx',
        'chela', 'rhyncha', 'al', 'ens', 'idae', 'idius', 'ina', 'i', 'ii',
        'ia', 'iae', 'ae', 'ula', 'ulae', 'ullum', 'uros', 'zygous', 'genic',
        'genous', 'trophic', 'cephalus', 'dermis', 'dactylus', 'gnathus',
        'onychus', 'phyllus', 'phyllum', 'phylloides', 'phagus', 'myces',
        'carpus', 'cystis', 'zoic', 'otica', 'osum', 'ous', 'ura', 'urae',
        'opsida', 'phyta', 'phyceae', 'mycota', 'mycotina', 'mycotinae',
        'aceae', 'ales', 'oideae', 'ida', 'oidea', 'optera', 'theria',
        'morpha', 'formes', 'styla', 'stylus', 'genia', 'biont', 'phytae',
        'cota', 'nema', 'plasma', 'plastida', 'phytum', 'mycoides', 'bacter',
        'bacteria', 'troph', 'phytin', 'zygote', 'a', 'aticus', 'asis', 'ata',
        'atum', 'entis', 'ensiformis', 'esis', 'eum', 'ifer', 'ifera',
        'iferum', 'iformis', 'ilis', 'illa', 'illus', 'incola', 'ingens',
        'irix', 'ita', 'itae', 'itum', 'iiformis', 'lenta', 'loba', 'merus',
        'mycetes', 'oma', 'onema', 'ornis', 'ourus', 'ovum', 'ozoa', 'peda',
        'pelta', 'pennatus', 'peps', 'pexy', 'phage', 'pharynx', 'phile',
        'phobic', 'phorum', 'phyton', 'plax', 'pleura', 'podium', 'pogon',
        'pogonum', 'polis', 'pore', 'porus', 'pseudus', 'pus', 'pyga', 'pygus',
        'raphe', 'rhaphe', 'rhina', 'rhinae', 'rhis', 'rhiza', 'rhizae',
        'rrhineus', 'saurus', 'schis', 'sclerus', 'sclerotica', 'scolex',
        'sida', 'siphon', 'spina', 'sperm', 'sporium', 'stachys', 'stele',
        'stenia', 'sucta', 'sulcus', 'sutura', 'symbiosis', 'teleia', 'telos',
        'tendineus', 'terata', 'tergum', 'teria', 'terium', 'therium', 'tibia',
        'toma', 'tomus', 'tomy', 'tonus', 'topus', 'trichae', 'trichia',
        'trichous', 'tropes', 'tropia', 'ularis', 'ule', 'ulatus', 'ulosis',
        'urale', 'urceus', 'uris', 'urous', 'uteus', 'utia', 'ux', 'vaginatus',
        'valens', 'valent', 'velum', 'ventris', 'veris', 'verse', 'vestis',
        'villus', 'virens', 'virus', 'xeros', 'xoma', 'xylon', 'xys', 'zoid',
        'zoster', 'zuma',
    ]

    def read_records(self) -> Iterator[str]:
        for word in self._suffixes:
            yield(word)

    def make_pattern(self, word: str) -> str:
        pattern = super(SpeciesSuffixes, self).make_pattern(word)
        return pattern + '$'
