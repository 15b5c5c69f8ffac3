"""
ivsedit.sequences - registry of ideographic variation sequences

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging
from collections import namedtuple

from .base import NotFoundError, CollectionName, safe_import
from .readers import table_reader
from .unicode import is_selector

ttLib = safe_import('fontTools.ttLib', feature='reading sequences from fonts')


# refer to https://www.unicode.org/reports/tr37/ for a description of the format
# e.g. 4E9C E0100; Adobe-Japan1; CID+1125
SEQ_REGEX = re.compile(
    r'\s*([0-9A-Fa-f]+)\s+([0-9A-Fa-f]+)\s*;\s*([^;\s][^;]*?)\s*;\s*(\S.*?)\s*'
)


class VariationRecord(namedtuple('VariationRecord', ('selector', 'collection', 'name'))):
    """One registered variation of a base character in one collection."""

    __slots__ = ()

    def __new__(cls, selector, collection, name):
        return super().__new__(cls, int(selector), CollectionName(collection), str(name))

    def sequence(self, base):
        """Base character followed by this record's selector."""
        if isinstance(base, int):
            base = chr(base)
        return base + chr(self.selector)


def _to_codepoint(char):
    """Convert single-character string or code point to code point."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f'Expected a single character, got {char!r}')
        return ord(char)
    return int(char)


class VariationRegistry:
    """Base characters with their registered variation sequences."""

    def __init__(self, mapping=None, *, name=''):
        """Create registry from a dict of code point -> iterable of VariationRecord."""
        self.name = name
        self._records = {
            _to_codepoint(_base): tuple(VariationRecord(*_rec) for _rec in _records)
            for _base, _records in (mapping or {}).items()
        }

    @classmethod
    def load(cls, filename):
        """Read registry from an IVD_Sequences.txt file."""
        return cls(_read_sequences(filename), name=str(filename))

    @classmethod
    def from_font(cls, filename, collection, *, font_number=0):
        """Read registry from the format-14 cmap subtable of an sfnt font."""
        return cls(_read_font_sequences(filename, collection, font_number), name=str(filename))

    def get(self, base):
        """Records for a base character or code point, in registration order."""
        return self._records.get(_to_codepoint(base), ())

    def match(self, base, selector):
        """Records registering exactly the given selector for the base character."""
        if isinstance(selector, str):
            if len(selector) != 1:
                return ()
            selector = ord(selector)
        return tuple(_rec for _rec in self.get(base) if _rec.selector == selector)

    def collections(self, base):
        """Dict of collection -> selectors for the base character, in registration order."""
        groups = {}
        for record in self.get(base):
            groups.setdefault(record.collection, []).append(record.selector)
        return groups

    def collection_names(self):
        """All collections in the registry, in order of first appearance."""
        names = {}
        for records in self._records.values():
            for record in records:
                names.setdefault(record.collection, None)
        return tuple(names)

    def items(self):
        """Iterate over (base code point, records) pairs in registration order."""
        return iter(self._records.items())

    def __contains__(self, base):
        try:
            return _to_codepoint(base) in self._records
        except ValueError:
            return False

    def __iter__(self):
        """Iterate over base code points in registration order."""
        return iter(self._records)

    def __len__(self):
        """Number of base characters."""
        return len(self._records)

    def __repr__(self):
        """Representation."""
        return (
            f"{type(self).__name__}(name='{self.name}', "
            f"mapping=<{len(self._records)} base characters>)"
        )


###############################################################################
# table readers

@table_reader
def _read_sequences(lines):
    """Extract variation sequences from lines of an IVD_Sequences.txt file."""
    sequences = {}
    for line in lines:
        if not line or line.startswith('#'):
            continue
        match = SEQ_REGEX.fullmatch(line)
        if not match:
            logging.debug('Skipping line in sequences file: %r', line)
            continue
        base, selector, collection, name = match.groups()
        base, selector = int(base, 16), int(selector, 16)
        if not is_selector(selector):
            logging.debug('Not a variation selector: %r', line)
            continue
        sequences.setdefault(base, []).append(VariationRecord(selector, collection, name))
    return sequences


def _read_font_sequences(filename, collection, font_number=0):
    """Extract variation sequences from an sfnt font's format-14 cmap subtable."""
    if not ttLib:
        raise NotFoundError(
            'Reading sequences from fonts requires package `fontTools`, '
            'which is not available.'
        )
    try:
        font = ttLib.TTFont(str(filename), fontNumber=font_number, lazy=True)
    except (ttLib.TTLibError, EnvironmentError) as exc:
        raise NotFoundError(f'Could not load font file `{filename}`: {exc}') from exc
    with font:
        cmap = font['cmap']
        uvs_tables = [_t for _t in cmap.tables if _t.format == 14]
        if not uvs_tables:
            logging.warning('No variation sequences (cmap format 14) in `%s`', filename)
            return {}
        best_cmap = cmap.getBestCmap() or {}
        # dict of selector -> list of (base, glyph name); glyph name None for the default glyph
        pairs = []
        for uvs_table in uvs_tables:
            for selector, entries in uvs_table.uvsDict.items():
                for base, glyph_name in entries:
                    if glyph_name is None:
                        glyph_name = best_cmap.get(base, '')
                    pairs.append((selector, base, glyph_name))
    sequences = {}
    for selector, base, glyph_name in sorted(pairs, key=lambda _p: _p[:2]):
        sequences.setdefault(base, []).append(VariationRecord(selector, collection, glyph_name))
    return sequences
