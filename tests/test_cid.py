"""
ivsedit test suite
CID index tests
"""

from ivsedit import NumericCodeIndex, VariationRegistry
from ivsedit.cid import cid_escape, cid_digits, CID_ESCAPE_REGEX
from .base import BaseTester, seq


class TestNumericCodeIndex(BaseTester):
    """Test the CID index derived from the variation registry."""

    def test_index(self):
        cids = self.tables.cids
        assert cids[1234] == self.a_aj1
        assert cids[7652] == self.katsura_aj1_alt
        assert cids[1643] == seq('吉', 0xE0100)

    def test_first_registration_wins(self):
        # CID+1481 is registered for both U+845B and U+8FBB
        assert self.tables.cids[1481] == self.katsura_aj1

    def test_only_interchange_collection(self):
        assert sorted(self.tables.cids) == [1234, 1481, 1643, 7652], sorted(self.tables.cids)

    def test_unparseable_name_skipped(self):
        # CID+ABC for U+8FBB does not produce an entry
        assert seq('辻', 0xE0101) not in (self.tables.cids.get(_c) for _c in self.tables.cids)

    def test_missing(self):
        assert self.tables.cids.get(99) is None
        assert 99 not in self.tables.cids

    def test_other_collection(self):
        cids = NumericCodeIndex.build(self.tables.sequences, collection='Hanyo-Denshi')
        # names are parsed from a fixed offset; HD-01 gives 1
        assert cids[1] == self.a_hd, cids.get(1)

    def test_build_synthetic(self):
        registry = VariationRegistry({
            0x4E9C: [(0xE0100, 'Adobe-Japan1', 'CID+10'), (0xE0101, 'Adobe-Japan1', 'CID+10')],
        })
        cids = NumericCodeIndex.build(registry)
        assert len(cids) == 1
        assert cids[10] == self.a_aj1


class TestEscapes(BaseTester):
    """Test CID escape helpers."""

    def test_digits(self):
        assert cid_digits('CID+01234') == '01234'

    def test_escape(self):
        assert cid_escape('01234') == '\\CID{01234}'

    def test_regex(self):
        matches = [_m.group(1) for _m in CID_ESCAPE_REGEX.finditer(r'\CID{12} \CID{} \CID{x1} \CID{0034}')]
        assert matches == ['12', '0034'], matches
