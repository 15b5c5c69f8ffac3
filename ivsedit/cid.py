"""
ivsedit.cid - index of Adobe-Japan1 CIDs for \\CID{} escapes

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging

from .base import CollectionName
from .constants import INTERCHANGE_COLLECTION, CID_PREFIX_LENGTH


# \CID{nnnnn} as used by the otf package for pLaTeX
CID_ESCAPE_REGEX = re.compile(r'\\CID\{(\d+)\}')


def cid_digits(name):
    """Numeric part of an interchange collection sequence name, e.g. 01234 for CID+01234."""
    return name[CID_PREFIX_LENGTH:]


def cid_escape(digits):
    """Escape form for a CID."""
    return f'\\CID{{{digits}}}'


class NumericCodeIndex:
    """CID -> variation sequence, first registration wins."""

    def __init__(self, mapping=None, *, collection=INTERCHANGE_COLLECTION):
        self.collection = CollectionName(collection)
        self._sequences = {int(_k): _v for _k, _v in (mapping or {}).items()}

    @classmethod
    def build(cls, registry, collection=INTERCHANGE_COLLECTION):
        """Build the index from a VariationRegistry."""
        collection = CollectionName(collection)
        sequences = {}
        for base, records in registry.items():
            for record in records:
                if record.collection != collection:
                    continue
                digits = cid_digits(record.name)
                if not digits.isdecimal():
                    logging.warning(
                        'Could not parse CID from sequence name %r for U+%04X',
                        record.name, base
                    )
                    continue
                cid = int(digits)
                if cid in sequences:
                    logging.debug(
                        'Ignoring redefinition of CID %d by U+%04X', cid, base
                    )
                    continue
                sequences[cid] = record.sequence(base)
        return cls(sequences, collection=collection)

    def get(self, cid, default=None):
        """Sequence for a CID."""
        return self._sequences.get(int(cid), default)

    def __getitem__(self, cid):
        return self._sequences[int(cid)]

    def __contains__(self, cid):
        return int(cid) in self._sequences

    def __iter__(self):
        return iter(self._sequences)

    def __len__(self):
        return len(self._sequences)

    def __repr__(self):
        """Representation."""
        return (
            f"{type(self).__name__}(collection='{self.collection}', "
            f"mapping=<{len(self._sequences)} CIDs>)"
        )
