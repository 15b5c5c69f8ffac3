"""
ivsedit.definitions - table construction

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from functools import lru_cache
from collections import namedtuple

from .sequences import VariationRegistry
from .oldstyle import OldStyleRegistry
from .cid import NumericCodeIndex
from .constants import INTERCHANGE_COLLECTION


# default table file names, relative to the tables location
SEQUENCES_FILE = 'IVD_Sequences.txt'
OLDSTYLE_FILE = 'oldstyle.txt'


class Tables(namedtuple('Tables', ('sequences', 'oldstyle', 'cids'))):
    """Read-only tables used by the transforms."""

    __slots__ = ()

    @classmethod
    def build(cls, sequences, oldstyle=None, collection=INTERCHANGE_COLLECTION):
        """Bundle registries and derive the CID index."""
        if oldstyle is None:
            oldstyle = OldStyleRegistry()
        return cls(sequences, oldstyle, NumericCodeIndex.build(sequences, collection))


def load_tables(sequences_file=None, oldstyle_file=None):
    """Construct all tables from the table files; raise NotFoundError if one is missing."""
    sequences = VariationRegistry.load(sequences_file or SEQUENCES_FILE)
    oldstyle = OldStyleRegistry.load(oldstyle_file or OLDSTYLE_FILE)
    tables = Tables.build(sequences, oldstyle)
    logging.debug(
        'Loaded %d base characters, %d old-style characters, %d CIDs',
        len(tables.sequences), len(tables.oldstyle), len(tables.cids)
    )
    return tables


@lru_cache(maxsize=None)
def default_tables():
    """Tables from the default locations, constructed once per process."""
    return load_tables()
