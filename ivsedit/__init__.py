"""
ivsedit - tools for working with ideographic variation sequences

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .constants import DEFAULT_PREFERENCE, INTERCHANGE_COLLECTION
from .base import NotFoundError, CollectionName
from .sequences import VariationRecord, VariationRegistry
from .oldstyle import OldStyleRegistry
from .cid import NumericCodeIndex
from .definitions import Tables, load_tables, default_tables
from .text import TextBuffer
from .transforms import (
    insert_or_verify, to_cid, from_cid, to_old_style,
    find_non_member, non_members,
)
