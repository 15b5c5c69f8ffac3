"""
ivsedit.oldstyle - registry of old-style character forms

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging

from .readers import table_reader
from .unicode import SELECTOR_CLASS


# modern character, optional selector, tab, historical character, optional selector
OLDSTYLE_REGEX = re.compile(
    rf'([^\t\s]){SELECTOR_CLASS}?\t([^\t\s]{SELECTOR_CLASS}?)\s*'
)


class OldStyleRegistry:
    """Modern characters with their historical variant forms."""

    def __init__(self, mapping=None, *, name=''):
        """Create registry from a dict of modern character -> iterable of variant strings."""
        self.name = name
        self._variants = {
            (ord(_char) if isinstance(_char, str) else int(_char)): tuple(_variants)
            for _char, _variants in (mapping or {}).items()
        }

    @classmethod
    def load(cls, filename):
        """Read registry from a tab-separated old-style table file."""
        return cls(_read_oldstyle(filename), name=str(filename))

    def get(self, char):
        """Historical variants of a modern character, in file order."""
        if isinstance(char, str):
            if len(char) != 1:
                return ()
            char = ord(char)
        return self._variants.get(char, ())

    def __contains__(self, char):
        return bool(self.get(char))

    def __iter__(self):
        """Iterate over modern code points."""
        return iter(self._variants)

    def __len__(self):
        return len(self._variants)

    def __repr__(self):
        """Representation."""
        return (
            f"{type(self).__name__}(name='{self.name}', "
            f"mapping=<{len(self._variants)} characters>)"
        )


@table_reader
def _read_oldstyle(lines):
    """Extract old-style variants from lines of a tab-separated table."""
    variants = {}
    for line in lines:
        if not line or line.startswith('#'):
            continue
        match = OLDSTYLE_REGEX.fullmatch(line)
        if not match:
            logging.debug('Skipping line in old-style file: %r', line)
            continue
        modern, historical = match.groups()
        variants.setdefault(ord(modern), []).append(historical)
    return variants
