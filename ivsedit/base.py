"""
ivsedit.base - base classes and functions

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from importlib import import_module


class NotFoundError(KeyError):
    """Table or table file not found."""


class CollectionName(str):
    """Name of an IVD collection, matched loosely."""

    def __new__(cls, value=''):
        """Keep the given spelling for display."""
        return super().__new__(cls, str(value).strip())

    def __eq__(self, other):
        """Check if two names match."""
        if not isinstance(other, str):
            return NotImplemented
        return self._normalise_for_match() == CollectionName(other)._normalise_for_match()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return str.__hash__(self._normalise_for_match())

    def __repr__(self):
        return f"{type(self).__name__}('{self}')"

    def _normalise_for_match(self):
        """Normalise names to base form."""
        # all lowercase, remove spaces, dashes, underscores and dots
        name = str(self).lower()
        for char in '._- ':
            name = name.replace(char, '')
        return name


def to_collections(names):
    """Convert a comma-separated string or a sequence to collection names."""
    if isinstance(names, str):
        names = names.split(',')
    return tuple(CollectionName(_n) for _n in names if str(_n).strip())


def safe_import(module_name, name=None, feature=''):
    """
    Import an optional module, or attribute of it; None if not available.

    feature: description of what needs the module, for the log
    """
    item = None
    try:
        module = import_module(module_name)
    except ImportError as e:
        logging.debug(
            'Module `%s` not available%s: %s',
            module_name, f', {feature} disabled' if feature else '', e
        )
    except Exception as e:
        logging.warning('Error while importing module `%s`: %s', module_name, e)
    else:
        item = getattr(module, name) if name else module
    return item
