"""
ivsedit.readers - locating and reading table files

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import logging
from pathlib import Path
from functools import wraps
from importlib.resources import files

from .base import NotFoundError
from . import tables


# environment variable naming a directory with table files
TABLES_ENV = 'IVSEDIT_TABLES'


def table_location():
    """Directory where table files are looked up by default."""
    location = os.environ.get(TABLES_ENV, '')
    if location:
        return Path(location)
    return files(tables)


def locate_table(filename):
    """Resolve table file name to a path; raise NotFoundError if it does not exist."""
    filename = str(filename)
    # inputs that look like explicit paths used directly
    # otherwise it's relative to the tables location
    if filename.startswith('/') or filename.startswith('.'):
        path = Path(filename)
    else:
        path = table_location() / filename
    if not path.is_file():
        raise NotFoundError(f'Table file `{filename}` does not exist')
    return path


def table_reader(fn):
    """Decorator for the shared parts of table readers."""

    @wraps(fn)
    def _read(filename, *args, **kwargs):
        path = locate_table(filename)
        try:
            data = path.read_bytes()
        except EnvironmentError as exc:
            raise NotFoundError(f'Could not load table file `{str(path)}`: {exc}') from exc
        if not data:
            raise NotFoundError(f'No data in table file `{str(path)}`')
        logging.debug('Reading table file `%s`', path)
        return fn(data.decode('utf-8-sig').splitlines(), *args, **kwargs)

    return _read
