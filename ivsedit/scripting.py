"""
ivsedit.scripting - frame for main scripts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import sys
import logging
from contextlib import contextmanager

from .base import NotFoundError


# exit statuses
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


@contextmanager
def wrap_main(debug=False):
    """Main script context: set up logging, report errors and set the exit status."""
    loglevel = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=loglevel, format='%(levelname)s: %(message)s', force=True)
    try:
        yield
    except BrokenPipeError:
        # output piped to e.g. `head`
        sys.stdout = os.fdopen(1)
    except NotFoundError as exc:
        # KeyError quotes its message, take the argument instead
        logging.error('Table not available: %s', exc.args[0] if exc.args else exc)
        if debug:
            raise
        sys.exit(EXIT_NOT_FOUND)
    except Exception as exc:
        logging.error(exc)
        if debug:
            raise
        sys.exit(EXIT_ERROR)
