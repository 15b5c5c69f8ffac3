"""
ivsedit.transforms - text transformations using the variation tables

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging
from functools import partial

from .base import CollectionName, to_collections
from .cid import CID_ESCAPE_REGEX, cid_digits, cid_escape
from .constants import DEFAULT_PREFERENCE, INTERCHANGE_COLLECTION, MIN_IDEOGRAPH
from .definitions import default_tables
from .unicode import SELECTOR_CLASS, is_ideograph


# any character followed by a variation selector
SEQUENCE_REGEX = re.compile(rf'(.)({SELECTOR_CLASS})')
# any character, optionally followed by a variation selector
CHAR_REGEX = re.compile(rf'(.)({SELECTOR_CLASS})?', re.DOTALL)

# brackets around the offered variations for a bare character
OPEN_CHOICE, CLOSE_CHOICE = '《', '》'
# brackets around ambiguous old-style forms
OPEN_AMBIGUOUS, CLOSE_AMBIGUOUS = '[', ']'


###############################################################################
# insert-and-verify

def insert_or_verify(buffer, position, tables=None, preferred=DEFAULT_PREFERENCE):
    """
    Verify the variation sequence at position, or offer all variations if there is none.

    buffer: TextBuffer to operate on
    position: offset of the base character
    tables: Tables to use; default tables if not given
    preferred: collections to offer, in display order

    Returns the list of verification messages; empty if the text was changed or left alone.
    """
    if tables is None:
        tables = default_tables()
    if not 0 <= position < len(buffer):
        raise IndexError(f'Position {position} outside text of length {len(buffer)}')
    base = buffer.char_at(position)
    if base not in tables.sequences:
        return []
    following = buffer.char_at(position + 1)
    matches = tables.sequences.match(base, following) if following else ()
    if matches:
        messages = [f'{_rec.collection}: {_rec.name}' for _rec in matches]
        for message in messages:
            buffer.message(message)
        return messages
    groups = tables.sequences.collections(base)
    choices = [
        ''.join(base + chr(_sel) for _sel in groups[_coll])
        for _coll in dict.fromkeys(to_collections(preferred))
        if _coll in groups
    ]
    buffer.replace(
        position, position + 1,
        ''.join((OPEN_CHOICE, '/'.join(choices), CLOSE_CHOICE))
    )
    return []


###############################################################################
# CID escapes

def to_cid(buffer, tables=None, start=0, end=None, collection=INTERCHANGE_COLLECTION):
    """Replace variation sequences in the interchange collection with \\CID{} escapes."""
    if tables is None:
        tables = default_tables()
    collection = CollectionName(collection)
    start, end = buffer.bounds(start, end)
    edits = []
    for match in SEQUENCE_REGEX.finditer(buffer.text, start, end):
        base, selector = match.groups()
        for record in tables.sequences.match(base, selector):
            if record.collection != collection:
                continue
            digits = cid_digits(record.name)
            # same names as in the CID index
            if not digits.isdecimal():
                logging.debug('No CID in sequence name %r', record.name)
                continue
            edits.append((*match.span(), cid_escape(digits)))
            break
    count = buffer.replace_all(edits)
    logging.debug('Replaced %d sequences with CID escapes', count)
    return count


def from_cid(buffer, tables=None, start=0, end=None):
    """Replace \\CID{} escapes with the variation sequences they index."""
    if tables is None:
        tables = default_tables()
    start, end = buffer.bounds(start, end)
    edits = []
    for match in CID_ESCAPE_REGEX.finditer(buffer.text, start, end):
        sequence = tables.cids.get(int(match.group(1)))
        if sequence:
            edits.append((*match.span(), sequence))
        else:
            logging.debug('No sequence for %s', match.group())
    count = buffer.replace_all(edits)
    logging.debug('Replaced %d CID escapes with sequences', count)
    return count


###############################################################################
# old-style forms

def to_old_style(buffer, tables=None, start=0, end=None):
    """Replace characters by their old-style forms; ambiguous forms are given in brackets."""
    if tables is None:
        tables = default_tables()
    start, end = buffer.bounds(start, end)
    edits = []
    for match in CHAR_REGEX.finditer(buffer.text, start, end):
        variants = tables.oldstyle.get(match.group(1))
        if len(variants) == 1:
            edits.append((*match.span(), variants[0]))
        elif variants:
            edits.append((
                *match.span(),
                ''.join((OPEN_AMBIGUOUS, *variants, CLOSE_AMBIGUOUS))
            ))
    return buffer.replace_all(edits)


###############################################################################
# non-member scan

def find_non_member(
        text, position, bound, tables=None, collection=INTERCHANGE_COLLECTION,
        minimum=MIN_IDEOGRAPH,
    ):
    """
    Find the next ideograph without a variation sequence in the collection.

    text: string or TextBuffer to scan
    position: offset to start scanning at
    bound: offset to stop scanning before
    collection: collection characters must belong to
    minimum: lowest code point to flag

    Returns the offset just past the first such character, or None if there is none.
    """
    if tables is None:
        tables = default_tables()
    collection = CollectionName(collection)
    text = str(text)
    bound = min(bound, len(text))
    for index in range(max(position, 0), bound):
        char = text[index]
        if ord(char) < minimum or not is_ideograph(char):
            continue
        records = tables.sequences.get(char)
        if not any(_rec.collection == collection for _rec in records):
            return index + 1
    return None


def non_members(buffer, tables=None, start=0, end=None, collection=INTERCHANGE_COLLECTION):
    """Yield (start, end) spans of ideographs without a sequence in the collection."""
    if tables is None:
        tables = default_tables()
    predicate = partial(find_non_member, tables=tables, collection=collection)
    return buffer.highlight(predicate, start, end)
