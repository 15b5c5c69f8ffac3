"""
ivsedit.text - text buffer for the transforms to operate on

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from collections import namedtuple


# replacement of text[start:end] with string
Edit = namedtuple('Edit', ('start', 'end', 'string'))


class TextBuffer:
    """Mutable text with positions, replacement and a message channel."""

    def __init__(self, text=''):
        self._text = str(text)
        # messages reported to the user
        self.messages = []

    @property
    def text(self):
        return self._text

    def __str__(self):
        return self._text

    def __len__(self):
        return len(self._text)

    def __repr__(self):
        return f'{type(self).__name__}({self._text!r})'

    def char_at(self, position):
        """Character at position, empty string if beyond the end."""
        if 0 <= position < len(self._text):
            return self._text[position]
        return ''

    def bounds(self, start=0, end=None):
        """Clamp span bounds to the text."""
        if end is None or end > len(self._text):
            end = len(self._text)
        start = min(max(start, 0), end)
        return start, end

    def span(self, start=0, end=None):
        """Text in the span."""
        start, end = self.bounds(start, end)
        return self._text[start:end]

    def replace(self, start, end, string):
        """Replace text[start:end] with string."""
        start, end = self.bounds(start, end)
        self._text = ''.join((self._text[:start], string, self._text[end:]))

    def replace_all(self, edits):
        """Apply non-overlapping edits given in original text positions."""
        edits = sorted((Edit(*_e) for _e in edits), key=lambda _e: _e.start)
        for first, second in zip(edits, edits[1:]):
            if second.start < first.end:
                raise ValueError(f'Overlapping edits {first} and {second}')
        # back to front so that earlier offsets stay valid
        for edit in reversed(edits):
            self.replace(*edit)
        return len(edits)

    def message(self, text):
        """Report a message to the user."""
        logging.info(text)
        self.messages.append(text)

    def highlight(self, predicate, start=0, end=None):
        """
        Call predicate repeatedly with advancing positions and yield matched spans.

        predicate: callable (text, position, bound) returning the position just past a match,
                   or None if there is no match before bound
        """
        start, end = self.bounds(start, end)
        position = start
        while position < end:
            found = predicate(self._text, position, end)
            if found is None or found <= position:
                break
            yield found - 1, found
            position = found
