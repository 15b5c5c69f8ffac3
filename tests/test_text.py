"""
ivsedit test suite
text buffer tests
"""

import unittest

from ivsedit import TextBuffer


class TestTextBuffer(unittest.TestCase):
    """Test the text buffer."""

    def test_char_at(self):
        buffer = TextBuffer('abc')
        assert buffer.char_at(0) == 'a'
        assert buffer.char_at(3) == ''
        assert buffer.char_at(-1) == ''

    def test_span_clamped(self):
        buffer = TextBuffer('abcdef')
        assert buffer.span(2, 4) == 'cd'
        assert buffer.span(-5, 100) == 'abcdef'
        assert buffer.span(5, 2) == ''

    def test_replace(self):
        buffer = TextBuffer('abcdef')
        buffer.replace(1, 3, 'XYZ')
        assert buffer.text == 'aXYZdef'

    def test_replace_all_back_to_front(self):
        buffer = TextBuffer('a1b2c3')
        count = buffer.replace_all([(1, 2, 'one'), (3, 4, 'two'), (5, 6, '')])
        assert count == 3
        assert buffer.text == 'aonebtwoc', buffer.text

    def test_replace_all_unordered(self):
        buffer = TextBuffer('abc')
        buffer.replace_all([(2, 3, 'C'), (0, 1, 'AA')])
        assert buffer.text == 'AAbC', buffer.text

    def test_overlapping_edits(self):
        buffer = TextBuffer('abcdef')
        with self.assertRaises(ValueError):
            buffer.replace_all([(0, 3, 'x'), (2, 4, 'y')])
        assert buffer.text == 'abcdef'

    def test_message(self):
        buffer = TextBuffer('')
        buffer.message('hello')
        assert buffer.messages == ['hello']

    def test_highlight(self):
        buffer = TextBuffer('a1bb2c3')

        def next_digit(text, position, bound):
            for index in range(position, bound):
                if text[index].isdigit():
                    return index + 1
            return None

        assert list(buffer.highlight(next_digit)) == [(1, 2), (4, 5), (6, 7)]
        assert list(buffer.highlight(next_digit, 2, 6)) == [(4, 5)]
