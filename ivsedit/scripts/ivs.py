#!/usr/bin/env python3
"""
Verify, convert and check ideographic variation sequences in text
(c) 2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging
from pathlib import Path

import ivsedit
from ivsedit.base import to_collections
from ivsedit.scripting import wrap_main
from ivsedit.unicode import is_selector, selector_string, format_codepoint


def read_text(infile):
    """Read text from file or standard input."""
    if not infile or infile == '-':
        return sys.stdin.read()
    return Path(infile).read_text(encoding='utf-8-sig')


def get_tables(args):
    """Load tables from the given files, or use the default tables."""
    if args.ivd or args.old_style:
        # explicit paths are taken relative to the working directory
        return ivsedit.load_tables(
            str(Path(args.ivd).resolve()) if args.ivd else None,
            str(Path(args.old_style).resolve()) if args.old_style else None,
        )
    return ivsedit.default_tables()


def line_column(text, offset):
    """Convert offset to 1-based line and column."""
    line = text.count('\n', 0, offset) + 1
    column = offset - (text.rfind('\n', 0, offset) + 1) + 1
    return line, column


###############################################################################
# commands

def insert(args, tables):
    buffer = ivsedit.TextBuffer(read_text(args.infile))
    messages = ivsedit.insert_or_verify(
        buffer, args.position, tables=tables, preferred=to_collections(args.prefer)
    )
    for message in messages:
        print(message, file=sys.stderr)
    sys.stdout.write(buffer.text)


def to_cid(args, tables):
    buffer = ivsedit.TextBuffer(read_text(args.infile))
    ivsedit.to_cid(buffer, tables=tables, start=args.start, end=args.end)
    sys.stdout.write(buffer.text)


def from_cid(args, tables):
    buffer = ivsedit.TextBuffer(read_text(args.infile))
    ivsedit.from_cid(buffer, tables=tables, start=args.start, end=args.end)
    sys.stdout.write(buffer.text)


def old_style(args, tables):
    buffer = ivsedit.TextBuffer(read_text(args.infile))
    ivsedit.to_old_style(buffer, tables=tables, start=args.start, end=args.end)
    sys.stdout.write(buffer.text)


def check(args, tables):
    buffer = ivsedit.TextBuffer(read_text(args.infile))
    for start, end in ivsedit.non_members(buffer, tables=tables):
        line, column = line_column(buffer.text, start)
        char = buffer.span(start, end)
        print(f'{line}:{column}: {format_codepoint(char)} {char}')


def show(args, tables):
    for char in ''.join(args.chars):
        if is_selector(char):
            continue
        records = tables.sequences.get(char)
        if not records:
            print(f'{format_codepoint(char)} {char} -')
        for record in records:
            print(' '.join((
                format_codepoint(char), record.sequence(char),
                selector_string(record.selector), record.collection, record.name
            )))


###############################################################################

def main():
    # parse command line
    parser = argparse.ArgumentParser(prog='ivsedit', description=__doc__.splitlines()[1])
    parser.add_argument(
        '--ivd', type=str, default='',
        help='IVD_Sequences.txt file to use instead of the default table'
    )
    parser.add_argument(
        '--old-style', type=str, default='',
        help='old-style forms table to use instead of the default table'
    )
    parser.add_argument(
        '--prefer', type=str, default=','.join(ivsedit.DEFAULT_PREFERENCE),
        help=(
            'comma-separated collections to offer for a bare character, in order. '
            'default: %(default)s'
        )
    )
    parser.add_argument(
        '--debug', action='store_true', help='show debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'ivsedit v{ivsedit.__version__}'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    insert_parser = subparsers.add_parser(
        'insert', help='verify the sequence at a position, or offer variations'
    )
    insert_parser.add_argument('position', type=int, help='character offset of base character')
    insert_parser.set_defaults(func=insert)

    for name, func, doc in (
            ('to-cid', to_cid, 'replace Adobe-Japan1 sequences with \\CID{} escapes'),
            ('from-cid', from_cid, 'replace \\CID{} escapes with variation sequences'),
            ('old-style', old_style, 'replace characters with their old-style forms'),
        ):
        region_parser = subparsers.add_parser(name, help=doc)
        region_parser.add_argument(
            '--start', type=int, default=0, help='character offset of start of region'
        )
        region_parser.add_argument(
            '--end', type=int, default=None, help='character offset of end of region'
        )
        region_parser.set_defaults(func=func)

    check_parser = subparsers.add_parser(
        'check', help='list ideographs not covered by Adobe-Japan1'
    )
    check_parser.set_defaults(func=check)

    for sub in (insert_parser, check_parser, *(
            subparsers.choices[_n] for _n in ('to-cid', 'from-cid', 'old-style')
        )):
        sub.add_argument(
            'infile', nargs='?', type=str, default='-',
            help='text file to process. if not given, read from standard input'
        )

    show_parser = subparsers.add_parser(
        'show', help='list registered variation sequences of characters'
    )
    show_parser.add_argument('chars', nargs='+', type=str, help='characters to show')
    show_parser.set_defaults(func=show)

    args = parser.parse_args()

    with wrap_main(args.debug):
        tables = get_tables(args)
        logging.debug('Executing command `%s`', args.command)
        args.func(args, tables)


if __name__ == '__main__':
    main()
