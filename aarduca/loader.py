# This file is part of aarduca, Unicode Collation Algorithm for Aard Dictionary.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3
# as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License <http://www.gnu.org/licenses/gpl-3.0.txt>
# for more details.
#
# Copyright (C) 2008-2010  Jeremy Mortis, Igor Tkach

"""
Table loader.

Reads the Default Unicode Collation Element Table format
(allkeys.txt, http://www.unicode.org/Public/UCA/latest/allkeys.txt)
into rows and builds a frozen Table from rows. A row is a pair of a code
point sequence and a list of weight groups, each group a
``(marker, weights)`` pair where marker is ``'*'`` for variable
elements and ``'.'`` otherwise:

    ([0x61], [('.', [0x1C47, 0x20, 0x2])])

"""

import logging
import re

from aarduca.table import Table, CollationElement, MAX_CODE_POINT
from aarduca.errors import TableFormatError
from aarduca.timef import timef

log = logging.getLogger(__name__)

group_re = re.compile(r'\[([^0-9A-Fa-f\]])([^\]]*)\]')
implicit_re = re.compile(r'^([0-9A-Fa-f]+)\.\.([0-9A-Fa-f]+)\s*;\s*([0-9A-Fa-f]+)$')

VARIABLE = '*'
NON_VARIABLE = '.'


class TableSource(object):

    def __init__(self):
        self.rows = []
        self.line_numbers = []
        self.implicit_ranges = []
        self.version = None

    def __repr__(self):
        return ('%s(%d rows, %d implicit ranges, version %r)' %
                (self.__class__.__name__, len(self.rows),
                 len(self.implicit_ranges), self.version))


def parse_lines(lines):
    """
    Parse allkeys.txt formatted text (a string or an iterable of lines).

    >>> source = parse_lines('''
    ... @version 9.0.0
    ... @implicitweights 17000..18AFF; FB00 # Tangut
    ... 0061 ; [.1C47.0020.0002] # LATIN SMALL LETTER A
    ... 002D ; [*020D.0020.0002] # HYPHEN-MINUS
    ... ''')
    >>> source.version
    '9.0.0'
    >>> source.implicit_ranges
    [(94208, 101119, 64256)]
    >>> source.rows[1]
    ([45], [('*', [525, 32, 2])])

    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    source = TableSource()
    for index, line in enumerate(lines):
        line = line.split('#', 1)[0]
        line = line.split('%', 1)[0].strip()
        if not line:
            continue
        if line.startswith('@'):
            directive, _, value = line.partition(' ')
            if directive == '@version':
                source.version = value.strip()
            elif directive == '@implicitweights':
                if source.rows:
                    raise TableFormatError(index, 'implicit weights declared '
                                           'after the first row')
                source.implicit_ranges.append(parse_implicit(index, value))
            else:
                log.debug('Line %d: ignoring directive %s', index, directive)
            continue
        source.rows.append(parse_row(index, line))
        source.line_numbers.append(index)
    return source


def parse_implicit(index, value):
    m = implicit_re.match(value.strip())
    if m is None:
        raise TableFormatError(index, 'malformed implicit weights %r' % value)
    start, end, base = [int(g, 16) for g in m.groups()]
    if start > end or end > MAX_CODE_POINT:
        raise TableFormatError(index, 'invalid implicit range %04X..%04X'
                               % (start, end))
    return (start, end, base)


def parse_row(index, line):
    if ';' not in line:
        raise TableFormatError(index, 'missing ";" separator')
    chars, weights = line.split(';', 1)
    try:
        code_points = [int(ch, 16) for ch in chars.split()]
    except ValueError:
        raise TableFormatError(index, 'invalid code point in %r'
                               % chars.strip())
    groups = []
    rest = weights.strip()
    while rest:
        m = group_re.match(rest)
        if m is None:
            raise TableFormatError(index, 'malformed weights %r' % rest)
        try:
            values = [int(v, 16) for v in m.group(2).split('.')]
        except ValueError:
            raise TableFormatError(index, 'invalid weight in %r' % m.group(0))
        groups.append((m.group(1), values))
        rest = rest[m.end():].lstrip()
    return (code_points, groups)


@timef
def load_table(rows, implicit_ranges=(), version=None, settings=None,
               prefixed_rows=()):
    """
    Build a frozen Table from rows.

    ``prefixed_rows`` hold ``(code_points, prefix, weights)`` triples for
    entries that only apply after ``prefix``; they are numbered after
    the plain rows in error messages.

    Either every row is valid and a table is returned, or
    TableFormatError is raised for the first bad row.

    """
    for index, implicit_range in enumerate(implicit_ranges):
        check_implicit_range(index, implicit_range)
    table = Table(implicit_ranges, version, settings)
    index = -1
    for index, row in enumerate(rows):
        code_points, elements = check_row(index, row)
        if code_points in table:
            log.debug('Row %d redefines %s', index,
                      ' '.join('%04X' % cp for cp in code_points))
        table.insert_or_replace(code_points, elements)
    for index, row in enumerate(prefixed_rows, index + 1):
        try:
            code_points, prefix, weights = row
            prefix = tuple(prefix)
        except (TypeError, ValueError):
            raise TableFormatError(index, 'expected a (code points, prefix, '
                                   'weights) triple')
        if not prefix:
            raise TableFormatError(index, 'empty prefix')
        check_code_points(index, prefix)
        code_points, elements = check_row(index, (code_points, weights))
        table.insert_or_replace(code_points, elements, prefix)
    log.debug('Loaded %d entries, top primary %04X',
              len(table), table.top_primary)
    return table.freeze()


def load_text(lines):
    """Parse allkeys.txt formatted text and load it into a table."""
    source = parse_lines(lines)
    try:
        return load_table(source.rows, source.implicit_ranges, source.version)
    except TableFormatError as e:
        raise TableFormatError(source.line_numbers[e.index], e.reason)


def check_implicit_range(index, implicit_range):
    try:
        start, end, base = implicit_range
    except (TypeError, ValueError):
        raise TableFormatError(index, 'implicit range must be a '
                               '(start, end, base) triple')
    if not (_is_weight(start) and _is_weight(end) and _is_weight(base)
            and start <= end <= MAX_CODE_POINT):
        raise TableFormatError(index, 'invalid implicit range %r'
                               % (implicit_range,))


def check_row(index, row):
    try:
        code_points, weights = row
    except (TypeError, ValueError):
        raise TableFormatError(index, 'expected a (code points, weights) pair')
    code_points = check_code_points(index, code_points)
    if not weights:
        raise TableFormatError(index, 'missing weights')
    elements = []
    for group in weights:
        try:
            marker, values = group
            values = tuple(values)
        except (TypeError, ValueError):
            raise TableFormatError(index, 'malformed weight group %r'
                                   % (group,))
        if marker not in (VARIABLE, NON_VARIABLE):
            raise TableFormatError(index, 'unknown weight marker %r'
                                   % (marker,))
        if len(values) not in (3, 4):
            raise TableFormatError(index, 'expected 3 or 4 weights, got %d'
                                   % len(values))
        for value in values:
            if not _is_weight(value):
                raise TableFormatError(index, 'invalid weight %r' % (value,))
        primary, secondary, tertiary = values[:3]
        quaternary = values[3] if len(values) == 4 else 0
        if (primary and not secondary) or (secondary and not tertiary):
            raise TableFormatError(index, 'non-monotonic weights %r'
                                   % (values,))
        variable = marker == VARIABLE
        if variable and not primary:
            raise TableFormatError(index, 'variable element with zero primary')
        elements.append(CollationElement(primary, secondary, tertiary,
                                         quaternary, variable))
    return code_points, elements


def _is_weight(value):
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def check_code_points(index, code_points):
    try:
        code_points = tuple(code_points)
    except TypeError:
        raise TableFormatError(index, 'invalid code point sequence %r'
                               % (code_points,))
    if not code_points:
        raise TableFormatError(index, 'empty code point sequence')
    for cp in code_points:
        if not _is_weight(cp) or cp > MAX_CODE_POINT:
            raise TableFormatError(index, 'invalid code point %r' % (cp,))
    return code_points
