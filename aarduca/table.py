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
Collation Element Table.

A table maps code point sequences to lists of collation elements.
Sequences longer than one code point are contractions, lists longer
than one element are expansions. Code points without an entry get
implicit weights computed from the code point value, so every input
maps to something.

"""

import logging

from aarduca.trie import Trie
from aarduca.errors import FrozenTableError

log = logging.getLogger(__name__)

MAX_CODE_POINT = 0x10FFFF

COMMON_SECONDARY = 0x0020
COMMON_TERTIARY = 0x0002


class CollationElement(object):
    """
    Four level weight tuple.

    >>> e = CollationElement(0x1C47, 0x20, 0x2)
    >>> str(e)
    '[.1C47.0020.0002]'
    >>> e.weight(1) == 0x1C47
    True
    >>> str(CollationElement(0x20D, 0x20, 0x2, variable=True))
    '[*020D.0020.0002]'

    """

    __slots__ = ('primary', 'secondary', 'tertiary', 'quaternary', 'variable')

    def __init__(self, primary, secondary, tertiary, quaternary=0,
                 variable=False):
        self.primary = primary
        self.secondary = secondary
        self.tertiary = tertiary
        self.quaternary = quaternary
        self.variable = variable

    def weights(self):
        return (self.primary, self.secondary, self.tertiary, self.quaternary)

    def weight(self, level):
        return self.weights()[level - 1]

    def is_ignorable(self):
        return not (self.primary or self.secondary or self.tertiary)

    def replace(self, **kw):
        values = dict(primary=self.primary,
                      secondary=self.secondary,
                      tertiary=self.tertiary,
                      quaternary=self.quaternary,
                      variable=self.variable)
        values.update(kw)
        return CollationElement(**values)

    def with_weight(self, level, value):
        name = self.__slots__[level - 1]
        return self.replace(**{name: value})

    def __eq__(self, other):
        if not isinstance(other, CollationElement):
            return NotImplemented
        return (self.weights() == other.weights() and
                self.variable == other.variable)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.weights(), self.variable))

    def __repr__(self):
        return ('%s(%r, %r, %r, %r, variable=%r)' %
                (self.__class__.__name__, self.primary, self.secondary,
                 self.tertiary, self.quaternary, self.variable))

    def __str__(self):
        parts = ['%04X' % w for w in self.weights()[:3]]
        if self.quaternary:
            parts.append('%04X' % self.quaternary)
        return '[%s%s]' % ('*' if self.variable else '.', '.'.join(parts))


class Table(object):
    """
    Mapping from code point sequences to collation element sequences
    with longest match lookup.

    ``implicit_ranges`` is a sequence of ``(start, end, base)`` triples as
    declared by ``@implicitweights`` lines. Blocks are laid out in order of
    ``base``, then ``start``; all other code points follow in numeric
    order.

    """

    def __init__(self, implicit_ranges=(), version=None, settings=None):
        self.entries = Trie()
        self.contexts = Trie()
        self.implicit_ranges = tuple(sorted(implicit_ranges,
                                            key=lambda r: (r[2], r[0])))
        self.version = version
        self.settings = dict(settings or {})
        self.top_primary = 0
        self.common_secondary = None
        self.common_tertiary = None
        # longest prefix of any context entry
        self.max_prefix = 0
        self.frozen = False

    def insert_or_replace(self, code_points, elements, prefix=()):
        if self.frozen:
            raise FrozenTableError('table is read-only')
        key = tuple(code_points)
        elements = tuple(elements)
        if prefix:
            by_prefix = self.contexts.get(key)
            if by_prefix is None:
                by_prefix = {}
                self.contexts.add(key, by_prefix)
            by_prefix[tuple(prefix)] = elements
            self.max_prefix = max(self.max_prefix, len(prefix))
        else:
            self.entries.add(key, elements)
        for element in elements:
            if element.primary > self.top_primary:
                self.top_primary = element.primary
            if element.primary:
                if (self.common_secondary is None or
                    0 < element.secondary < self.common_secondary):
                    self.common_secondary = element.secondary
                if (self.common_tertiary is None or
                    0 < element.tertiary < self.common_tertiary):
                    self.common_tertiary = element.tertiary

    def freeze(self):
        self.frozen = True
        return self

    def get(self, code_points, prefix=()):
        key = tuple(code_points)
        if prefix:
            by_prefix = self.contexts.get(key)
            return by_prefix.get(tuple(prefix)) if by_prefix else None
        return self.entries.get(key)

    def match(self, code_points, position=0, context=None):
        """
        Longest explicit match at ``position``.

        Returns ``(length, elements)``, or ``(0, None)`` when no entry
        starts with the code point at ``position``. An entry with a
        prefix only matches when ``context`` (by default the last
        ``max_prefix`` code points before ``position``) ends with that
        prefix, and wins over an unprefixed entry of the same length.

        """
        length, elements = self.entries.longest_match(code_points, position)
        if not self.max_prefix:
            return length, elements
        if context is None:
            context = self.context(code_points, position)
        context = tuple(context)
        for match_length, by_prefix in self.contexts.matches(code_points,
                                                             position):
            if match_length < length:
                continue
            found = _match_context(by_prefix, context)
            if found is not None:
                length, elements = match_length, found
        return length, elements

    def context(self, code_points, position):
        """Code points before ``position`` a prefixed entry can look at."""
        return code_points[max(0, position - self.max_prefix):position]

    def lookup(self, code_points, position=0, context=None):
        length, elements = self.match(code_points, position, context)
        if not length:
            return 1, self.implicit_elements(code_points[position])
        return length, elements

    def implicit_elements(self, code_point):
        offset = 0
        for start, end, base in self.implicit_ranges:
            if start <= code_point <= end:
                return self._implicit(offset + code_point - start)
            offset += end - start + 1
        return self._implicit(offset + code_point)

    def _implicit(self, offset):
        secondary = self.common_secondary or COMMON_SECONDARY
        tertiary = self.common_tertiary or COMMON_TERTIARY
        return (CollationElement(self.top_primary + 1 + offset,
                                 secondary, tertiary),)

    def items(self):
        return self.entries.items()

    def prefixed_items(self):
        for key, by_prefix in self.contexts.items():
            for prefix in sorted(by_prefix):
                yield key, prefix, by_prefix[prefix]

    def copy(self):
        table = Table(self.implicit_ranges, self.version, self.settings)
        for key, elements in self.items():
            table.insert_or_replace(key, elements)
        for key, prefix, elements in self.prefixed_items():
            table.insert_or_replace(key, elements, prefix)
        return table

    def __contains__(self, code_points):
        return self.entries.get(tuple(code_points)) is not None

    def __len__(self):
        return len(self.entries) + sum(1 for _ in self.prefixed_items())

    def __repr__(self):
        return ('<%s: %d entries, version %r>' %
                (self.__class__.__name__, len(self), self.version))


def _match_context(by_prefix, context):
    best = None
    best_length = -1
    for prefix, elements in by_prefix.items():
        n = len(prefix)
        if n <= len(context) and n > best_length and context[-n:] == prefix:
            best, best_length = elements, n
    return best
