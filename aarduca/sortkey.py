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
Sort keys.

A sort key is a tuple of weights: every non-zero primary weight of the
collation elements, a zero, every non-zero secondary weight, a zero and
so on up to the requested strength. Tuples compare the way strings
should sort.

See http://www.unicode.org/reports/tr10/#Step_3 and, for the handling of
variable elements, http://www.unicode.org/reports/tr10/#Variable_Weighting

"""

import struct
from functools import total_ordering

from aarduca.mapper import map_elements

PRIMARY = 1
SECONDARY = 2
TERTIARY = 3
QUATERNARY = 4

STRENGTHS = {'primary': PRIMARY,
             'secondary': SECONDARY,
             'tertiary': TERTIARY,
             'quaternary': QUATERNARY}

NON_IGNORABLE = 'non-ignorable'
SHIFTED = 'shifted'

HIGH_QUATERNARY = 0xFFFF


def shifted(elements):
    """
    Weight rows with variable elements moved to the quaternary level.

    >>> from aarduca.table import CollationElement
    >>> hyphen = CollationElement(0x20D, 0x20, 0x2, variable=True)
    >>> acute = CollationElement(0, 0x24, 0x2)
    >>> shifted([hyphen, acute])
    [(0, 0, 0, 525), (0, 0, 0, 0)]

    """
    rows = []
    after_variable = False
    for element in elements:
        if element.is_ignorable():
            rows.append((0, 0, 0, 0))
        elif element.variable:
            rows.append((0, 0, 0, element.primary))
            after_variable = True
        elif not element.primary and after_variable:
            rows.append((0, 0, 0, 0))
        else:
            rows.append((element.primary, element.secondary, element.tertiary,
                         HIGH_QUATERNARY + element.quaternary))
            after_variable = False
    return rows


def generate(elements, strength=TERTIARY, alternate=NON_IGNORABLE,
             backwards=False):
    """
    >>> from aarduca.table import CollationElement
    >>> a = CollationElement(0x1C47, 0x20, 0x2)
    >>> acute = CollationElement(0, 0x24, 0x2)
    >>> generate([a, acute], SECONDARY) == (0x1C47, 0, 0x20, 0x24)
    True
    >>> generate([], QUATERNARY)
    (0, 0, 0)

    """
    if strength not in (PRIMARY, SECONDARY, TERTIARY, QUATERNARY):
        raise ValueError('Invalid strength %r' % (strength,))
    if alternate == SHIFTED:
        rows = shifted(elements)
    elif alternate == NON_IGNORABLE:
        rows = [element.weights() for element in elements]
    else:
        raise ValueError('Invalid alternate handling %r' % (alternate,))
    sort_key = []
    for level in range(strength):
        if level:
            sort_key.append(0)
        weights = [row[level] for row in rows if row[level]]
        if backwards and level == SECONDARY - 1:
            weights.reverse()
        sort_key.extend(weights)
    return tuple(sort_key)


def sort_key(text, table, strength=TERTIARY, alternate=NON_IGNORABLE,
             backwards=False):
    return generate(map_elements(text, table), strength, alternate, backwards)


@total_ordering
class CollationKey(object):
    """
    Sort key rendered as bytes, four per weight, big endian, so that
    byte strings compare like the weight tuples they come from.

    >>> k = CollationKey((0x1C47, 0, 0x20))
    >>> str(k)
    '00 00 1c 47 00 00 00 00 00 00 00 20'
    >>> k < CollationKey((0x1C60,))
    True
    >>> k.startswith(CollationKey((0x1C47,)))
    True

    """

    def __init__(self, weights):
        self.weights = tuple(weights)
        self.key = struct.pack('>%dL' % len(self.weights), *self.weights)

    def __eq__(self, other):
        if not isinstance(other, CollationKey):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other):
        if not isinstance(other, CollationKey):
            return NotImplemented
        return self.key < other.key

    def __hash__(self):
        return hash(self.key)

    def __len__(self):
        return len(self.key)

    def __str__(self):
        return ' '.join('%02x' % b for b in self.key)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.weights)

    def byte_array(self):
        return list(self.key)

    def binary(self):
        return self.key

    def startswith(self, other):
        return self.key.startswith(other.key)
