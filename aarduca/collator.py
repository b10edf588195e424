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

import logging
import unicodedata

from aarduca.mapper import map_elements
from aarduca.sortkey import (generate, CollationKey, STRENGTHS,
                             PRIMARY, QUATERNARY, TERTIARY,
                             NON_IGNORABLE, SHIFTED)

log = logging.getLogger(__name__)

TRUE_VALUES = ('1', '2', 'yes', 'true', 'on')
FALSE_VALUES = ('0', 'no', 'false', 'off')


def parse_strength(value):
    """
    >>> parse_strength('secondary'), parse_strength('3'), parse_strength(4)
    (2, 3, 4)

    """
    if isinstance(value, int):
        strength = value
    else:
        value = str(value).strip().lower()
        strength = STRENGTHS.get(value)
        if strength is None and value.isdigit():
            strength = int(value)
    if strength is None or not PRIMARY <= strength <= QUATERNARY:
        raise ValueError('Invalid strength %r' % (value,))
    return strength


def parse_alternate(value):
    value = str(value).strip().lower()
    if value not in (SHIFTED, NON_IGNORABLE):
        raise ValueError('Invalid alternate handling %r' % (value,))
    return value


def parse_backwards(value):
    if isinstance(value, bool):
        return value
    value = str(value).strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError('Invalid backwards setting %r' % (value,))


class Collator(object):
    """
    Table plus comparison settings.

    Explicit arguments take precedence over the settings a tailoring
    stored in the table, which take precedence over the defaults:
    tertiary strength, non-ignorable variable elements and forward
    secondary weights. Strings are normalized with ``normalize`` (any
    form accepted by ``unicodedata.normalize``, or None) before lookup.

    >>> from aarduca.loader import load_text
    >>> table = load_text('''
    ... 0061 ; [.1C47.0020.0002] # LATIN SMALL LETTER A
    ... 0041 ; [.1C47.0020.0008] # LATIN CAPITAL LETTER A
    ... 0062 ; [.1C60.0020.0002] # LATIN SMALL LETTER B
    ... ''')
    >>> Collator(table, strength=PRIMARY).compare('A', 'a')
    0
    >>> Collator(table).compare('A', 'a')
    1
    >>> Collator(table).sorted(['b', 'A', 'a'])
    ['a', 'A', 'b']

    """

    def __init__(self, table, strength=None, alternate=None, backwards=None,
                 normalize='NFD'):
        settings = table.settings
        if strength is None:
            strength = settings.get('strength', TERTIARY)
        if alternate is None:
            alternate = settings.get('alternate', NON_IGNORABLE)
        if backwards is None:
            backwards = settings.get('backwards', False)
        self.table = table
        self.strength = parse_strength(strength)
        self.alternate = parse_alternate(alternate)
        self.backwards = parse_backwards(backwards)
        self.normalize = normalize
        log.debug('Collator: strength %d, alternate %s, backwards %s',
                  self.strength, self.alternate, self.backwards)

    def elements(self, text):
        if self.normalize and isinstance(text, str):
            text = unicodedata.normalize(self.normalize, text)
        return map_elements(text, self.table)

    def sort_key(self, text):
        return generate(self.elements(text), self.strength, self.alternate,
                        self.backwards)

    def collation_key(self, text):
        return CollationKey(self.sort_key(text))

    def compare(self, text1, text2):
        k1 = self.sort_key(text1)
        k2 = self.sort_key(text2)
        return (k1 > k2) - (k1 < k2)

    def compare_start(self, word, start):
        """
        Compare the beginning of ``word``, as long as ``start``, with
        ``start``; 0 means ``word`` starts with ``start`` at this strength.

        """
        return self.compare(word[:len(start)], start)

    def sorted(self, words):
        return sorted(words, key=self.sort_key)
