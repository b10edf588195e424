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
Tailoring: derive a new table from a base table and parsed rules.

Each relation takes the current anchor (the elements of the reset point
or of the previous target) and gives its target a weight just after the
anchor's weight at the relation level, before any weight already in use
there. Another relation of the same level on the same anchor shares that
weight and sorts after the earlier targets at the next finer level.

New weights are fractions halfway between neighbours, so any number of
characters fit between two base weights; once all rules are applied
every level that got a fraction is renumbered to consecutive integers,
which keeps every ordering intact.

"""

import logging
from bisect import bisect_left, bisect_right, insort
from fractions import Fraction

from aarduca.table import (Table, CollationElement,
                           COMMON_SECONDARY, COMMON_TERTIARY)
from aarduca.rules import Setting, Reset, Relation, RangeRelation, IDENTICAL
from aarduca.mapper import code_points
from aarduca.errors import UnknownResetPointError
from aarduca.timef import timef

log = logging.getLogger(__name__)

LEVELS = (1, 2, 3, 4)

INTERPRETED_SETTINGS = ('strength', 'alternate', 'backwards')


class Tailoring(object):

    def __init__(self, base):
        self.table = base.copy()
        self.used = dict((level, set()) for level in LEVELS)
        for elements in _all_elements(self.table):
            for element in elements:
                for level in LEVELS:
                    weight = element.weight(level)
                    if weight:
                        self.used[level].add(weight)
        for level in LEVELS:
            self.used[level] = sorted(self.used[level])
        self.minimum = {2: base.common_secondary or COMMON_SECONDARY,
                        3: base.common_tertiary or COMMON_TERTIARY,
                        4: 0}
        self.anchor = None
        # last element placed per (level, before, anchor)
        self.siblings = {}

    def apply(self, rule):
        log.debug('Applying %s', rule)
        if isinstance(rule, Setting):
            if rule.key not in INTERPRETED_SETTINGS:
                log.warning('Setting %s is recorded but not interpreted', rule)
            self.table.settings[rule.key] = rule.value
        elif isinstance(rule, Reset):
            self.anchor = self.resolve(rule.sequence)
        elif isinstance(rule, Relation):
            self.relate(rule.strength, rule.target, rule.prefix,
                        rule.extension, rule.before)
        elif isinstance(rule, RangeRelation):
            before = rule.before
            for target in rule.targets:
                self.relate(rule.strength, target, before=before)
                before = None
        else:
            raise TypeError('Not a tailoring rule: %r' % (rule,))

    def resolve(self, sequence):
        lookup_key = code_points(sequence)
        elements = []
        position = 0
        while position < len(lookup_key):
            length, found = self.table.match(lookup_key, position)
            if not length:
                raise UnknownResetPointError(sequence)
            elements.extend(found)
            position += length
        return elements

    def relate(self, strength, target, prefix=None, extension=None,
               before=None):
        if self.anchor is None:
            raise ValueError('Relation to %r has no reset point' % (target,))
        if strength == IDENTICAL:
            elements = list(self.anchor)
        else:
            sibling_key = (strength, bool(before),
                           tuple(e.weights() for e in self.anchor))
            sibling = self.siblings.get(sibling_key)
            if sibling is None:
                last = self.place(self.anchor[-1], strength, before)
            else:
                last = self.place(sibling, min(strength + 1, len(LEVELS)))
            self.siblings[sibling_key] = last
            elements = list(self.anchor[:-1]) + [last]
        self.anchor = elements
        if extension:
            # extensions only take explicit entries
            elements = elements + self.resolve(extension)
        self.table.insert_or_replace(code_points(target), elements,
                                     code_points(prefix) if prefix else ())

    def place(self, element, level, before=None):
        used = self.used[level]
        weight = element.weight(level)
        if before and not weight:
            log.warning('Nothing sorts before weight 0 at level %d, '
                        'placing after instead', level)
            before = None
        if before:
            i = bisect_left(used, weight)
            lower = used[i - 1] if i else 0
            new = Fraction(lower + weight) / 2
        else:
            i = bisect_right(used, weight)
            upper = used[i] if i < len(used) else weight + 2
            new = Fraction(weight + upper) / 2
        insort(used, new)
        placed = element.with_weight(level, new)
        for finer in range(level + 1, len(LEVELS) + 1):
            placed = placed.with_weight(finer, self.minimum[finer])
        return placed

    def finish(self):
        ranks = {}
        for level in LEVELS:
            if any(not isinstance(w, int) for w in self.used[level]):
                ranks[level] = dict((w, i + 1) for i, w
                                    in enumerate(self.used[level]))

        def renumber(elements):
            result = []
            for element in elements:
                weights = []
                for level in LEVELS:
                    weight = element.weight(level)
                    if weight and level in ranks:
                        weight = ranks[level][weight]
                    weights.append(weight)
                result.append(CollationElement(*weights,
                                               variable=element.variable))
            return result

        source = self.table
        table = Table(source.implicit_ranges, source.version, source.settings)
        for key, elements in source.items():
            table.insert_or_replace(key, renumber(elements))
        for key, prefix, elements in source.prefixed_items():
            table.insert_or_replace(key, renumber(elements), prefix)
        log.debug('Renumbered levels %s', sorted(ranks))
        return table.freeze()


@timef
def apply_tailoring(base, rules):
    """
    Apply rules in order to a copy of ``base`` and return the new,
    frozen table. ``base`` is never modified; a failing rule leaves no
    partial table behind.

    """
    tailoring = Tailoring(base)
    for rule in rules:
        tailoring.apply(rule)
    table = tailoring.finish()
    log.debug('Tailored table has %d entries', len(table))
    return table


def _all_elements(table):
    for key, elements in table.items():
        yield elements
    for key, prefix, elements in table.prefixed_items():
        yield elements
