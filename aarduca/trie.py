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
Trie keyed by code point sequences.

Each node is a two item list, ``[value, children]``, where ``value`` is
``None`` for nodes that only continue longer keys.

>>> t = Trie()
>>> t.add((0x63,), 'c')
>>> t.add((0x63, 0x68), 'ch')
>>> t.longest_match((0x63, 0x68, 0x65), 0)
(2, 'ch')
>>> t.longest_match((0x63, 0x61), 0)
(1, 'c')
>>> t.longest_match((0x61,), 0)
(0, None)

"""


class Trie(object):

    def __init__(self):
        self.root = [None, {}]
        self.size = 0

    def add(self, key, value):
        curr_node = self.root
        for part in key:
            curr_node = curr_node[1].setdefault(part, [None, {}])
        if curr_node[0] is None:
            self.size += 1
        curr_node[0] = value

    def get(self, key, default=None):
        curr_node = self.root
        for part in key:
            curr_node = curr_node[1].get(part)
            if curr_node is None:
                return default
        if curr_node[0] is None:
            return default
        return curr_node[0]

    def matches(self, key, start):
        """
        Yield ``(length, value)`` for every stored key that is a prefix
        of ``key[start:]``, shortest first.

        """
        curr_node = self.root
        length = 0
        for i in range(start, len(key)):
            curr_node = curr_node[1].get(key[i])
            if curr_node is None:
                break
            length += 1
            if curr_node[0] is not None:
                yield length, curr_node[0]

    def longest_match(self, key, start):
        result = (0, None)
        for match in self.matches(key, start):
            result = match
        return result

    def items(self):
        stack = [((), self.root)]
        while stack:
            key, node = stack.pop()
            if node[0] is not None:
                yield key, node[0]
            for part in sorted(node[1], reverse=True):
                stack.append((key + (part,), node[1][part]))

    def __len__(self):
        return self.size

    def __contains__(self, key):
        return self.get(key) is not None
