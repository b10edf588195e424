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


def code_points(text):
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def map_elements(text, table):
    """
    Collation elements for ``text`` (a string or a sequence of code
    points), using longest match at each position. Entries registered
    with a prefix see the code points just consumed as their context,
    no more than the longest registered prefix.

    """
    lookup_key = code_points(text)
    collation_elements = []
    position = 0
    while position < len(lookup_key):
        length, elements = table.lookup(lookup_key, position,
                                        table.context(lookup_key, position))
        collation_elements.extend(elements)
        position += length
    return collation_elements
