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


class CollationError(Exception): pass


class TableFormatError(CollationError):

    def __init__(self, index, reason):
        CollationError.__init__(self, index, reason)
        self.index = index
        self.reason = reason

    def __str__(self):
        return 'row %s: %s' % (self.index, self.reason)


class RuleSyntaxError(CollationError):

    def __init__(self, offset, reason):
        CollationError.__init__(self, offset, reason)
        self.offset = offset
        self.reason = reason

    def __str__(self):
        return 'offset %d: %s' % (self.offset, self.reason)


class UnknownResetPointError(CollationError):

    def __init__(self, sequence):
        CollationError.__init__(self, sequence)
        self.sequence = sequence

    def __str__(self):
        return 'unknown reset point %r' % (self.sequence,)


class FrozenTableError(CollationError): pass
