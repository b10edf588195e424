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
aarduca - Unicode Collation Algorithm

http://www.unicode.org/reports/tr10/

Usage example:

    from aarduca import load_text, parse_tailoring, apply_tailoring, Collator

    with open('allkeys.txt') as f:
        ducet = load_text(f)
    table = apply_tailoring(ducet, parse_tailoring('&c < ch'))
    c = Collator(table)

    sorted_words = sorted(words, key=c.sort_key)

allkeys.txt is available at

    http://www.unicode.org/Public/UCA/latest/allkeys.txt

"""

__version__ = "0.9.3"
__appname__ = "aarduca"

from aarduca.errors import (CollationError, TableFormatError, RuleSyntaxError,
                            UnknownResetPointError, FrozenTableError)
from aarduca.table import Table, CollationElement
from aarduca.loader import load_table, load_text, parse_lines
from aarduca.rules import (parse_tailoring, Setting, Reset, Relation,
                           RangeRelation, IDENTICAL)
from aarduca.tailor import apply_tailoring
from aarduca.mapper import map_elements
from aarduca.sortkey import (sort_key, generate, CollationKey,
                             PRIMARY, SECONDARY, TERTIARY, QUATERNARY,
                             NON_IGNORABLE, SHIFTED)
from aarduca.collator import Collator
