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
Collator configuration in ini format::

    [collation]
    strength = secondary
    alternate = shifted
    backwards = no
    normalize = NFD

    [rules]
    1 = &c < ch <<< cH
    2 = &h < ch

Numbered list sections are read back in numeric order.

"""

import logging
from configparser import ConfigParser

from aarduca.collator import Collator
from aarduca.rules import parse_tailoring
from aarduca.tailor import apply_tailoring

log = logging.getLogger(__name__)

COLLATION_SECTION = 'collation'
RULES_SECTION = 'rules'


class Config(ConfigParser):

    def __init__(self, *args, **kw):
        kw.setdefault('interpolation', None)
        ConfigParser.__init__(self, *args, **kw)

    def getlist(self, section):
        return ([item[1] for item in sorted(self.items(section),
                                            key = lambda i: int(i[0]))]
                if self.has_section(section) else [])

    def setlist(self, section, value):
        if self.has_section(section):
            self.remove_section(section)
        self.add_section(section)
        for i, element in enumerate(value):
            self.set(section, str(i), str(element))

    def settings(self, section=COLLATION_SECTION):
        """Keyword arguments for Collator found in ``section``."""
        result = {}
        if not self.has_section(section):
            return result
        for key in ('strength', 'alternate'):
            if self.has_option(section, key):
                result[key] = self.get(section, key)
        if self.has_option(section, 'backwards'):
            result['backwards'] = self.getboolean(section, 'backwards')
        if self.has_option(section, 'normalize'):
            normalize = self.get(section, 'normalize').strip()
            result['normalize'] = (None if normalize.lower() in ('', 'none')
                                   else normalize)
        return result

    def rules(self, section=RULES_SECTION):
        return '\n'.join(self.getlist(section))


def collator_from_config(config, table, section=COLLATION_SECTION,
                         rules_section=RULES_SECTION):
    text = config.rules(rules_section)
    if text.strip():
        log.debug('Tailoring table with rules from [%s]', rules_section)
        table = apply_tailoring(table, parse_tailoring(text))
    return Collator(table, **config.settings(section))
