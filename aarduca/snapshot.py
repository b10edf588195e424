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
Table snapshots: a loaded or tailored table written out as compact JSON,
so it can be read back without parsing allkeys.txt or applying rules
again.

"""

import logging

import simplejson

from aarduca.loader import load_table, VARIABLE, NON_VARIABLE
from aarduca.errors import TableFormatError

log = logging.getLogger(__name__)

FORMAT = 1


def _groups(elements):
    return [[VARIABLE if e.variable else NON_VARIABLE, list(e.weights())]
            for e in elements]


def to_dict(table):
    return {'format': FORMAT,
            'version': table.version,
            'settings': table.settings,
            'implicit_ranges': [list(r) for r in table.implicit_ranges],
            'entries': [[list(key), _groups(elements)]
                        for key, elements in table.items()],
            'contexts': [[list(key), list(prefix), _groups(elements)]
                         for key, prefix, elements in table.prefixed_items()]}


def from_dict(data):
    try:
        if data.get('format') != FORMAT:
            raise TableFormatError(0, 'unsupported snapshot format %r'
                                   % (data.get('format'),))
        rows = [(key, groups) for key, groups in data['entries']]
        prefixed_rows = [(key, prefix, groups)
                         for key, prefix, groups in data.get('contexts', [])]
        implicit_ranges = [tuple(r) for r in data.get('implicit_ranges', [])]
        version = data.get('version')
        settings = data.get('settings') or {}
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise TableFormatError(0, 'not a table snapshot: %s' % e)
    return load_table(rows, implicit_ranges, version, settings, prefixed_rows)


def dumps(table):
    return simplejson.dumps(to_dict(table), separators=(',', ':'))


def loads(s):
    try:
        data = simplejson.loads(s)
    except ValueError as e:
        raise TableFormatError(0, 'not a table snapshot: %s' % e)
    return from_dict(data)


def dump(table, f):
    simplejson.dump(to_dict(table), f, separators=(',', ':'))


def load(f):
    return loads(f.read())
