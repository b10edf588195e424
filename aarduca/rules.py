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
Tailoring rule parser.

Rules use the ICU/CLDR collation rule syntax, see
http://www.unicode.org/reports/tr35/tr35-collation.html#Rules

    [strength 2]        setting
    &c < ch <<< cH      reset to "c", then relations
    &[before 1]a < x    place "x" just before "a"
    &a <* bcd-f         one relation per character, d-f is a range
    &a <<< b|c / d      "c" after "b", followed by the weights of "d"

Whitespace separates tokens, ``#`` starts a comment, ``\\`` escapes the
next character and ``'...'`` quotes literal text.

>>> rules = parse_tailoring('&a < b <<< B # comment')
>>> [str(rule) for rule in rules]
['&a', '< b', '<<< B']
>>> parse_tailoring('< b')
Traceback (most recent call last):
...
aarduca.errors.RuleSyntaxError: offset 0: relation without a reset point

"""

from aarduca.errors import RuleSyntaxError

IDENTICAL = 5

OPERATORS = {1: '<', 2: '<<', 3: '<<<', 4: '<<<<', IDENTICAL: '='}

SIMPLE_ESCAPES = {'a': '\a', 'b': '\b', 't': '\t', 'n': '\n',
                  'v': '\v', 'f': '\f', 'r': '\r', 'e': '\x1b'}


def is_reserved(ch):
    return (ch.isspace() or
            '\x21' <= ch <= '\x2f' or
            '\x3a' <= ch <= '\x40' or
            '\x5b' <= ch <= '\x60' or
            '\x7b' <= ch <= '\x7e')


def format_string(s):
    """
    >>> format_string('a b<')
    'a\\\\ b\\\\<'

    """
    parts = []
    for ch in s:
        if not ch.isprintable():
            parts.append('\\u%04X' % ord(ch) if ord(ch) <= 0xFFFF
                         else '\\U%08X' % ord(ch))
        elif is_reserved(ch):
            parts.append('\\' + ch)
        else:
            parts.append(ch)
    return ''.join(parts)


class Rule(object):

    fields = ()

    def __eq__(self, other):
        return (type(self) is type(other) and
                all(getattr(self, f) == getattr(other, f)
                    for f in self.fields))

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(tuple(repr(getattr(self, f)) for f in self.fields))

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__,
                           ', '.join('%s=%r' % (f, getattr(self, f))
                                     for f in self.fields))


class Setting(Rule):

    fields = ('key', 'value')

    def __init__(self, key, value):
        self.key = key
        self.value = value

    def __str__(self):
        return '[%s %s]' % (self.key, self.value)


class Reset(Rule):

    fields = ('sequence',)

    def __init__(self, sequence):
        self.sequence = sequence

    def __str__(self):
        return '&' + format_string(self.sequence)


class Relation(Rule):

    fields = ('strength', 'target', 'prefix', 'extension', 'before')

    def __init__(self, strength, target, prefix=None, extension=None,
                 before=None):
        self.strength = strength
        self.target = target
        self.prefix = prefix
        self.extension = extension
        self.before = before

    def __str__(self):
        s = format_string(self.target)
        if self.prefix:
            s = '%s|%s' % (format_string(self.prefix), s)
        if self.extension:
            s = '%s/%s' % (s, format_string(self.extension))
        s = '%s %s' % (OPERATORS[self.strength], s)
        if self.before:
            s = '[before %d] %s' % (self.before, s)
        return s


class RangeRelation(Rule):

    fields = ('strength', 'targets', 'before')

    def __init__(self, strength, targets, before=None):
        self.strength = strength
        self.targets = list(targets)
        self.before = before

    def __str__(self):
        s = '%s* %s' % (OPERATORS[self.strength],
                        format_string(''.join(self.targets)))
        if self.before:
            s = '[before %d] %s' % (self.before, s)
        return s


class RuleParser(object):

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.rules = []
        self.have_reset = False
        self.before = None

    def parse(self):
        while True:
            self.skip_space()
            ch = self.peek()
            if ch is None:
                break
            if ch == '&':
                self.read_reset()
            elif ch == '[':
                self.read_setting()
            elif ch in '<=':
                self.read_relation()
            elif ch == ']':
                self.fail('unbalanced "]"')
            else:
                self.fail('unexpected character %r' % ch)
        if self.before is not None:
            level, offset = self.before
            self.fail('[before %d] is not followed by a relation' % level,
                      offset)
        return self.rules

    def fail(self, reason, offset=None):
        raise RuleSyntaxError(self.pos if offset is None else offset, reason)

    def peek(self):
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def skip_space(self):
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif ch == '#':
                end = text.find('\n', self.pos)
                self.pos = len(text) if end == -1 else end + 1
            else:
                break

    def read_option(self):
        text = self.text
        start = self.pos
        depth = 0
        for i in range(start, len(text)):
            if text[i] == '[':
                depth += 1
            elif text[i] == ']':
                depth -= 1
                if not depth:
                    self.pos = i + 1
                    parts = text[start + 1:i].split(None, 1)
                    if not parts:
                        self.fail('empty option', start)
                    value = parts[1].strip() if len(parts) > 1 else ''
                    return parts[0], value, start
        self.fail('unbalanced "["', start)

    def read_setting(self):
        key, value, start = self.read_option()
        if key == 'before':
            self.set_before(value, start)
        else:
            self.rules.append(Setting(key, value))

    def set_before(self, value, start):
        if value not in ('1', '2', '3'):
            self.fail('invalid before level %r' % value, start)
        if self.before is not None:
            self.fail('more than one [before] for a relation', start)
        self.before = (int(value), start)

    def read_reset(self):
        self.pos += 1
        self.skip_space()
        if self.peek() == '[':
            key, value, start = self.read_option()
            if key != 'before':
                self.fail('unsupported reset option %r' % key, start)
            self.set_before(value, start)
        self.rules.append(Reset(self.read_string()))
        self.have_reset = True

    def read_relation(self):
        text = self.text
        offset = self.pos
        if text[self.pos] == '=':
            strength = IDENTICAL
            self.pos += 1
        else:
            strength = 0
            while self.peek() == '<':
                strength += 1
                self.pos += 1
            if strength > 4:
                self.fail('too many "<" in relation', offset)
        if not self.have_reset:
            self.fail('relation without a reset point', offset)
        starred = self.peek() == '*'
        if starred:
            self.pos += 1
        before = None
        if self.before is not None:
            before, before_offset = self.before
            if strength != before:
                self.fail('[before %d] does not match relation %s'
                          % (before, OPERATORS[strength]), before_offset)
            self.before = None
        if starred:
            self.rules.append(RangeRelation(strength, self.read_run(), before))
            return
        target = self.read_string()
        prefix = extension = None
        self.skip_space()
        if self.peek() == '|':
            self.pos += 1
            prefix, target = target, self.read_string()
            self.skip_space()
        if self.peek() == '/':
            self.pos += 1
            extension = self.read_string()
        self.rules.append(Relation(strength, target, prefix, extension,
                                   before))

    def read_string(self):
        self.skip_space()
        start = self.pos
        chars = []
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == '\\':
                chars.append(self.read_escape())
            elif ch == "'":
                chars.extend(self.read_quoted())
            elif is_reserved(ch):
                break
            else:
                chars.append(ch)
                self.pos += 1
        if not chars:
            self.fail('expected a string', start)
        return ''.join(chars)

    def read_run(self):
        self.skip_space()
        start = self.pos
        chars = []
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == '\\':
                chars.append(self.read_escape())
            elif ch == "'":
                chars.extend(self.read_quoted())
            elif ch == '-' and chars:
                dash = self.pos
                self.pos += 1
                first, last = ord(chars[-1]), ord(self.read_range_end())
                if last < first:
                    self.fail('reversed range', dash)
                chars.extend(chr(cp) for cp in range(first + 1, last + 1))
            elif is_reserved(ch):
                break
            else:
                chars.append(ch)
                self.pos += 1
        if not chars:
            self.fail('expected a string', start)
        return chars

    def read_range_end(self):
        ch = self.peek()
        if ch == '\\':
            return self.read_escape()
        if ch is None or is_reserved(ch):
            self.fail('expected the end of a range')
        self.pos += 1
        return ch

    def read_escape(self):
        text = self.text
        start = self.pos
        if start + 1 >= len(text):
            self.fail('escape at end of input', start)
        ch = text[start + 1]
        self.pos = start + 2
        if ch in 'uU':
            n = 4 if ch == 'u' else 8
            digits = text[start + 2:start + 2 + n]
            if len(digits) == n and all(d in '0123456789abcdefABCDEF'
                                        for d in digits):
                cp = int(digits, 16)
                if cp > 0x10FFFF:
                    self.fail('code point out of range', start)
                self.pos += n
                return chr(cp)
            return ch
        return SIMPLE_ESCAPES.get(ch, ch)

    def read_quoted(self):
        text = self.text
        start = self.pos
        if text[start + 1:start + 2] == "'":
            self.pos = start + 2
            return ["'"]
        self.pos = start + 1
        chars = []
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == "'":
                if text[self.pos + 1:self.pos + 2] == "'":
                    chars.append("'")
                    self.pos += 2
                    continue
                self.pos += 1
                return chars
            if ch == '\\':
                chars.append(self.read_escape())
            else:
                chars.append(ch)
                self.pos += 1
        self.fail('unterminated quote', start)


def parse_tailoring(text):
    """Parse rule text into a flat list of Setting, Reset, Relation and
    RangeRelation rules."""
    return RuleParser(text).parse()
