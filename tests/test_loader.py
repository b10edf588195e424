#coding: utf-8
import logging

import pytest

from aarduca.loader import load_table, load_text, parse_lines
from aarduca.table import CollationElement
from aarduca.errors import TableFormatError

import ducet


def test_load_sample():
    table = ducet.load()
    assert table.get([0x61]) == (CollationElement(0x1C47, 0x20, 0x2),)
    assert table.get([0x2D]) == (CollationElement(0x20D, 0x20, 0x2,
                                                  variable=True),)
    assert len(table.get([0xE6])) == 3
    assert [0x6C, 0xB7] in table


def test_comments_and_directives_are_skipped():
    source = parse_lines([
        '# comment',
        '% also a comment',
        '',
        '@unknown directive',
        '0061 ; [.1C47.0020.0002] # a',
    ])
    assert source.rows == [([0x61], [('.', [0x1C47, 0x20, 0x2])])]
    assert source.line_numbers == [4]
    assert source.version is None


def test_four_weights():
    table = load_text('0061 ; [.1C47.0020.0002.0007]')
    assert table.get([0x61])[0].quaternary == 7


def test_load_table_from_rows():
    table = load_table([([0x61], [('.', [0x1C47, 0x20, 0x2])]),
                        ([0x62], [('.', [0x1C60, 0x20, 0x2])])],
                       version='test', settings={'strength': '1'})
    assert len(table) == 2
    assert table.frozen
    assert table.version == 'test'
    assert table.settings == {'strength': '1'}


def test_load_table_prefixed_rows():
    table = load_table([([0x61], [('.', [0x1C47, 0x20, 0x2])])],
                       prefixed_rows=[([0x62], [0x61],
                                       [('.', [0x1C60, 0x20, 0x3])])])
    assert table.get([0x62], prefix=[0x61]) == (CollationElement(0x1C60, 0x20, 0x3),)
    assert table.get([0x62]) is None


@pytest.mark.parametrize('row, reason', [
    (([], [('.', [1, 1, 1])]), 'empty code point sequence'),
    (([0x110000], [('.', [1, 1, 1])]), 'invalid code point'),
    (([0x61], []), 'missing weights'),
    (([0x61], [('?', [1, 1, 1])]), 'unknown weight marker'),
    (([0x61], [('.', [1, 1])]), 'expected 3 or 4 weights'),
    (([0x61], [('.', [1, -1, 1])]), 'invalid weight'),
    (([0x61], [('.', [1, 0, 1])]), 'non-monotonic weights'),
    (([0x61], [('.', [0, 1, 0])]), 'non-monotonic weights'),
    (([0x61], [('*', [0, 1, 1])]), 'variable element with zero primary'),
    ('abc', 'expected a (code points, weights) pair'),
])
def test_invalid_rows(row, reason):
    rows = [([0x62], [('.', [1, 1, 1])]), row]
    with pytest.raises(TableFormatError) as excinfo:
        load_table(rows)
    assert excinfo.value.index == 1
    assert excinfo.value.reason.startswith(reason)


def test_invalid_implicit_range():
    with pytest.raises(TableFormatError) as excinfo:
        load_table([], implicit_ranges=[(0x18AFF, 0x17000, 0xFB00)])
    assert excinfo.value.index == 0


def test_invalid_prefixed_row():
    with pytest.raises(TableFormatError) as excinfo:
        load_table([([0x61], [('.', [1, 1, 1])])],
                   prefixed_rows=[([0x62], [], [('.', [1, 1, 1])])])
    assert excinfo.value.index == 1
    assert excinfo.value.reason == 'empty prefix'


def test_load_text_reports_line_number():
    text = '\n'.join(['# header',
                      '0061 ; [.1C47.0020.0002]',
                      '',
                      '0062 ; [.1C60.0000.0002]'])
    with pytest.raises(TableFormatError) as excinfo:
        load_text(text)
    assert excinfo.value.index == 3
    assert str(excinfo.value).startswith('row 3: non-monotonic')


@pytest.mark.parametrize('line', [
    '0061 [.1C47.0020.0002]',
    'XYZ ; [.1C47.0020.0002]',
    '0061 ; [.1C47.0020.0002] junk',
    '0061 ; [.1C47.00G0.0002]',
])
def test_malformed_lines(line):
    with pytest.raises(TableFormatError):
        parse_lines([line])


def test_implicit_weights_after_rows():
    with pytest.raises(TableFormatError) as excinfo:
        parse_lines(['0061 ; [.1C47.0020.0002]',
                     '@implicitweights 17000..18AFF; FB00'])
    assert excinfo.value.index == 1


def test_malformed_implicit_weights():
    with pytest.raises(TableFormatError):
        parse_lines(['@implicitweights 17000-18AFF; FB00'])


def test_load_table_logs_timing(caplog):
    with caplog.at_level(logging.DEBUG, logger='aarduca'):
        load_table([([0x61], [('.', [0x1C47, 0x20, 0x2])])])
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith('load_table took') for m in messages)
    assert 'Loaded 1 entries, top primary 1C47' in messages
