#coding: utf-8
from aarduca.mapper import map_elements, code_points
from aarduca.table import Table, CollationElement

import ducet

table = ducet.load()


def elements(*code_points):
    result = []
    for cp in code_points:
        result.extend(table.get([cp]))
    return result


def test_empty_string():
    assert map_elements('', table) == []


def test_code_points():
    assert code_points('a\U00017000') == [0x61, 0x17000]
    assert code_points((0x61, 0x62)) == [0x61, 0x62]


def test_single_characters():
    assert map_elements('ab', table) == elements(0x61, 0x62)


def test_text_and_code_points_agree():
    assert map_elements('cab', table) == map_elements([0x63, 0x61, 0x62], table)


def test_contraction():
    result = map_elements('l·a', table)
    assert result == list(table.get([0x6C, 0xB7])) + elements(0x61)


def test_middle_dot_without_contraction():
    result = map_elements('a·', table)
    assert result == elements(0x61, 0xB7)
    assert result[1].variable


def test_expansion():
    result = map_elements('æ', table)
    assert len(result) == 3
    assert result[0].primary == 0x1C47
    assert result[2].primary == 0x1CAA


def test_combining_marks_map_separately():
    assert map_elements('a\u0301', table) == list(table.get([0xE1]))


def test_unknown_code_point_gets_implicit_weights():
    result = map_elements('a一', table)
    assert len(result) == 2
    assert result[1] == table.implicit_elements(0x4E00)[0]
    assert result[1].primary > table.top_primary


def test_prefix_context():
    t = Table()
    a = CollationElement(0x10, 0x20, 0x2)
    b = CollationElement(0x11, 0x20, 0x2)
    b_after_a = CollationElement(0x11, 0x20, 0x3)
    t.insert_or_replace([0x61], [a])
    t.insert_or_replace([0x62], [b])
    t.insert_or_replace([0x62], [b_after_a], prefix=[0x61])
    assert map_elements('b', t) == [b]
    assert map_elements('ab', t) == [a, b_after_a]
    assert map_elements('bb', t) == [b, b]


def test_long_input():
    result = map_elements('a' * 100000, table)
    assert len(result) == 100000
    assert result[-1] == result[0]


def test_context_is_limited_to_longest_prefix():
    t = Table()
    t.insert_or_replace([0x61], [CollationElement(0x10, 0x20, 0x2)])
    t.insert_or_replace([0x62], [CollationElement(0x11, 0x20, 0x2)])
    t.insert_or_replace([0x62], [CollationElement(0x12, 0x20, 0x2)],
                        prefix=[0x61, 0x61])
    assert t.max_prefix == 2
    contexts = []
    lookup = t.lookup

    def recording_lookup(code_points, position=0, context=None):
        contexts.append(context)
        return lookup(code_points, position, context)

    t.lookup = recording_lookup
    result = map_elements('ab' * 50 + 'aab', t)
    assert max(len(context) for context in contexts) == 2
    assert result[1].primary == 0x11
    assert result[-1].primary == 0x12


def test_table_without_prefixes_gets_no_context():
    assert table.max_prefix == 0
    assert table.context([0x61] * 10, 9) == []
