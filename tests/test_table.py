#coding: utf-8
import pytest

from aarduca.table import Table, CollationElement
from aarduca.errors import FrozenTableError

import ducet

A = CollationElement(0x1C47, 0x20, 0x2)
C = CollationElement(0x1C7A, 0x20, 0x2)
H = CollationElement(0x1D18, 0x20, 0x2)
CH = CollationElement(0x1D19, 0x20, 0x2)
DOT = CollationElement(0, 0x111, 0x2)


def make_table():
    table = Table()
    table.insert_or_replace([0x61], [A])
    table.insert_or_replace([0x63], [C])
    table.insert_or_replace([0x68], [H])
    table.insert_or_replace([0x63, 0x68], [CH])
    return table


def test_longest_match_wins():
    table = make_table()
    assert table.lookup([0x63, 0x68, 0x65]) == (2, (CH,))
    assert table.lookup([0x63, 0x61]) == (1, (C,))
    assert table.lookup([0x61, 0x63, 0x68], 1) == (2, (CH,))


def test_match_without_entry():
    table = make_table()
    assert table.match([0x7A]) == (0, None)


def test_lookup_falls_back_to_implicit_weights():
    table = make_table()
    length, elements = table.lookup([0x4E00])
    assert length == 1
    assert len(elements) == 1
    assert elements[0].primary > table.top_primary
    assert elements[0].secondary == 0x20
    assert elements[0].tertiary == 0x2
    assert not elements[0].variable


def test_implicit_weights_follow_code_point_order():
    table = make_table()
    first = table.implicit_elements(0x4E00)[0]
    second = table.implicit_elements(0x4E01)[0]
    assert second.primary == first.primary + 1


def test_implicit_ranges_come_first():
    table = Table([(0x1B170, 0x1B2FF, 0xFB01), (0x17000, 0x18AFF, 0xFB00)])
    table.insert_or_replace([0x61], [A])
    tangut = table.implicit_elements(0x17000)[0]
    nushu = table.implicit_elements(0x1B170)[0]
    han = table.implicit_elements(0x4E00)[0]
    assert tangut.primary == table.top_primary + 1
    assert nushu.primary == tangut.primary + (0x18AFF - 0x17000 + 1)
    assert tangut.primary < nushu.primary < han.primary


def test_implicit_weights_use_common_weights():
    table = Table()
    table.insert_or_replace([0x61], [CollationElement(0x10, 0x5, 0x1)])
    implicit = table.implicit_elements(0x4E00)[0]
    assert (implicit.secondary, implicit.tertiary) == (0x5, 0x1)


def test_insert_or_replace_replaces():
    table = make_table()
    table.insert_or_replace([0x61], [H])
    assert table.get([0x61]) == (H,)
    assert len(table) == 4


def test_frozen_table_rejects_changes():
    table = make_table().freeze()
    with pytest.raises(FrozenTableError):
        table.insert_or_replace([0x62], [A])


def test_copy_is_independent():
    table = make_table().freeze()
    copy = table.copy()
    copy.insert_or_replace([0x62], [A])
    assert not copy.frozen
    assert [0x62] in copy
    assert [0x62] not in table


def test_prefixed_entry_needs_context():
    table = Table()
    table.insert_or_replace([0x61], [A])
    table.insert_or_replace([0x63], [C])
    table.insert_or_replace([0x68], [H])
    table.insert_or_replace([0x68], [DOT], prefix=[0x63])
    assert table.lookup([0x68]) == (1, (H,))
    assert table.lookup([0x63, 0x68], 1) == (1, (DOT,))
    assert table.lookup([0x61, 0x68], 1) == (1, (H,))
    assert table.lookup([0x68], 0, context=[0x63]) == (1, (DOT,))


def test_longer_match_beats_prefixed_entry():
    table = make_table()
    table.insert_or_replace([0x68], [DOT], prefix=[0x61])
    assert table.lookup([0x61, 0x63, 0x68], 1) == (2, (CH,))


def test_prefixed_items():
    table = make_table()
    table.insert_or_replace([0x68], [DOT], prefix=[0x63])
    assert list(table.prefixed_items()) == [((0x68,), (0x63,), (DOT,))]
    assert len(table) == 5


def test_sample_table_metadata():
    table = ducet.load()
    assert table.version == '9.0.0'
    assert table.frozen
    assert table.top_primary == 0x1F21
    assert table.common_secondary == 0x20
    assert table.common_tertiary == 0x2
    assert table.implicit_ranges == ((0x17000, 0x18AFF, 0xFB00),
                                     (0x1B170, 0x1B2FF, 0xFB01))


def test_element_str():
    assert str(A) == '[.1C47.0020.0002]'
    assert str(CollationElement(0x20D, 0x20, 0x2, 0x5, True)) == '[*020D.0020.0002.0005]'
    assert CollationElement(0, 0, 0).is_ignorable()
    assert not DOT.is_ignorable()
    assert A.with_weight(2, 0x24) == CollationElement(0x1C47, 0x24, 0x2)
