"""Tests for aaptools.search.memo."""
from aaptools.io.coloring import str_to_coloring
from aaptools.search.memo import DeadPrefixTable, prefix_key, prefix_key_from_coloring


def test_prefix_key_distinguishes_length():
    # "R" and "RR" both have an empty blue mask
    assert prefix_key(0, 1) != prefix_key(0, 2)
    assert prefix_key(0, 0) == 1


def test_prefix_key_distinguishes_content():
    keys = {prefix_key_from_coloring(str_to_coloring(s), 3) for s in
            ["RRR", "RRB", "RBR", "RBB", "BRR", "BRB", "BBR", "BBB"]}
    assert len(keys) == 8


def test_prefix_key_from_coloring_ignores_tail():
    a = str_to_coloring("RBRB..")
    b = str_to_coloring("RBRBRB")
    assert prefix_key_from_coloring(a, 4) == prefix_key_from_coloring(b, 4)
    assert prefix_key_from_coloring(b, 4) == prefix_key(0b1010, 4)


def test_dead_prefix_only_upwards():
    table = DeadPrefixTable(3, 3)
    key = prefix_key(0b10, 3)
    table.mark_dead(key, 9)
    assert table.is_dead(key, 9) is True
    assert table.is_dead(key, 12) is True
    assert table.is_dead(key, 8) is False


def test_dead_prefix_keeps_smallest_n():
    table = DeadPrefixTable(3, 3)
    key = prefix_key(0, 2)
    table.mark_dead(key, 10)
    table.mark_dead(key, 7)
    table.mark_dead(key, 12)
    assert table.is_dead(key, 7) is True
    assert len(table) == 1
    table.clear()
    assert len(table) == 0
    assert table.is_dead(key, 100) is False


def test_table_lengths():
    table = DeadPrefixTable(4, 5)
    assert table.lengths == (4, 5)
    table.check_lengths(4, 5)
