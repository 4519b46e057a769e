"""View Builders tests — pure group/index/sort reducers.

Tests cover:
    - group_by preserves first-seen key order and in-group order
    - index_by keeps the last record per key
    - sort_by is ascending, stable, and puts None keys last
    - Builders never mutate their input
"""

import pytest

from indexed_registry.core.domain_types import ViewKind
from indexed_registry.core.path_resolver import make_path_getter
from indexed_registry.core.view_builders import BUILDERS, group_by, index_by, sort_by

KIND = make_path_getter("kind")
N = make_path_getter("n")


def test_group_by_collects_records_per_key():
    a1, b, a2 = {"kind": "a", "v": 1}, {"kind": "b", "v": 2}, {"kind": "a", "v": 3}
    assert group_by([a1, b, a2], KIND) == {"a": [a1, a2], "b": [b]}
    assert list(group_by([a1, b, a2], KIND)) == ["a", "b"]


def test_group_by_empty():
    assert group_by([], KIND) == {}


def test_index_by_last_write_wins():
    first, other, last = {"kind": "x", "v": 1}, {"kind": "y"}, {"kind": "x", "v": 2}
    result = index_by([first, other, last], KIND)
    assert result["x"] is last
    assert result["y"] is other


def test_sort_by_ascending():
    records = [{"n": 3}, {"n": 1}, {"n": 2}]
    assert sort_by(records, N) == [{"n": 1}, {"n": 2}, {"n": 3}]


def test_sort_by_is_stable():
    r1, r2, r3 = {"n": 1, "tag": "first"}, {"n": 0}, {"n": 1, "tag": "second"}
    assert sort_by([r1, r2, r3], N) == [r2, r1, r3]


def test_sort_by_puts_missing_keys_last():
    missing, one = {"x": True}, {"n": 1}
    assert sort_by([missing, one], N) == [one, missing]


def test_builders_do_not_mutate_input():
    records = [{"n": 2, "kind": "a"}, {"n": 1, "kind": "b"}]
    snapshot = list(records)
    sort_by(records, N)
    group_by(records, KIND)
    index_by(records, KIND)
    assert records == snapshot


def test_unhashable_key_raises_type_error():
    with pytest.raises(TypeError):
        group_by([{"kind": ["a"]}], KIND)


def test_builders_lookup_by_kind():
    assert BUILDERS[ViewKind.GROUP] is group_by
    assert BUILDERS[ViewKind.INDEX] is index_by
    assert BUILDERS[ViewKind.ORDER] is sort_by
