# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from random import Random

from hypothesis import given, strategies as hst

from treeshrink.strategies import integers, just, lists

from tests.common.debug import minimal


def test_map_applies_function_on_every_read():
    calls = []

    def record(x):
        calls.append(x)
        return x + 1

    tree = just(1).map(record).new_value(Random(0))
    assert tree.current() == 2
    assert tree.current() == 2
    assert calls == [1, 1]


def test_map_function_is_shared_between_trees():
    strategy = integers(0, 10).map(str)
    rnd = Random(0)
    trees = [strategy.new_value(rnd) for _ in range(10)]
    assert all(t.pack is strategy.pack for t in trees)


@given(hst.integers(0, 2**32 - 1))
def test_map_shrinks_through_its_source(seed):
    strategy = integers(0, 100).map(lambda x: x * 2)
    assert minimal(strategy, lambda x: x >= 10, random=Random(seed)) == 10


def test_map_complicate_restores_value():
    tree = integers(50, 100).map(lambda x: -x).new_value(Random(0))
    before = tree.current()
    if tree.simplify():
        assert tree.complicate()
    assert tree.current() == before


def test_map_repr():
    assert repr(just(1).map(str)) == "just(1).map(str)"
    doubled = integers(0, 3).map(lambda x: x * 2)
    assert repr(doubled) == "integers(0, 3).map(lambda x: x * 2)"


def test_map_into_converts_with_the_target_type():
    tree = lists(integers(0, 5), size=3).map_into(tuple).new_value(Random(0))
    value = tree.current()
    assert isinstance(value, tuple)
    assert len(value) == 3


def test_map_into_shrinks_like_map():
    assert minimal(lists(integers(0, 5), size=(2, 5)).map_into(tuple)) == (0, 0)


def test_map_into_repr():
    assert repr(just([1]).map_into(tuple)) == "just([1]).map_into(tuple)"
