# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import heapq
from collections import deque
from random import Random

import pytest
from hypothesis import given, strategies as hst
from sortedcontainers import SortedDict, SortedSet

from treeshrink import Rejected, local_settings, settings
from treeshrink.errors import InvalidArgument
from treeshrink.strategies import (
    deques,
    dictionaries,
    frozensets,
    heaps,
    integers,
    just,
    lists,
    sampled_from,
    sets,
    sorted_dictionaries,
    sorted_sets,
    tuples,
)

from tests.common.debug import draws, minimal

seeds = hst.integers(0, 2**32 - 1)

three_letter_words = lists(sampled_from("ab"), size=3).map("".join)


def test_sets_of_a_small_domain_hit_their_minimum_size_exactly():
    for value in draws(sets(three_letter_words, size=(2, 3)), 256):
        assert len(value) == 2


def test_dictionaries_of_a_small_domain_hit_their_minimum_size_exactly():
    strategy = dictionaries(three_letter_words, integers(0, 9), size=(2, 3))
    for value in draws(strategy, 256):
        assert len(value) == 2


@given(seeds)
def test_dictionary_size_matches_list_length_without_key_collisions(seed):
    tree = dictionaries(integers(0, 2**64), just(None)).new_value(Random(seed))
    pairs = tree.source.source
    assert len(tree.current()) == len(pairs.current())
    for _ in range(10):
        if not tree.simplify():
            break
        assert len(tree.current()) == len(pairs.current())


def test_later_pairs_win_on_duplicate_keys():
    tree = dictionaries(just("k"), integers(0, 100), size=(1, 5)).new_value(
        Random(0)
    )
    pairs = tree.source.source.current()
    assert tree.current() == {"k": pairs[-1][1]}


@pytest.mark.parametrize(
    "function, container",
    [
        (sets, set),
        (frozensets, frozenset),
        (sorted_sets, SortedSet),
        (deques, deque),
        (heaps, list),
        (lists, list),
    ],
)
def test_containers_have_the_right_type(function, container):
    for value in draws(function(integers(0, 10)), 20):
        assert isinstance(value, container)


@pytest.mark.parametrize(
    "function, container", [(dictionaries, dict), (sorted_dictionaries, SortedDict)]
)
def test_maps_have_the_right_type(function, container):
    for value in draws(function(integers(0, 10), integers(0, 10)), 20):
        assert isinstance(value, container)


@given(seeds)
def test_deques_keep_generated_order(seed):
    tree = deques(integers(0, 10), size=(0, 20)).new_value(Random(seed))
    assert list(tree.current()) == tree.source.current()


@given(seeds)
def test_heaps_satisfy_the_heap_invariant(seed):
    tree = heaps(integers(-10, 10), size=(0, 30)).new_value(Random(seed))
    heap = tree.current()
    assert sorted(heap) == sorted(tree.source.current())
    for i in range(1, len(heap)):
        assert heap[(i - 1) // 2] <= heap[i]
    assert [heapq.heappop(heap) for _ in range(len(heap))] == sorted(
        tree.source.current()
    )


def test_sorted_sets_iterate_in_order():
    for value in draws(sorted_sets(integers(-50, 50), size=(0, 20)), 20):
        assert list(value) == sorted(value)


def test_sets_do_not_shrink_below_their_minimum_size():
    result = minimal(sets(integers(0, 100), size=(3, 10)))
    assert len(result) == 3


def test_dictionaries_do_not_shrink_below_their_minimum_size():
    result = minimal(dictionaries(integers(0, 100), integers(0, 100), size=(2, 6)))
    assert len(result) == 2
    assert set(result.values()) == {0}


def test_dictionaries_shrink_towards_small_keys():
    result = minimal(dictionaries(integers(0, 100), integers(0, 10), size=(1, 6)))
    assert result == {0: 0}


def test_lists_shrink_to_their_minimum_size():
    assert minimal(lists(integers(0, 10), size=(2, 10))) == [0, 0]


def test_deques_shrink_like_lists():
    result = minimal(deques(integers(0, 10), size=(1, 10)), lambda d: sum(d) >= 3)
    assert isinstance(result, deque)
    assert sum(result) == 3


def test_impossible_minimum_size_is_rejected():
    strategy = sets(integers(0, 1), size=(3, 4))
    with local_settings(settings(max_local_rejects=10)):
        with pytest.raises(Rejected) as err:
            strategy.new_value(Random(0))
    assert err.value.whence == "sets minimum size"
    assert err.value.attempts == 10


def test_frozensets_name_their_filter():
    strategy = frozensets(integers(0, 1), size=(3, 4))
    with local_settings(settings(max_local_rejects=3)):
        with pytest.raises(Rejected) as err:
            strategy.new_value(Random(0))
    assert err.value.whence == "frozensets minimum size"


@pytest.mark.parametrize(
    "function, args",
    [
        (lists, (1,)),
        (sets, ([1, 2],)),
        (deques, (integers(0, 1), -1)),
        (heaps, (integers(0, 1), (5, 2))),
        (dictionaries, (integers(0, 1), "x")),
        (sorted_dictionaries, ("x", integers(0, 1))),
        (tuples, (integers(0, 1), None)),
    ],
)
def test_invalid_arguments(function, args):
    with pytest.raises(InvalidArgument):
        function(*args)


def test_list_repr():
    assert (
        repr(lists(integers(1, 19), size=(5, 20)))
        == "lists(integers(1, 19), size=SizeRange(5, 20))"
    )


def test_deque_repr():
    assert repr(deques(just(1), size=2)) == "deques(just(1), size=SizeRange(2, 3))"


def test_dictionary_repr_shows_keys_and_values():
    strategy = dictionaries(just(1), integers(0, 3))
    assert repr(strategy.filtered_strategy) == (
        "dictionaries(just(1), integers(0, 3), size=SizeRange(0, 100))"
    )
