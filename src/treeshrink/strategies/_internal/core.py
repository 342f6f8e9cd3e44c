# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import collections
import heapq
from typing import Deque, Dict, FrozenSet, List, Sequence, Set, TypeVar

from sortedcontainers import SortedDict, SortedSet

from treeshrink.errors import InvalidArgument
from treeshrink.internal.validation import (
    check_strategy,
    check_valid_integer,
    check_valid_interval,
)
from treeshrink.strategies._internal.collections import (
    CollectionStrategy,
    MinSize,
    SizeRange,
    TupleStrategy,
    VectorStrategy,
    size_range,
)
from treeshrink.strategies._internal.misc import JustStrategy, SampledFromStrategy
from treeshrink.strategies._internal.numbers import IntegersStrategy
from treeshrink.strategies._internal.strategies import (
    Ex,
    FilteredStrategy,
    SearchStrategy,
)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def just(value: T) -> SearchStrategy[T]:
    """Return a strategy which only generates ``value``.

    Note: ``value`` is not copied. Be wary of using mutable values.

    Examples from this strategy do not shrink (because there is only one).
    """
    return JustStrategy(value)


def integers(min_value: int, max_value: int) -> SearchStrategy[int]:
    """Returns a strategy which generates integers between ``min_value`` and
    ``max_value``, both inclusive, chosen uniformly.

    Examples from this strategy will shrink towards zero, or towards
    whichever bound is closest to zero if zero is not allowed.
    """
    for value, name in ((min_value, "min_value"), (max_value, "max_value")):
        if value is None:
            raise InvalidArgument("%s is required" % (name,))
        check_valid_integer(value, name)
    check_valid_interval(min_value, max_value, "min_value", "max_value")
    return IntegersStrategy(min_value, max_value)


def sampled_from(elements: Sequence[T]) -> SearchStrategy[T]:
    """Returns a strategy which generates any value present in ``elements``.

    ``elements`` may be any ordered collection or an
    :class:`~python:enum.Enum` type.

    Examples from this strategy shrink by replacing them with values earlier
    in the list.
    """
    if isinstance(elements, (set, frozenset, dict, SortedSet)):
        raise InvalidArgument(
            "Cannot sample from %r, because it is not an ordered collection"
            % (elements,)
        )
    try:
        values = tuple(elements)
    except TypeError:
        raise InvalidArgument(
            "Cannot sample from %r (type=%s)" % (elements, type(elements).__name__)
        ) from None
    if not values:
        raise InvalidArgument("Cannot sample from a length-zero sequence.")
    if len(values) == 1:
        return just(values[0])
    return SampledFromStrategy(values)


def tuples(*args: SearchStrategy) -> SearchStrategy[tuple]:
    """Return a strategy which generates a tuple of the same length as args by
    generating the value at index i from args[i].

    Examples from this strategy shrink by shrinking their component parts,
    leftmost first.
    """
    for arg in args:
        check_strategy(arg)
    return TupleStrategy(args)


def _vector(elements, size, name="elements"):
    check_strategy(elements, name)
    size = SizeRange() if size is None else size_range(size)
    if size.is_empty:
        raise InvalidArgument(
            "Cannot generate collections with size=%r, which contains no "
            "lengths" % (size,)
        )
    return VectorStrategy(elements, size)


def lists(elements: SearchStrategy[Ex], size=None) -> SearchStrategy[List[Ex]]:
    """Returns a list containing values drawn from elements, with a length
    drawn uniformly from ``size``.

    ``size`` is anything :func:`size_range` accepts, and defaults to
    ``SizeRange(0, 100)``.

    Examples from this strategy shrink by first trying to remove each element
    of the list once, in order, while the list stays at least as long as the
    minimum size, and then by shrinking each remaining element in turn.
    """
    return _vector(elements, size)


def deques(elements: SearchStrategy[Ex], size=None) -> SearchStrategy[Deque[Ex]]:
    """Returns a :class:`~python:collections.deque` of values drawn from
    elements, in the order they were drawn.

    Examples from this strategy shrink as :func:`lists` do.
    """
    vector = _vector(elements, size)
    return CollectionStrategy(vector, collections.deque, "deques")


def _heapified(values):
    heapq.heapify(values)
    return values


def heaps(elements: SearchStrategy[Ex], size=None) -> SearchStrategy[List[Ex]]:
    """Returns a list of values drawn from elements, arranged to satisfy the
    :mod:`python:heapq` invariant so that ``heapq.heappop`` yields them in
    ascending order.

    Examples from this strategy shrink as :func:`lists` do.
    """
    vector = _vector(elements, size)
    return CollectionStrategy(vector, _heapified, "heaps")


def _sets(elements, size, fold, name):
    vector = _vector(elements, size)
    return FilteredStrategy(
        CollectionStrategy(vector, fold, name),
        condition=MinSize(vector.size.start),
        whence="%s minimum size" % (name,),
    )


def sets(elements: SearchStrategy[Ex], size=None) -> SearchStrategy[Set[Ex]]:
    """Returns a set of values drawn from elements.

    A list of length drawn from ``size`` is generated and collapsed into a
    set, so duplicates make the set smaller than the list. Lists whose set
    would fall below the minimum size are rejected and drawn again, and
    :class:`~treeshrink.errors.Rejected` is raised if that keeps happening.
    The maximum is bounded by the list length, so the set is always strictly
    smaller than ``size.end``.

    Examples from this strategy shrink as :func:`lists` do, skipping any step
    which would take the set below its minimum size.
    """
    return _sets(elements, size, set, "sets")


def frozensets(
    elements: SearchStrategy[Ex], size=None
) -> SearchStrategy[FrozenSet[Ex]]:
    """This is identical to the sets function but instead returns
    frozensets."""
    return _sets(elements, size, frozenset, "frozensets")


def sorted_sets(elements: SearchStrategy[Ex], size=None) -> SearchStrategy[SortedSet]:
    """This is identical to the sets function but instead returns a
    :class:`sortedcontainers.SortedSet`, so elements must be comparable."""
    return _sets(elements, size, SortedSet, "sorted_sets")


def _dictionaries(keys, values, size, fold, name):
    check_strategy(keys, "keys")
    check_strategy(values, "values")
    vector = _vector(TupleStrategy((keys, values)), size)
    return FilteredStrategy(
        CollectionStrategy(vector, fold, name, parts=(keys, values)),
        condition=MinSize(vector.size.start),
        whence="%s minimum size" % (name,),
    )


def dictionaries(
    keys: SearchStrategy[K], values: SearchStrategy[V], size=None
) -> SearchStrategy[Dict[K, V]]:
    """Generates dictionaries with keys drawn from the keys argument and
    values drawn from the values argument.

    A list of ``(key, value)`` pairs of length drawn from ``size`` is
    generated and folded into a dict. When a key occurs more than once the
    later pair wins. As with :func:`sets`, draws whose dict would be smaller
    than the minimum size are rejected.

    Examples from this strategy shrink by removing pairs and then by
    shrinking each remaining key and value, skipping any step which would
    take the dict below its minimum size.
    """
    return _dictionaries(keys, values, size, dict, "dictionaries")


def sorted_dictionaries(
    keys: SearchStrategy[K], values: SearchStrategy[V], size=None
) -> SearchStrategy[SortedDict]:
    """This is identical to the dictionaries function but instead returns a
    :class:`sortedcontainers.SortedDict`, so keys must be comparable."""
    return _dictionaries(keys, values, size, SortedDict, "sorted_dictionaries")
