# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import enum
from random import Random
from typing import Any, Callable, List, Optional, Sequence, Set, Tuple

import attr

from treeshrink.errors import InvalidArgument, InvalidState
from treeshrink.internal.validation import (
    check_valid_integer,
    check_valid_interval,
    check_valid_size,
)
from treeshrink.strategies._internal.strategies import (
    Ex,
    MappedStrategy,
    SearchStrategy,
    ValueTree,
)


@attr.s(frozen=True, slots=True, repr=False)
class SizeRange:
    """The half-open interval ``[start, end)`` of lengths a collection may
    be generated with."""

    start = attr.ib(default=0)
    end = attr.ib(default=100)

    def __attrs_post_init__(self):
        for name in ("start", "end"):
            value = getattr(self, name)
            if value is None:
                raise InvalidArgument("SizeRange %s may not be None" % (name,))
            check_valid_size(value, name)
        check_valid_interval(self.start, self.end, "start", "end")

    @classmethod
    def exactly(cls, n: int) -> "SizeRange":
        check_valid_size(n, "n")
        return cls(n, n + 1)

    @classmethod
    def up_to(cls, high: int) -> "SizeRange":
        return cls(0, high)

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    def as_range(self) -> range:
        return range(self.start, self.end)

    def __add__(self, offset):
        if isinstance(offset, bool) or not isinstance(offset, int):
            return NotImplemented
        return SizeRange(self.start + offset, self.end + offset)

    __radd__ = __add__

    def __repr__(self):
        return "SizeRange(%d, %d)" % (self.start, self.end)


def size_range(value) -> SizeRange:
    """Converts any of the accepted ways of describing a collection size
    into a SizeRange.

    * an int ``n`` means exactly ``n`` elements;
    * a ``(low, high)`` tuple or a ``range(low, high)`` means at least
      ``low`` and fewer than ``high`` elements;
    * a SizeRange is returned unchanged.
    """
    if isinstance(value, SizeRange):
        return value
    if isinstance(value, range):
        if value.step != 1:
            raise InvalidArgument(
                "Cannot use %r as a size range: step must be 1" % (value,)
            )
        return SizeRange(value.start, value.stop)
    if isinstance(value, tuple):
        if len(value) != 2:
            raise InvalidArgument(
                "Expected a (low, high) pair for size but got %r" % (value,)
            )
        return SizeRange(*value)
    if isinstance(value, int) and not isinstance(value, bool):
        return SizeRange.exactly(value)
    raise InvalidArgument(
        "Cannot interpret size=%r (type=%s) as a size range"
        % (value, type(value).__name__)
    )


class ShrinkKind(enum.Enum):
    delete_element = "delete_element"
    shrink_element = "shrink_element"


@attr.s(frozen=True, slots=True)
class ShrinkStep:
    """Either where a VectorValueTree's shrinking will continue from, or the
    last transition it applied."""

    kind = attr.ib()
    index = attr.ib()


class VectorValueTree(ValueTree[List[Ex]]):
    """Shrinks a list in two phases.

    First every element is tried for deletion exactly once, in order of its
    original position, as long as the list stays above its minimum size.
    Then each remaining element is shrunk in turn until it can shrink no
    further, before moving on to the next one.

    Elements are never removed from ``elements``: deletion only hides an
    index, so that ``complicate()`` can put it back.
    """

    def __init__(self, elements: List[ValueTree[Ex]], min_size: int) -> None:
        self.elements = elements
        self.included: Set[int] = set(range(len(elements)))
        self.min_size = min_size
        self.shrink = ShrinkStep(ShrinkKind.delete_element, 0)
        self.prev_shrink: Optional[ShrinkStep] = None

    def current(self) -> List[Ex]:
        return [
            element.current()
            for ix, element in enumerate(self.elements)
            if ix in self.included
        ]

    def simplify(self) -> bool:
        if self.shrink.kind is ShrinkKind.delete_element:
            ix = self.shrink.index
            if ix >= len(self.elements) or len(self.included) <= self.min_size:
                self.shrink = ShrinkStep(ShrinkKind.shrink_element, 0)
            else:
                self.included.discard(ix)
                self.prev_shrink = self.shrink
                self.shrink = ShrinkStep(ShrinkKind.delete_element, ix + 1)
                return True

        while self.shrink.kind is ShrinkKind.shrink_element:
            ix = self.shrink.index
            if ix >= len(self.elements):
                return False
            if ix in self.included and self.elements[ix].simplify():
                self.prev_shrink = self.shrink
                return True
            self.shrink = ShrinkStep(ShrinkKind.shrink_element, ix + 1)

        raise InvalidState("Unexpected shrink state %r" % (self.shrink,))

    def complicate(self) -> bool:
        prev = self.prev_shrink
        if prev is None:
            return False
        if prev.kind is ShrinkKind.delete_element:
            self.included.add(prev.index)
            self.prev_shrink = None
            return True
        if prev.kind is ShrinkKind.shrink_element:
            if self.elements[prev.index].complicate():
                return True
            self.prev_shrink = None
            return False
        raise InvalidState("Unexpected shrink state %r" % (prev,))

    def __repr__(self):
        return "VectorValueTree(size=%d/%d, shrink=%r)" % (
            len(self.included),
            len(self.elements),
            self.shrink,
        )


class VectorStrategy(SearchStrategy[List[Ex]]):
    """A strategy for lists which takes a strategy for its elements and the
    range of lengths the list may have."""

    def __init__(self, element: SearchStrategy[Ex], size: SizeRange) -> None:
        super().__init__()
        self.element = element
        self.size = size

    def __repr__(self):
        return "lists(%r, size=%r)" % (self.element, self.size)

    def do_validate(self):
        self.element.validate()
        if self.size.is_empty:
            raise InvalidArgument(
                "Cannot generate collections with size=%r, which contains no "
                "lengths" % (self.size,)
            )

    def new_value(self, random: Random) -> VectorValueTree[Ex]:
        length = random.randrange(self.size.start, self.size.end)
        elements = [self.element.new_value(random) for _ in range(length)]
        return VectorValueTree(elements, self.size.start)


class TupleValueTree(ValueTree[Tuple[Any, ...]]):
    """Shrinks each element of a tuple in turn, leftmost first."""

    def __init__(self, elements: List[ValueTree]) -> None:
        self.elements = elements
        self.shrinker = 0
        self.prev_shrinker: Optional[int] = None

    def current(self):
        return tuple(element.current() for element in self.elements)

    def simplify(self):
        while self.shrinker < len(self.elements):
            if self.elements[self.shrinker].simplify():
                self.prev_shrinker = self.shrinker
                return True
            self.shrinker += 1
        return False

    def complicate(self):
        if self.prev_shrinker is None:
            return False
        if self.elements[self.prev_shrinker].complicate():
            return True
        self.prev_shrinker = None
        return False

    def __repr__(self):
        return "TupleValueTree(%r)" % (self.elements,)


class TupleStrategy(SearchStrategy[Tuple[Any, ...]]):
    """A strategy responsible for fixed length tuples based on heterogeneous
    strategies for each of their elements."""

    def __init__(self, strategies: Sequence[SearchStrategy]) -> None:
        super().__init__()
        self.element_strategies = tuple(strategies)

    def do_validate(self):
        for s in self.element_strategies:
            s.validate()

    def __repr__(self):
        return "tuples(%s)" % (", ".join(map(repr, self.element_strategies)),)

    def new_value(self, random):
        return TupleValueTree([s.new_value(random) for s in self.element_strategies])


class CollectionStrategy(MappedStrategy):
    """A collection built by folding a generated list into some other
    container.

    The fold runs on every read of the value; shrinking is entirely that of
    the underlying list.
    """

    def __init__(
        self,
        vector: VectorStrategy,
        fold: Callable[[list], Any],
        name: str,
        parts: Optional[Sequence[SearchStrategy]] = None,
    ) -> None:
        super().__init__(vector, pack=fold)
        self.name = name
        if parts is None:
            parts = (vector.element,)
        self.parts = tuple(parts)

    @property
    def size(self) -> SizeRange:
        return self.mapped_strategy.size

    def __repr__(self):
        return "%s(%s, size=%r)" % (
            self.name,
            ", ".join(map(repr, self.parts)),
            self.size,
        )


@attr.s(frozen=True, slots=True)
class MinSize:
    """Accepts any collection with at least ``size`` elements."""

    size = attr.ib()

    def __attrs_post_init__(self):
        check_valid_integer(self.size, "size")

    def __call__(self, collection) -> bool:
        return len(collection) >= self.size
