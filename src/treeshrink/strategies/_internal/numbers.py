# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from treeshrink.strategies._internal.strategies import SearchStrategy, ValueTree


class IntegerValueTree(ValueTree[int]):
    """Shrinks an integer towards ``target`` by bisecting on its distance
    from it.

    ``low`` is the smallest distance not yet ruled out. A ``complicate()``
    puts back the exact value from before the last ``simplify()`` and rules
    out every distance up to the candidate it rejected.
    """

    def __init__(self, value: int, target: int) -> None:
        self.target = target
        self.sign = -1 if value < target else 1
        self.low = 0
        self.distance = abs(value - target)
        self.previous = None

    def current(self) -> int:
        return self.target + self.sign * self.distance

    def simplify(self) -> bool:
        if self.low >= self.distance:
            return False
        self.previous = self.distance
        self.distance = self.low + (self.distance - self.low) // 2
        return True

    def complicate(self) -> bool:
        if self.previous is None:
            return False
        self.low = self.distance + 1
        self.distance = self.previous
        self.previous = None
        return True

    def __repr__(self):
        return "IntegerValueTree(%d)" % (self.current(),)


class IntegersStrategy(SearchStrategy[int]):
    def __init__(self, start: int, end: int) -> None:
        super().__init__()
        assert start <= end
        self.start = start
        self.end = end

    def __repr__(self):
        return "integers(%d, %d)" % (self.start, self.end)

    @property
    def shrink_target(self) -> int:
        if self.start > 0:
            return self.start
        if self.end < 0:
            return self.end
        return 0

    def new_value(self, random):
        return IntegerValueTree(
            random.randint(self.start, self.end), self.shrink_target
        )
