# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from treeshrink.strategies._internal.numbers import IntegersStrategy
from treeshrink.strategies._internal.strategies import (
    MappedStrategy,
    SearchStrategy,
    ValueTree,
)


class JustValueTree(ValueTree):
    def __init__(self, value):
        self.value = value

    def current(self):
        return self.value

    def simplify(self):
        return False

    def complicate(self):
        return False

    def __repr__(self):
        return "JustValueTree(%r)" % (self.value,)


class JustStrategy(SearchStrategy):
    """A strategy which always returns a single fixed value.

    Drawing from it never touches the random source.
    """

    def __init__(self, value):
        super().__init__()
        self.value = value

    def __repr__(self):
        return "just(%r)" % (self.value,)

    def new_value(self, random):
        return JustValueTree(self.value)


class SampledFromStrategy(MappedStrategy):
    """A strategy which returns an element of a fixed, non-empty sequence.

    Values shrink towards the start of the sequence.
    """

    def __init__(self, elements):
        self.elements = tuple(elements)
        assert self.elements
        super().__init__(
            IntegersStrategy(0, len(self.elements) - 1), pack=self.elements.__getitem__
        )

    def __repr__(self):
        return "sampled_from(%r)" % (list(self.elements),)
