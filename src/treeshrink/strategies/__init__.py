# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from treeshrink.strategies._internal.collections import SizeRange, size_range
from treeshrink.strategies._internal.core import (
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
from treeshrink.strategies._internal.strategies import SearchStrategy, ValueTree

__all__ = [
    "SearchStrategy",
    "SizeRange",
    "ValueTree",
    "deques",
    "dictionaries",
    "frozensets",
    "heaps",
    "integers",
    "just",
    "lists",
    "sampled_from",
    "sets",
    "size_range",
    "sorted_dictionaries",
    "sorted_sets",
    "tuples",
]
