# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from random import Random

from treeshrink.internal.reflection import get_pretty_function_description

DEFAULT_MAX_DRAWS = 1000
DEFAULT_MAX_SHRINKS = 10000


class NoSuchExample(Exception):
    pass


def find_tree(definition, condition=lambda _: True, random=None, max_draws=None):
    """Returns the first value tree from ``definition`` whose current value
    satisfies ``condition``."""
    definition.validate()
    if random is None:
        random = Random(0)
    for _ in range(max_draws or DEFAULT_MAX_DRAWS):
        tree = definition.new_value(random)
        if condition(tree.current()):
            return tree
    raise NoSuchExample(
        "Could not find any examples from %r that satisfied %s"
        % (definition, get_pretty_function_description(condition))
    )


def shrink(tree, condition, max_shrinks=None):
    """Runs the usual shrinking loop over a tree whose current value
    satisfies ``condition``: keep simplifying while the value still
    satisfies it, and step back whenever it stops doing so.

    Returns the last value seen which satisfied ``condition``.
    """
    result = tree.current()
    assert condition(result)
    for _ in range(max_shrinks or DEFAULT_MAX_SHRINKS):
        if not tree.simplify():
            break
        value = tree.current()
        if condition(value):
            result = value
        elif not tree.complicate():
            break
    return result


def minimal(definition, condition=lambda _: True, random=None, max_shrinks=None):
    return shrink(
        find_tree(definition, condition, random=random), condition, max_shrinks
    )


def find_any(definition, condition=lambda _: True, random=None):
    return find_tree(definition, condition, random=random).current()


def draws(definition, n, random=None):
    if random is None:
        random = Random(0)
    return [definition.new_value(random).current() for _ in range(n)]
