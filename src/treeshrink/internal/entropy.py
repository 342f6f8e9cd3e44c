# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Helpers for working with the caller-supplied source of randomness.

The engine never seeds or owns a global generator: every strategy draws
from the ``random.Random`` instance it is handed, and the only place where
a new generator comes into existence is when a sub-stream is forked.
"""

import random


def fork_random(rnd: random.Random) -> random.Random:
    """Return a new generator whose stream is independent of, but fully
    determined by, the current state of ``rnd``.

    Advances ``rnd``.
    """
    return random.Random(rnd.getrandbits(128))


def copy_random(rnd: random.Random) -> random.Random:
    """Return a generator in exactly the same state as ``rnd``, so that
    drawing from the copy leaves ``rnd`` untouched."""
    result = random.Random()
    result.setstate(rnd.getstate())
    return result
