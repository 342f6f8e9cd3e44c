# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import contextlib
import sys
from io import StringIO

from treeshrink.reporting import default, with_reporter


@contextlib.contextmanager
def capture_out():
    old_out = sys.stdout
    try:
        new_out = StringIO()
        sys.stdout = new_out
        with with_reporter(default):
            yield new_out
    finally:
        sys.stdout = old_out


class CountingTree:
    """Wraps a value tree and counts how often each of its methods is
    called."""

    def __init__(self, tree):
        self.tree = tree
        self.simplifies = 0
        self.complicates = 0

    def current(self):
        return self.tree.current()

    def simplify(self):
        self.simplifies += 1
        return self.tree.simplify()

    def complicate(self):
        self.complicates += 1
        return self.tree.complicate()
