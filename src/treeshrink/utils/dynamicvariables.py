# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import threading
from contextlib import contextmanager


class DynamicVariable:
    """A value with a process-wide default which each thread may override,
    either for the duration of a ``with`` block or until it is set again."""

    def __init__(self, default):
        self.default = default
        self._local = threading.local()

    @property
    def value(self):
        return getattr(self._local, "value", self.default)

    @value.setter
    def value(self, value):
        self._local.value = value

    @contextmanager
    def with_value(self, value):
        previous = self.value
        self.value = value
        try:
            yield value
        finally:
            self.value = previous
