# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Treeshrink generates random values from declarative descriptions of their
domain, and shrinks values which make a test fail into simpler ones that
still fail.

Values are produced as value trees, which remember enough about how they
were made to step towards something simpler and to step back again.
"""

from treeshrink._settings import Verbosity, local_settings, settings
from treeshrink.errors import InvalidArgument, InvalidState, Rejected
from treeshrink.version import __version__, __version_info__

__all__ = [
    "InvalidArgument",
    "InvalidState",
    "Rejected",
    "Verbosity",
    "local_settings",
    "settings",
    "__version__",
    "__version_info__",
]
