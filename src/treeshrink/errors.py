# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.


class TreeshrinkException(Exception):
    """Generic parent class for exceptions thrown by Treeshrink."""


class Rejected(TreeshrinkException):
    """A strategy could not produce a value satisfying its constraints within
    its retry budget.

    This is a recoverable condition: the caller may retry generation with
    fresh randomness or give up on the run. ``whence`` describes the
    constraint that could not be met.
    """

    def __init__(self, whence, attempts=None):
        self.whence = whence
        self.attempts = attempts
        if attempts is None:
            message = "Rejected: %s" % (whence,)
        else:
            message = "Rejected after %d attempts: %s" % (attempts, whence)
        super().__init__(message)


class InvalidArgument(TreeshrinkException, TypeError):
    """Used to indicate that the arguments to a Treeshrink function were in
    some manner incorrect."""


class InvalidState(TreeshrinkException):
    """The system is not in a state where you were allowed to do that.

    Raised when a value tree reaches a state its shrinking logic considers
    unreachable. This always indicates a bug and is never recovered from.
    """
