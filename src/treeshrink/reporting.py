# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Verbosity-gated messages about what strategies are doing.

Messages go to the current reporter, which prints by default and can be
swapped with ``with_reporter``. A message may be given as a zero-argument
function, which is then only called if the message will be shown.
"""

import inspect

from treeshrink._settings import Verbosity, settings
from treeshrink.utils.dynamicvariables import DynamicVariable


def default(value):
    try:
        print(value)
    except UnicodeEncodeError:
        print(value.encode("unicode_escape").decode("ascii"))


reporter = DynamicVariable(default)


def current_reporter():
    return reporter.value


def with_reporter(new_reporter):
    return reporter.with_value(new_reporter)


def current_verbosity():
    return settings.default.verbosity


def to_text(textish):
    if inspect.isfunction(textish):
        textish = textish()
    return textish


def verbose_report(text):
    if current_verbosity() >= Verbosity.verbose:
        current_reporter()(to_text(text))


def debug_report(text):
    if current_verbosity() >= Verbosity.debug:
        current_reporter()(to_text(text))
