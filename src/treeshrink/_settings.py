# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Settings controlling how hard Treeshrink tries and how much it says
while doing so.

``settings.default`` is what strategies consult. It comes from the loaded
profile, and can be replaced for a block of code with ``local_settings``.
"""

import contextlib
import os
from enum import IntEnum, unique
from typing import Any, Dict

import attr

from treeshrink.errors import InvalidArgument, InvalidState
from treeshrink.internal.validation import check_type
from treeshrink.utils.dynamicvariables import DynamicVariable

__all__ = ["settings"]


@attr.s(frozen=True, slots=True)
class Setting:
    name = attr.ib()
    default = attr.ib()
    validator = attr.ib()


all_settings: Dict[str, Setting] = {}

default_variable = DynamicVariable(None)


class settingsMeta(type):
    @property
    def default(cls) -> "settings":
        # Each thread starts without a default and picks up the profile.
        if default_variable.value is None and cls._current_profile in cls._profiles:
            cls.load_profile(cls._current_profile)
        return default_variable.value

    def __setattr__(cls, name, value):
        if not name.startswith("_"):
            raise AttributeError(
                "Cannot assign treeshrink.settings.%s=%r - the settings class "
                "is immutable. Change the default with settings.load_profile, "
                "or use local_settings(...) for a temporary change."
                % (name, value)
            )
        type.__setattr__(cls, name, value)


class settings(metaclass=settingsMeta):
    """An immutable collection of settings.

    * ``verbosity``: a :class:`Verbosity` controlling how much is reported.
    * ``max_local_rejects``: how many fresh candidates a filtered strategy
      (including the minimum-size filter of sets and dictionaries) draws in
      one call to ``new_value`` before raising
      :class:`~treeshrink.errors.Rejected`.

    Any setting not passed explicitly is taken from ``parent``, or from
    ``settings.default`` if there is no parent.
    """

    __module__ = "treeshrink"
    _profiles: Dict[str, "settings"] = {}
    _current_profile = "default"
    _definitions_locked = False

    def __init__(self, parent: "settings" = None, **kwargs: Any) -> None:
        if parent is not None and not isinstance(parent, settings):
            raise InvalidArgument(
                "Invalid argument: parent=%r is not a settings instance" % (parent,)
            )
        for name in kwargs:
            if name not in all_settings:
                raise InvalidArgument(
                    "Invalid argument: %r is not a valid setting" % (name,)
                )
        if parent is None:
            parent = settings.default
        values = {}
        for name, setting in all_settings.items():
            if name in kwargs:
                values[name] = setting.validator(kwargs[name])
            elif parent is not None:
                values[name] = getattr(parent, name)
            else:
                values[name] = setting.default
        object.__setattr__(self, "_values", values)

    def __getattr__(self, name):
        if not name.startswith("_"):
            try:
                return self._values[name]
            except KeyError:
                pass
        raise AttributeError("settings has no attribute %s" % (name,))

    def __setattr__(self, name, value):
        raise AttributeError(
            "settings objects are immutable and may not be assigned to after "
            "construction."
        )

    def __repr__(self):
        bits = sorted("%s=%r" % item for item in self._values.items())
        return "settings(%s)" % ", ".join(bits)

    @classmethod
    def _define_setting(cls, name, default, validator):
        if cls._definitions_locked:
            raise InvalidState("settings have been locked and may no longer be defined.")
        all_settings[name] = Setting(name=name, default=default, validator=validator)

    @classmethod
    def lock_further_definitions(cls):
        cls._definitions_locked = True

    @staticmethod
    def register_profile(name: str, parent: "settings" = None, **kwargs: Any) -> None:
        """Registers settings under ``name``, so that they can later be made
        the default with :meth:`load_profile`.

        The arguments are exactly as for :class:`~treeshrink.settings`.
        """
        check_type(str, name, "name")
        settings._profiles[name] = settings(parent=parent, **kwargs)

    @staticmethod
    def get_profile(name: str) -> "settings":
        """Return the profile with the given name."""
        check_type(str, name, "name")
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument("Profile %r is not registered" % (name,)) from None

    @staticmethod
    def load_profile(name: str) -> None:
        """Makes the named profile the default.

        Raises InvalidArgument if no such profile has been registered.
        """
        profile = settings.get_profile(name)
        settings._current_profile = name
        default_variable.value = profile


@contextlib.contextmanager
def local_settings(s):
    with default_variable.with_value(s):
        yield s


@unique
class Verbosity(IntEnum):
    quiet = 0
    normal = 1
    verbose = 2
    debug = 3

    def __repr__(self):
        return "Verbosity.%s" % (self.name,)

    @classmethod
    def by_name(cls, key):
        try:
            return cls[key]
        except KeyError:
            raise InvalidArgument("No such verbosity level %r" % (key,)) from None


def _validate_verbosity(value):
    if isinstance(value, bool) or value not in tuple(Verbosity):
        raise InvalidArgument(
            "Invalid verbosity, %r. Valid options: %r" % (value, tuple(Verbosity))
        )
    return Verbosity(value)


def _validate_max_local_rejects(x):
    check_type(int, x, name="max_local_rejects")
    if isinstance(x, bool) or x < 1:
        raise InvalidArgument(
            "max_local_rejects=%r should be at least one, or no filtered "
            "strategy could ever produce a value." % (x,)
        )
    return x


ENVIRONMENT_VERBOSITY_OVERRIDE = os.getenv("TREESHRINK_VERBOSITY_LEVEL")

if ENVIRONMENT_VERBOSITY_OVERRIDE:  # pragma: no cover
    DEFAULT_VERBOSITY = Verbosity.by_name(ENVIRONMENT_VERBOSITY_OVERRIDE)
else:
    DEFAULT_VERBOSITY = Verbosity.normal

settings._define_setting(
    "verbosity", default=DEFAULT_VERBOSITY, validator=_validate_verbosity
)
settings._define_setting(
    "max_local_rejects", default=65536, validator=_validate_max_local_rejects
)
settings.lock_further_definitions()

settings.register_profile("default")
settings.load_profile("default")
assert settings.default is not None
