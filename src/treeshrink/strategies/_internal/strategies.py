# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from random import Random
from typing import Any, Callable, Generic, Optional, TypeVar

from treeshrink._settings import settings
from treeshrink.errors import InvalidState, Rejected
from treeshrink.internal.entropy import copy_random, fork_random
from treeshrink.internal.reflection import get_pretty_function_description
from treeshrink.reporting import debug_report, verbose_report

Ex = TypeVar("Ex", covariant=True)
T = TypeVar("T")

MappedFrom = TypeVar("MappedFrom")
MappedTo = TypeVar("MappedTo")


class ValueTree(Generic[Ex]):
    """A single generated candidate together with everything needed to
    minimize it.

    A value tree is created by :meth:`SearchStrategy.new_value` and then
    mutated in place for the lifetime of one shrink search:

    * ``current()`` returns the current candidate. Calling it repeatedly
      without an intervening ``simplify()`` or ``complicate()`` returns
      equal values.
    * ``simplify()`` attempts one reduction step, returning True if the
      candidate changed. Once it has returned False it keeps returning False
      until ``complicate()`` is called.
    * ``complicate()`` undoes the most recent successful ``simplify()``,
      returning False if there is nothing to undo.
    """

    def current(self) -> Ex:
        raise NotImplementedError("%s.current" % (type(self).__name__,))

    def simplify(self) -> bool:
        raise NotImplementedError("%s.simplify" % (type(self).__name__,))

    def complicate(self) -> bool:
        raise NotImplementedError("%s.complicate" % (type(self).__name__,))


class SearchStrategy(Generic[Ex]):
    """A SearchStrategy is an object that knows how to produce value trees
    for data of a given type.

    Strategies are immutable descriptions of a domain. The same strategy can
    be used to produce any number of independent value trees, so any
    functions it holds on to are shared between all of them and must not
    have side effects.
    """

    validate_called = False

    def new_value(self, random: Random) -> ValueTree[Ex]:
        """Draw from ``random`` to produce a fresh value tree.

        Raises :class:`~treeshrink.errors.Rejected` if this strategy could
        not produce a value within its retry budget.
        """
        raise NotImplementedError("%s.new_value" % (type(self).__name__,))

    def example(self, random: Optional[Random] = None) -> Ex:
        """Provide an example of the sort of value that this strategy
        generates.

        This method is for interactive exploration of the API, not for any
        sort of real testing.
        """
        if random is None:
            random = Random()
        return self.new_value(random).current()

    def map(self, pack: Callable[[Ex], T]) -> "SearchStrategy[T]":
        """Returns a new strategy that generates values by generating a value
        from this strategy and then calling pack() on the result, giving that.

        pack is called again on every read of the value, and is shared by
        every value tree the new strategy produces.
        """
        return MappedStrategy(self, pack=pack)

    def map_into(self, target: Callable[[Ex], T]) -> "SearchStrategy[T]":
        """Returns a new strategy that converts values from this strategy by
        passing them to ``target``, usually a type such as ``tuple`` or
        ``frozenset``."""
        return MapIntoStrategy(self, target=target)

    def perturb(self, fun: Callable[[Ex, Random], T]) -> "SearchStrategy[T]":
        """Returns a new strategy that calls ``fun`` with a value from this
        strategy and a ``random.Random`` instance private to that value.

        Each value tree gets its own generator, forked from the one passed to
        ``new_value``. ``fun`` receives a fresh copy of it on every read, so
        reading the same tree twice gives the same answer while different
        trees almost always give different ones. Shrinking only shrinks the
        underlying value; the generator never changes.
        """
        return PerturbedStrategy(self, fun=fun)

    def filter(
        self, condition: Callable[[Ex], Any], whence: Optional[str] = None
    ) -> "SearchStrategy[Ex]":
        """Returns a new strategy that generates values from this strategy
        which satisfy the provided condition.

        Generation retries with fresh candidates up to
        ``settings.max_local_rejects`` times, then raises
        :class:`~treeshrink.errors.Rejected`. Shrink steps which would break
        the condition are skipped.
        """
        return FilteredStrategy(self, condition=condition, whence=whence)

    def validate(self) -> None:
        """Throw an exception if the strategy is not valid."""
        if self.validate_called:
            return
        try:
            self.validate_called = True
            self.do_validate()
        except Exception:
            self.validate_called = False
            raise

    def do_validate(self) -> None:
        pass


class MappedValueTree(ValueTree[MappedTo]):
    def __init__(self, source: ValueTree, pack: Callable[[Any], MappedTo]) -> None:
        self.source = source
        self.pack = pack

    def current(self) -> MappedTo:
        return self.pack(self.source.current())

    def simplify(self) -> bool:
        return self.source.simplify()

    def complicate(self) -> bool:
        return self.source.complicate()

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.source)


class MappedStrategy(SearchStrategy[MappedTo]):
    """A strategy which is defined purely by conversion from another
    strategy.

    Its distribution and its shrinking come from that other strategy.
    """

    def __init__(self, strategy: SearchStrategy[MappedFrom], pack: Callable) -> None:
        super().__init__()
        self.mapped_strategy = strategy
        self.pack = pack

    def __repr__(self):
        if not hasattr(self, "_cached_repr"):
            self._cached_repr = "%r.map(%s)" % (
                self.mapped_strategy,
                get_pretty_function_description(self.pack),
            )
        return self._cached_repr

    def do_validate(self):
        self.mapped_strategy.validate()

    def new_value(self, random):
        return MappedValueTree(self.mapped_strategy.new_value(random), self.pack)


class MapIntoStrategy(MappedStrategy[MappedTo]):
    def __init__(self, strategy, target):
        super().__init__(strategy, pack=target)

    def __repr__(self):
        return "%r.map_into(%s)" % (
            self.mapped_strategy,
            getattr(self.pack, "__name__", repr(self.pack)),
        )


class PerturbedValueTree(ValueTree[MappedTo]):
    def __init__(self, source, fun, random):
        self.source = source
        self.fun = fun
        self.random = random

    def current(self):
        return self.fun(self.source.current(), copy_random(self.random))

    def simplify(self):
        return self.source.simplify()

    def complicate(self):
        return self.source.complicate()

    def __repr__(self):
        return "PerturbedValueTree(%r)" % (self.source,)


class PerturbedStrategy(SearchStrategy[MappedTo]):
    def __init__(self, strategy, fun):
        super().__init__()
        self.perturbed_strategy = strategy
        self.fun = fun

    def __repr__(self):
        return "%r.perturb(%s)" % (
            self.perturbed_strategy,
            get_pretty_function_description(self.fun),
        )

    def do_validate(self):
        self.perturbed_strategy.validate()

    def new_value(self, random):
        rnd = fork_random(random)
        return PerturbedValueTree(
            self.perturbed_strategy.new_value(random), self.fun, rnd
        )


class FilteredValueTree(ValueTree[Ex]):
    def __init__(self, source, condition, whence):
        self.source = source
        self.condition = condition
        self.whence = whence

    def current(self):
        return self.source.current()

    def simplify(self):
        while self.source.simplify():
            if self.condition(self.source.current()):
                return True
            # Undo the step through the source's own complicate(), so that
            # whatever bookkeeping it does stays consistent, then carry on
            # with its next step.
            self.__ensure_acceptable()
        return False

    def complicate(self):
        if self.source.complicate():
            self.__ensure_acceptable()
            return True
        return False

    def __ensure_acceptable(self):
        while not self.condition(self.source.current()):
            if not self.source.complicate():
                raise InvalidState(
                    "Unable to complicate filtered value %r back into one "
                    "satisfying %s" % (self.source.current(), self.whence)
                )

    def __repr__(self):
        return "FilteredValueTree(%r)" % (self.source,)


class FilteredStrategy(SearchStrategy[Ex]):
    def __init__(self, strategy, condition, whence=None):
        super().__init__()
        self.filtered_strategy = strategy
        self.condition = condition
        self.__whence = whence

    @property
    def whence(self):
        if self.__whence is None:
            return repr(self)
        return self.__whence

    def __repr__(self):
        if not hasattr(self, "_cached_repr"):
            self._cached_repr = "%r.filter(%s)" % (
                self.filtered_strategy,
                get_pretty_function_description(self.condition),
            )
        return self._cached_repr

    def do_validate(self):
        self.filtered_strategy.validate()

    def new_value(self, random):
        max_rejects = settings.default.max_local_rejects
        for i in range(max_rejects):
            tree = self.filtered_strategy.new_value(random)
            if self.condition(tree.current()):
                return FilteredValueTree(tree, self.condition, self.whence)
            if i == 0:
                debug_report(lambda: "Retried draw from %r to satisfy filter" % (self,))
        verbose_report(
            lambda: "Aborted draw from %r because unable to satisfy %s in %d attempts"
            % (self, self.whence, max_rejects)
        )
        raise Rejected(self.whence, max_rejects)
