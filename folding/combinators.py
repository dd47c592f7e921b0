"""Ready-made folds.

Every fold here can be combined with any other through :meth:`Fold.ap`, :meth:`Fold.zip` or
:func:`folding.fold.lift`, e.g. ``lift(lambda s, n: s / n, sum(), length())`` for a one-pass mean.
Folds reporting a single element (`head`, `last`, `minimum`, `maximum`, `find`) yield ``None``
when there is nothing to report.

`sum` and `any` keep their conventional fold names and shadow the builtins inside this module, so
they are left out of `__all__`; reach them through the module, e.g. ``combinators.sum()``.
"""
from functools import partial
from typing import TypeVar, Callable, Iterable, List, Optional, Any

from folding.capabilities import Monoid, Numeric, Ordering, Eq, NUMBERS, NATURAL, EQUALITY
from folding.fold import Fold
from folding.general.functional.function import const, flip


A = TypeVar('A')
B = TypeVar('B')

__all__ = [
    'fold1', 'head', 'last', 'maximum', 'minimum', 'product', 'generic_length', 'length',
    'elem', 'find', 'mconcat', 'fold_map', 'scan'
]

_EMPTY = object()


def _optional(acc: Any) -> Optional[Any]:
    return None if acc is _EMPTY else acc


def fold1(combine: Callable[[A, A], A]) -> Fold[A, Optional[A]]:
    """Reduce with `combine`, seeding the reduction with the first element.

    Yields ``None`` for an empty input. A ``None`` element is kept like any other value, so its
    result cannot be told apart from an empty input.
    """
    def _step(acc: Any, a: A) -> A:
        return (
            a if acc is _EMPTY else
            combine(acc, a)
        )

    return Fold.create(_step, _EMPTY, _optional)


def head() -> Fold[A, Optional[A]]:
    return fold1(const)


def last() -> Fold[A, Optional[A]]:
    return fold1(flip(const))


def maximum(ordering: Ordering = NATURAL) -> Fold[A, Optional[A]]:
    return fold1(ordering.max)


def minimum(ordering: Ordering = NATURAL) -> Fold[A, Optional[A]]:
    return fold1(ordering.min)


def sum(numeric: Numeric = NUMBERS) -> Fold[A, A]:
    return Fold.left(numeric.zero, numeric.plus)


def product(numeric: Numeric = NUMBERS) -> Fold[A, A]:
    return Fold.left(numeric.one, numeric.times)


def generic_length(numeric: Numeric) -> Fold[Any, B]:
    """Count the elements, expressing the count in `numeric`."""
    return Fold.left(numeric.zero, lambda n, _: numeric.plus(n, numeric.one))


def length() -> Fold[Any, int]:
    return generic_length(NUMBERS)


def any(predicate: Callable[[A], bool]) -> Fold[A, bool]:
    return Fold.left(False, lambda found, a: found or bool(predicate(a)))


def elem(value: A, eq: Eq = EQUALITY) -> Fold[A, bool]:
    return any(partial(eq.equals, value))


def find(predicate: Callable[[A], bool]) -> Fold[A, Optional[A]]:
    """The first element satisfying `predicate`.

    The traversal does not stop at a match: later elements are still visited, but `predicate` is
    not applied to them.
    """
    def _step(found: Any, a: A) -> Any:
        return (
            found if found is not _EMPTY else
            a     if predicate(a)        else
            _EMPTY
        )

    return Fold.create(_step, _EMPTY, _optional)


def mconcat(monoid: Monoid) -> Fold[A, A]:
    return Fold.left(monoid.empty, monoid.combine)


def fold_map(f: Callable[[A], B], monoid: Monoid) -> Fold[A, B]:
    """Map every element into `monoid` and combine the results in input order."""
    return mconcat(monoid).premap(f)


def scan(fold: Fold[A, B], xs: Iterable[A]) -> List[B]:
    """The result of `fold` over every non-empty prefix of `xs`; one result per element."""
    return fold.scan(xs)
