from functools import partial, reduce
from typing import TypeVar, Generic, Callable, Iterable, List, Tuple, Any, Union

from toolz.functoolz import identity

from folding.foldable import Foldable
from folding.general.functional.pair import pair
from folding.state import FoldState


A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
W = TypeVar('W')


class Fold(Generic[A, B]):
    """A reusable way to consume a sequence of A and produce a B.

    The accumulator of the wrapped :class:`FoldState` never shows up in this type, which is what
    lets folds with unrelated accumulators be combined with :meth:`ap`, :meth:`zip` and
    :func:`lift` into one fold that runs over its input a single time.

    Folds are immutable. Every transformation returns a new fold, and the same fold may be run any
    number of times over different inputs.
    """

    def __init__(self, state: FoldState[A, B, Any]) -> None:
        self.__state = state

    def __str__(self):
        return f'Fold({self.__state})'

    def __repr__(self):
        return self.__str__()

    @staticmethod
    def create(step : Callable[[W, A], W],
               begin: W,
               done : Callable[[W], B] = identity) -> 'Fold[A, B]':
        """Build a fold from an explicit step function, initial accumulator and extraction."""
        return Fold(FoldState(step, begin, done))

    @staticmethod
    def left(begin: B, step: Callable[[B, A], B]) -> 'Fold[A, B]':
        """Build a fold whose accumulator is also its result."""
        return Fold.create(step, begin)

    @staticmethod
    def pure(b: B) -> 'Fold[Any, B]':
        """A fold that ignores its input and always yields `b`."""
        return Fold.create(lambda acc, _: acc, None, lambda _: b)

    def map(self, f: Callable[[B], C]) -> 'Fold[A, C]':
        return Fold(self.__state.map(f))

    def premap(self, f: Callable[[C], A]) -> 'Fold[C, B]':
        """Adapt this fold to consume C by transforming every element with `f` before it is stepped.

        `fold.premap(f).fold(xs)` equals `fold.fold(map(f, xs))`.
        """
        return Fold(self.__state.premap(f))

    def ap(self, other: 'Fold[A, Callable[[B], C]]') -> 'Fold[A, C]':
        return Fold(self.__state.ap(other.__state))

    def zip(self, other: 'Fold[A, C]') -> 'Fold[A, Tuple[B, C]]':
        return lift(pair, self, other)

    def fold(self, xs: Union[Iterable[A], Foldable[A]]) -> B:
        return self.__state.run_fold(xs)

    def __call__(self, xs: Union[Iterable[A], Foldable[A]]) -> B:
        return self.fold(xs)

    def scan(self, xs: Iterable[A]) -> List[B]:
        """The result of this fold over every non-empty prefix of `xs`, in order."""
        return list(self.__state.run_scan(xs))


def _collect(f: Callable[..., B], arity: int, *args) -> Any:
    return (
        f(*args) if len(args) == arity else
        partial(_collect, f, arity, *args)
    )


def lift(f: Callable[..., B], *folds: Fold[A, Any]) -> Fold[A, B]:
    """Apply `f` to the results of several folds that all run in the same traversal.

    For example `lift(lambda total, n: total / n, sum(), length())` computes a mean in one pass.

    Args:
        f: A function taking one positional argument per fold, in order.
        folds: Folds over the same inputs.

    Returns:
        A single fold; its accumulator nests the accumulators of `folds`. Without folds, `f` is called
        each time the fold is driven.
    """
    if not folds:
        return Fold.pure(None).map(lambda _: f())
    return reduce(
        lambda functions, fold: fold.ap(functions),
        folds,
        Fold.pure(_collect(f, len(folds)))
    )
