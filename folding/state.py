from typing import TypeVar, Generic, Callable, Iterable, Iterator, Tuple, Union

from toolz.functoolz import compose

from folding.foldable import Foldable
from folding.general.functional import sequence
from folding.general.functional.pair import both, fst, pair, snd


A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
W = TypeVar('W')
Z = TypeVar('Z')


class FoldState(Generic[A, B, W]):
    """The concrete representation of a strict left fold.

    A fold starts from `begin`, threads every input through `step`, and extracts its result with
    `done`. All three are expected to be pure; anything they raise propagates to the caller
    driving the traversal.
    """

    def __init__(self,
                 step : Callable[[W, A], W],
                 begin: W,
                 done : Callable[[W], B]) -> None:
        self.__step  = step
        self.__begin = begin
        self.__done  = done

    def __str__(self):
        return f'FoldState(begin={self.begin!r})'

    def __repr__(self):
        return self.__str__()

    @property
    def step(self) -> Callable[[W, A], W]:
        return self.__step

    @property
    def begin(self) -> W:
        return self.__begin

    @property
    def done(self) -> Callable[[W], B]:
        return self.__done

    def map(self, f: Callable[[B], C]) -> 'FoldState[A, C, W]':
        return FoldState(self.step, self.begin, compose(f, self.done))

    def premap(self, f: Callable[[C], A]) -> 'FoldState[C, B, W]':
        step = self.step

        def _step(w: W, c: C) -> W:
            return step(w, f(c))

        return FoldState(_step, self.begin, self.done)

    def ap(self, other: 'FoldState[A, Callable[[B], C], Z]') -> 'FoldState[A, C, Tuple[Z, W]]':
        """Fuse this fold with one producing a function of this fold's result.

        The combined accumulator is the pair `(other's accumulator, this accumulator)`. Both halves
        advance on every element, so one traversal feeds both folds.

        Args:
            other: A fold over the same inputs whose result is applied to this fold's result.

        Returns:
            A fold yielding `other`'s function applied to this fold's value.
        """
        def _done(acc: Tuple[Z, W]) -> C:
            return other.done(fst(acc))(self.done(snd(acc)))

        return FoldState(
            both(other.step, self.step),
            pair(other.begin, self.begin),
            _done
        )

    def run_fold(self, xs: Union[Iterable[A], Foldable[A]]) -> B:
        return self.done(sequence.foldl(self.step, self.begin, xs))

    def run_scan(self, xs: Iterable[A]) -> Iterator[B]:
        return map(self.done, sequence.scanl(self.step, self.begin, xs))
