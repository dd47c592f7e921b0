from functools import reduce
from typing import TypeVar, Callable, Iterable, Iterator, Union

from toolz.functoolz import curry
from toolz.itertoolz import accumulate, drop

from folding.foldable import Foldable


A = TypeVar('A')
W = TypeVar('W')


@curry
def foldl(step: Callable[[W, A], W],
          initial: W,
          xs: Union[Iterable[A], Foldable[A]]) -> W:
    """Strict left fold, visiting every element of `xs` once and in order.

    Containers implementing :class:`Foldable` drive the traversal themselves; any other iterable is
    walked from left to right.
    """
    return (
        xs.fold_left(initial, step) if isinstance(xs, Foldable) else
        reduce(step, xs, initial)
    )


@curry
def scanl(step: Callable[[W, A], W],
          initial: W,
          xs: Iterable[A]) -> Iterator[W]:
    """Lazily yield the accumulator after each element of `xs`. The initial accumulator is not yielded."""
    return drop(1, accumulate(step, xs, initial))
