from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Callable


A = TypeVar('A')
W = TypeVar('W')


class Foldable(ABC, Generic[A]):
    """A container that knows how to run a strict left fold over its own elements.

    Folds accept any iterable; implement this for containers whose elements are better visited by
    the container itself (trees, paged results, ...). Implementations must visit every element
    exactly once and in a deterministic order.
    """

    @abstractmethod
    def fold_left(self, initial: W, step: Callable[[W, A], W]) -> W:
        pass
