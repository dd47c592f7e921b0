from typing import Tuple, TypeVar, Callable


A = TypeVar('A')
B = TypeVar('B')
X = TypeVar('X')


def pair(a: A, b: B) -> Tuple[A, B]:
    return a, b


def fst(t: Tuple[A, B]) -> A:
    return t[0]


def snd(t: Tuple[A, B]) -> B:
    return t[1]


def both(left : Callable[[A, X], A],
         right: Callable[[B, X], B]) -> Callable[[Tuple[A, B], X], Tuple[A, B]]:
    """Advance both halves of a pair with the same input.

    Args:
        left: Step function for the first element of the pair.
        right: Step function for the second element of the pair.

    Returns:
        A step function over pairs that feeds each input to `left` and `right` independently.
    """
    def _both(acc: Tuple[A, B], x: X) -> Tuple[A, B]:
        return pair(left(fst(acc), x), right(snd(acc), x))
    return _both
