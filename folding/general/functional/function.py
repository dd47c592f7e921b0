from typing import TypeVar, Callable


A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


def const(a: A, _: B) -> A:
    return a


def flip(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    def _flipped(b: B, a: A) -> C:
        return f(a, b)
    return _flipped
