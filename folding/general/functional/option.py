from typing import TypeVar, Optional, Callable


A = TypeVar('A')
B = TypeVar('B')


def cata(exists: Callable[[A], B], absent: Callable[[], B]) -> Callable[[Optional[A]], B]:
    """Construct a catamorphism over Optional.

    Args:
        exists: Invoked with the value when an Optional is populated.
        absent: Produces a B when an Optional is not populated.

    Returns:
        A function from Optional[A] to B.
    """
    def _cata(m: Optional[A]) -> B:
        return (
            exists(m) if m is not None else
            absent()
        )
    return _cata


def or_else(default: B) -> Callable[[Optional[B]], B]:
    return cata(lambda b: b, lambda: default)
