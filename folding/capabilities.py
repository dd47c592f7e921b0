"""Explicit capability objects consumed by the combinators.

Combinators never look these up implicitly: each one takes the capability it needs as a parameter,
defaulting to one of the stock instances below.
"""
import operator
from decimal import Decimal
from typing import TypeVar, Callable, NamedTuple, Any


A = TypeVar('A')
K = TypeVar('K')


class Monoid(NamedTuple):
    """An identity value and an associative operation that combines two values."""
    empty  : Any
    combine: Callable[[Any, Any], Any]


class Numeric(NamedTuple):
    zero : Any
    one  : Any
    plus : Callable[[Any, Any], Any]
    times: Callable[[Any, Any], Any]


class Eq(NamedTuple):
    equals: Callable[[Any, Any], bool]


class Ordering(NamedTuple):
    """A total order given by a strict less-than test.

    On ties :meth:`max` keeps its second argument and :meth:`min` its first.
    """
    less_than: Callable[[Any, Any], bool]

    def max(self, a: A, b: A) -> A:
        return a if self.less_than(b, a) else b

    def min(self, a: A, b: A) -> A:
        return b if self.less_than(b, a) else a

    def reverse(self) -> 'Ordering':
        less_than = self.less_than
        return Ordering(lambda a, b: less_than(b, a))

    @staticmethod
    def by(key: Callable[[A], K]) -> 'Ordering':
        return Ordering(lambda a, b: key(a) < key(b))


ADDITION       = Monoid(0    , operator.add                )
MULTIPLICATION = Monoid(1    , operator.mul                )
CONCATENATION  = Monoid(''   , operator.add                )
TUPLES         = Monoid(()   , operator.add                )
CONJUNCTION    = Monoid(True , lambda a, b: bool(a and b))
DISJUNCTION    = Monoid(False, lambda a, b: bool(a or b) )

NUMBERS  = Numeric(0         , 1         , operator.add, operator.mul)
FLOATS   = Numeric(0.0       , 1.0       , operator.add, operator.mul)
DECIMALS = Numeric(Decimal(0), Decimal(1), operator.add, operator.mul)

EQUALITY = Eq(operator.eq)
NATURAL  = Ordering(operator.lt)
