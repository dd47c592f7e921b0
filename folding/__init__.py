from folding.capabilities import (
    Monoid, Numeric, Ordering, Eq,
    ADDITION, MULTIPLICATION, CONCATENATION, TUPLES, CONJUNCTION, DISJUNCTION,
    NUMBERS, FLOATS, DECIMALS, EQUALITY, NATURAL
)
from folding.foldable import Foldable
from folding.fold import Fold, lift
from folding.state import FoldState
