import pytest

from folding import Fold, lift
from folding import combinators
from tests.data_generators import counting_sum, counting_length, Countdown, samples


def _inc(x):
    return x + 1


def _double(x):
    return x * 2


def test_create_and_fold():
    fold = Fold.create(lambda acc, a: acc + [a], [], tuple)
    assert fold.fold([1, 2]) == (1, 2)
    assert fold([1, 2]) == (1, 2)


def test_empty_sequence_is_stable():
    fold = Fold.create(lambda n, _: n + 1, 0, lambda n: f'seen {n}')
    assert fold.fold([]) == 'seen 0'
    assert fold.fold([]) == fold.fold([])


@pytest.mark.parametrize('xs', samples)
def test_functor_laws(xs):
    fold = combinators.sum()

    assert fold.map(lambda b: b).fold(xs) == fold.fold(xs)
    assert fold.map(_inc).map(_double).fold(xs) == fold.map(lambda b: _double(_inc(b))).fold(xs)


@pytest.mark.parametrize('xs', samples)
def test_premap_law(xs):
    fold = combinators.sum()
    assert fold.premap(_double).fold(xs) == fold.fold(map(_double, xs))


@pytest.mark.parametrize('xs', samples)
def test_ap_matches_separate_runs(xs):
    value    = combinators.sum()
    function = combinators.length().map(lambda n: lambda total: (total, n))

    assert value.ap(function).fold(xs) == function.fold(xs)(value.fold(xs))


def test_mean_in_one_pass():
    total, summed = counting_sum()
    n, counted    = counting_length()

    mean = total.ap(n.map(lambda count: lambda s: s / count))

    assert mean.fold(iter([1, 2, 3, 4])) == 2.5
    assert summed  == [1, 2, 3, 4]
    assert counted == [1, 2, 3, 4]


def test_reusable():
    fold = combinators.sum().zip(combinators.last())
    xs = [4, 5, 6]

    assert fold.fold(xs) == fold.fold(xs) == (15, 6)
    assert fold.fold([1]) == (1, 1)


def test_pure_ignores_input():
    constant = Fold.pure('hello')

    assert constant.fold([]) == 'hello'
    assert constant.fold(range(100)) == 'hello'


def test_pure_is_identity_for_ap():
    fold = combinators.sum()
    assert fold.ap(Fold.pure(lambda b: b)).fold([1, 2, 3]) == fold.fold([1, 2, 3])


def test_zip():
    assert combinators.head().zip(combinators.length()).fold('xyz') == ('x', 3)


def test_lift_runs_once():
    total, visits = counting_sum()
    stats = lift(
        lambda s, n, largest: (s, n, largest),
        total,
        combinators.length(),
        combinators.maximum()
    )

    assert stats.fold([2, 9, 4]) == (15, 3, 9)
    assert visits == [2, 9, 4]


def test_lift_without_folds():
    assert lift(lambda: 42).fold([1, 2]) == 42


def test_foldable_container():
    assert combinators.sum().fold(Countdown(4)) == 10
    assert combinators.head().fold(Countdown(4)) == 4
    assert combinators.head().fold(Countdown(0)) is None


def test_scan():
    assert combinators.length().scan('abc') == [1, 2, 3]


def test_errors_propagate():
    fold = combinators.sum().map(lambda total: 1 / total)

    with pytest.raises(ZeroDivisionError):
        fold.fold([])


def test_lift_without_folds_runs_when_driven():
    calls = []

    def answer():
        calls.append(None)
        return 42

    fold = lift(answer)
    assert calls == []

    assert fold.fold([]) == 42
    assert fold.fold([1]) == 42
    assert len(calls) == 2


def test_lift_without_folds_raises_when_driven():
    fold = lift(lambda: 1 / 0)

    with pytest.raises(ZeroDivisionError):
        fold.fold([])
