import pytest

from threadsearch.engines.threadcounts import ThreadCountEngine, compute_hack, min_threads_for_hack
from threadsearch.utils.errors import DegenerateOracleError, OracleContractError, UserInputError


def test_floored_per_thread_amount(hack_oracle):
    engine = ThreadCountEngine(hack_oracle)

    # floor(1000 * 0.1) = 100 → ceil(150 / 100) = 2
    assert engine.min_threads_for_hack(1000, 850, None, None) == 2


def test_one_thread_boundary(hack_oracle):
    assert ThreadCountEngine(hack_oracle).min_threads_for_hack(1000, 900, None, None) == 1


@pytest.mark.parametrize("from_money, to_money", [(1000, 1000), (500, 1000), (0, 0)])
def test_goal_already_met_returns_zero(hack_oracle, from_money, to_money):
    engine = ThreadCountEngine(hack_oracle)

    assert engine.min_threads_for_hack(from_money, to_money, None, None) == 0
    assert hack_oracle.calls["hack"] == 0


def test_floor_before_scaling(fake_oracle):
    # floor(1000 * 0.1005) = 100，而不是 100.5
    engine = ThreadCountEngine(fake_oracle(hack=0.1005))

    assert engine.min_threads_for_hack(1000, 799, None, None) == 3


def test_inverse_matches_forward(fake_oracle):
    engine = ThreadCountEngine(fake_oracle(hack=0.0237))
    from_money, to_money = 1_234_567, 400_000

    t = engine.min_threads_for_hack(from_money, to_money, None, None)

    assert engine.compute_hack(from_money, None, t, None) >= from_money - to_money
    assert engine.compute_hack(from_money, None, t - 1, None) < from_money - to_money


def test_sub_unit_yield_is_degenerate(fake_oracle):
    engine = ThreadCountEngine(fake_oracle(hack=0.0001))

    with pytest.raises(DegenerateOracleError):
        engine.min_threads_for_hack(1000, 0, None, None)


@pytest.mark.parametrize("fraction", [-0.1, 1.5])
def test_fraction_out_of_range(fake_oracle, fraction):
    engine = ThreadCountEngine(fake_oracle(hack=fraction))

    with pytest.raises(OracleContractError, match="hack_percent"):
        engine.min_threads_for_hack(1000, 0, None, None)


def test_compute_hack(hack_oracle):
    assert compute_hack(hack_oracle, 1000, None, 2, None) == 200
    assert compute_hack(hack_oracle, 1000, None, 0, None) == 0


def test_idempotent(hack_oracle):
    engine = ThreadCountEngine(hack_oracle)

    assert engine.min_threads_for_hack(5_000, 10, None, None) == engine.min_threads_for_hack(5_000, 10, None, None)


def test_function_api(hack_oracle):
    assert min_threads_for_hack(hack_oracle, 1000, 850, None, None) == 2


@pytest.mark.parametrize("from_money", [-1, float("inf"), "1000"])
def test_compute_hack_validates_money(hack_oracle, from_money):
    with pytest.raises(UserInputError, match="from_money"):
        ThreadCountEngine(hack_oracle).compute_hack(from_money, None, 1, None)
