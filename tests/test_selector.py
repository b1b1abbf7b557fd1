import pytest

from reversi import HeuristicEvaluator, MoveSelector, Strategy, make_selector


def test_random_strategy_picks_legal_moves(opening):
    selector = make_selector("random", seed=0)
    assert selector.strategy is Strategy.RANDOM
    picks = {selector.select(opening) for _ in range(50)}
    assert picks <= set(opening.legal_moves())
    assert len(picks) > 1


def test_random_strategy_is_reproducible(opening):
    a = make_selector(Strategy.RANDOM, seed=42)
    b = make_selector(Strategy.RANDOM, seed=42)
    assert [a.select(opening) for _ in range(10)] == [b.select(opening) for _ in range(10)]


def test_negamax_strategy_uses_search(opening):
    selector = MoveSelector(
        strategy=Strategy.NEGAMAX,
        max_depth=1,
        evaluator=HeuristicEvaluator(noise=0),
    )
    assert selector.select(opening) == (2, 4)


def test_make_selector_shares_generator():
    selector = make_selector("negamax", seed=1, max_depth=2, noise=7)
    assert selector.evaluator.rng is selector.rng
    assert selector.evaluator.noise == 7
    assert selector.max_depth == 2


def test_select_without_moves_raises(o_must_pass):
    for strategy in Strategy:
        with pytest.raises(ValueError):
            make_selector(strategy, seed=0).select(o_must_pass)


def test_invalid_configuration_raises():
    with pytest.raises(ValueError):
        make_selector("minimax")
    with pytest.raises(ValueError):
        MoveSelector(max_depth=0)


def test_select_does_not_mutate_state(opening):
    board = opening.board.copy()
    make_selector("negamax", seed=0, max_depth=2).select(opening)
    make_selector("random", seed=0).select(opening)
    assert opening.board == board
    assert opening.legal_moves() == [(2, 4), (3, 5), (4, 2), (5, 3)]
