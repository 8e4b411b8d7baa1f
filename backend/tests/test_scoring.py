from datetime import datetime
from types import SimpleNamespace

from mathquiz.services.games.scoring import (
    best_answer,
    elapsed_seconds,
    is_correct,
    round2,
    score_fraction,
    score_label,
)


def test_correctness_tolerance_boundaries():
    assert is_correct(7, 7.0)
    assert is_correct(0.0099, 0)
    assert not is_correct(0.01, 0)
    assert not is_correct(6, 7.0)
    assert is_correct(-3.333, -3.33)


def test_correctness_boundary_away_from_zero():
    assert not is_correct(5.01, 5.0)
    assert is_correct(5.0099, 5.0)
    assert not is_correct(-2.99, -3)
    assert not is_correct(12.34, 12.35)
    assert is_correct(12.345, 12.35)


def test_score_fraction_and_label():
    assert score_fraction(0, 0) == 0.0
    assert score_fraction(3, 4) == 0.75
    assert score_label(3, 4) == '3/4'


def test_elapsed_seconds():
    start = datetime(2026, 1, 1, 12, 0, 0)
    end = datetime(2026, 1, 1, 12, 0, 2, 500000)
    assert elapsed_seconds(start, end) == 2.5


def test_round2():
    assert round2(1.23456) == 1.23
    assert round2(10) == 10.0


def test_best_answer_picks_fastest_correct():
    answers = [
        SimpleNamespace(id=1, is_correct=True, time_taken=4.0),
        SimpleNamespace(id=2, is_correct=False, time_taken=0.5),
        SimpleNamespace(id=3, is_correct=True, time_taken=2.0),
        SimpleNamespace(id=4, is_correct=True, time_taken=2.0),
    ]
    assert best_answer(answers).id == 3


def test_best_answer_none_when_all_wrong():
    assert best_answer([SimpleNamespace(is_correct=False, time_taken=1.0)]) is None
    assert best_answer([]) is None
