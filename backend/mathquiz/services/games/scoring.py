from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

ANSWER_TOLERANCE = Decimal('0.01')


def is_correct(player_answer: float, correct_answer: float) -> bool:
    """Answers within (strictly less than) 0.01 of the solution count.

    Both values are compared as decimals of their shortest repr, so 5.01 is
    exactly 0.01 away from 5.0 rather than a float hair under it.
    """
    diff = abs(Decimal(repr(float(player_answer))) - Decimal(repr(float(correct_answer))))
    return diff < ANSWER_TOLERANCE


def elapsed_seconds(since: datetime, now: datetime) -> float:
    return (now - since).total_seconds()


def score_fraction(correct: int, total: int) -> float:
    if not total:
        return 0.0
    return correct / total


def score_label(correct: int, total: int) -> str:
    return f"{correct}/{total}"


def round2(value: float) -> float:
    return round(float(value), 2)


def best_answer(answers: Iterable) -> Optional[object]:
    """Fastest correct answer; the earliest one wins a tie."""
    best = None
    for answer in answers:
        if not answer.is_correct:
            continue
        if best is None or answer.time_taken < best.time_taken:
            best = answer
    return best
