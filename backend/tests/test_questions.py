import random
from fractions import Fraction

import pytest

from mathquiz.services.games import DIFFICULTY_LEVELS, evaluate_expression, generate_question


@pytest.mark.parametrize('expression,expected', [
    ('2 + 3 * 4', Fraction(14)),
    ('8 - 6 / 4', Fraction(13, 2)),
    ('20 / 4 / 5', Fraction(1)),
    ('7 - 2 - 1', Fraction(4)),
    ('9 * 9 - 3 * 3 + 1', Fraction(73)),
    ('5', Fraction(5)),
])
def test_evaluate_expression_uses_standard_precedence(expression, expected):
    assert evaluate_expression(expression) == expected


def test_evaluate_expression_rejects_garbage():
    with pytest.raises(ValueError):
        evaluate_expression('1 +')
    with pytest.raises(ValueError):
        evaluate_expression('1 % 2')


@pytest.mark.parametrize('difficulty', sorted(DIFFICULTY_LEVELS))
def test_generated_question_shape(difficulty):
    rng = random.Random(difficulty)
    operand_count, digits = DIFFICULTY_LEVELS[difficulty]
    for _ in range(200):
        text, answer = generate_question(difficulty, rng=rng)
        tokens = text.split(' ')
        numbers = tokens[0::2]
        operators = tokens[1::2]
        assert len(numbers) == operand_count
        assert all(op in ('+', '-', '*', '/') for op in operators)
        for i, number in enumerate(numbers):
            if i == 0 and operators[0] == '/':
                # Dividend was scaled by the divisor
                assert int(number) % int(numbers[1]) == 0
                continue
            assert len(number) == digits
        assert answer == float(round(evaluate_expression(text), 2))


def test_first_division_is_whole():
    rng = random.Random(7)
    seen = 0
    while seen < 50:
        text, answer = generate_question(1, rng=rng)
        left, op, right = text.split(' ')
        if op != '/':
            continue
        seen += 1
        assert int(left) % int(right) == 0
        assert answer == int(left) // int(right)


def test_unknown_difficulty_is_rejected():
    with pytest.raises(ValueError):
        generate_question(5)
    with pytest.raises(ValueError):
        generate_question(0)
