"""Arithmetic question generation.

Questions are plain expressions such as ``"42 / 7 + 3"``: integer operands
separated by single spaces and the ASCII operators ``+ - * /``.
"""

import operator
import random
from fractions import Fraction
from typing import Dict, List, Tuple

# difficulty -> (operand count, digits per operand)
DIFFICULTY_LEVELS: Dict[int, Tuple[int, int]] = {
    1: (2, 1),
    2: (3, 2),
    3: (4, 3),
    4: (5, 4),
}

OPERATORS = ['+', '-', '*', '/']

_HIGH_PRECEDENCE = {'*': operator.mul, '/': operator.truediv}
_LOW_PRECEDENCE = {'+': operator.add, '-': operator.sub}


def random_number(digits: int, rng=random) -> int:
    """Uniform integer with exactly ``digits`` digits (1 digit allows 1-9)."""
    low = 10 ** (digits - 1)
    high = 10 ** digits - 1
    return rng.randint(low, high)


def evaluate_expression(expression: str) -> Fraction:
    """Exactly evaluate a space separated expression with standard precedence.

    ``*`` and ``/`` are folded first, left to right, then ``+`` and ``-``.
    """
    tokens = expression.split()
    if not tokens or len(tokens) % 2 == 0:
        raise ValueError(f"Malformed expression: {expression!r}")

    # First pass collapses multiplicative runs into single terms
    terms: List[Fraction] = [Fraction(int(tokens[0]))]
    signs: List[str] = []
    for op, raw in zip(tokens[1::2], tokens[2::2]):
        value = Fraction(int(raw))
        if op in _HIGH_PRECEDENCE:
            terms[-1] = _HIGH_PRECEDENCE[op](terms[-1], value)
        elif op in _LOW_PRECEDENCE:
            signs.append(op)
            terms.append(value)
        else:
            raise ValueError(f"Unknown operator {op!r} in {expression!r}")

    result = terms[0]
    for op, term in zip(signs, terms[1:]):
        result = _LOW_PRECEDENCE[op](result, term)
    return result


def generate_question(difficulty: int, rng=random) -> Tuple[str, float]:
    """Build a random question for ``difficulty`` and return (text, answer).

    The answer is the exact value of the expression rounded to 2 decimals.
    """
    if difficulty not in DIFFICULTY_LEVELS:
        raise ValueError(f"Difficulty must be one of {sorted(DIFFICULTY_LEVELS)}, got {difficulty!r}")
    operand_count, digits = DIFFICULTY_LEVELS[difficulty]

    numbers = [random_number(digits, rng)]
    operators: List[str] = []
    for i in range(1, operand_count):
        op = rng.choice(OPERATORS)
        value = random_number(digits, rng)
        if op == '/':
            value = max(1, value)
            if i == 1:
                # Scale the dividend so the first division comes out whole
                numbers[0] *= value
        operators.append(op)
        numbers.append(value)

    parts = [str(numbers[0])]
    for op, value in zip(operators, numbers[1:]):
        parts.extend([op, str(value)])
    expression = ' '.join(parts)

    answer = round(evaluate_expression(expression), 2)
    return expression, float(answer)
