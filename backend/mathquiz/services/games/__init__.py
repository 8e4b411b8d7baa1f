"""Game domain services: question generation, scoring and the session lifecycle.

Generation and scoring are pure functions; ``GameService`` combines them with
the persistence stores. HTTP concerns stay in ``mathquiz.api``.
"""

from .questions import DIFFICULTY_LEVELS, evaluate_expression, generate_question
from .service import GameService

__all__ = ['DIFFICULTY_LEVELS', 'GameService', 'evaluate_expression', 'generate_question']
