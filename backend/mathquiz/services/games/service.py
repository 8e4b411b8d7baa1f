import logging
import threading
from contextlib import contextmanager
from typing import List

from mathquiz.errors import InvalidStateError, NotFoundError
from mathquiz.models import utcnow
from .questions import generate_question
from .scoring import (
    best_answer,
    elapsed_seconds,
    is_correct,
    round2,
    score_fraction,
    score_label,
)

# Games share a fixed set of locks by id so the table never grows
LOCK_POOL_SIZE = 64

GAME_NOT_FOUND = 'Game not found'
GAME_ENDED = 'Cannot submit answers for an ended game'
NO_OPEN_QUESTION = 'No unanswered questions found'

NO_CORRECT_ANSWERS = {
    'question': 'No correct answers',
    'answer': 0,
    'time_taken': 0,
}


def submit_url(game_id: int) -> str:
    return f"/game/{game_id}/submit"


class GameService:
    """Game lifecycle: start a session, take answers, end it.

    Calls touching the same game are serialized with a per-game lock so two
    concurrent submissions cannot both answer the open question. Locks come
    from a fixed pool keyed by ``game_id % LOCK_POOL_SIZE``, so unrelated games
    may occasionally share one. They are process local; the game row is also
    loaded ``FOR UPDATE`` where the database supports it.
    """

    def __init__(self, players, games, questions, answers,
                 generator=generate_question, clock=utcnow, max_answers=10,
                 logger=None):
        self.players = players
        self.games = games
        self.questions = questions
        self.answers = answers
        self.generator = generator
        self.clock = clock
        self.max_answers = max_answers
        self.logger = logger or logging.getLogger(__name__)
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(LOCK_POOL_SIZE)]

    @contextmanager
    def _game_lock(self, game_id: int):
        with self._locks[game_id % LOCK_POOL_SIZE]:
            yield

    def _load_game(self, game_id: int):
        game = self.games.find_with_questions(game_id, for_update=True)
        if game is None:
            raise NotFoundError(GAME_NOT_FOUND)
        return game

    def _add_question(self, game_id: int, difficulty: int, order_index: int) -> str:
        text, correct = self.generator(difficulty)
        self.questions.create(game_id, text, correct, order_index)
        return text

    def start_game(self, name: str, difficulty: int) -> dict:
        player = self.players.find_by_name(name)
        if player is None:
            player = self.players.create(name)

        game = self.games.create(player, difficulty, self.clock())
        question = self._add_question(game.id, difficulty, 1)
        self.games.save(game)

        self.logger.info(f"[start] game={game.id} player={player.name} difficulty={difficulty}")
        return {
            'message': f"Hello {name}, find your submit API URL below",
            'game_id': game.id,
            'submit_url': submit_url(game.id),
            'question': question,
            'time_started': game.start_time.isoformat() + 'Z',
        }

    def submit_answer(self, game_id: int, player_answer: float) -> dict:
        with self._game_lock(game_id):
            try:
                return self._submit_answer(game_id, player_answer)
            except Exception:
                self.games.rollback()
                raise

    def _submit_answer(self, game_id: int, player_answer: float) -> dict:
        game = self._load_game(game_id)
        if game.is_ended:
            raise InvalidStateError(GAME_ENDED)

        current = next((q for q in game.questions if not q.answers), None)
        if current is None:
            raise InvalidStateError(NO_OPEN_QUESTION)

        now = self.clock()
        previous = self.answers.for_game(game.id)
        if previous:
            time_taken = elapsed_seconds(previous[-1].submitted_at, now)
        else:
            time_taken = elapsed_seconds(game.start_time, now)

        correct = is_correct(player_answer, current.correct_answer)
        self.answers.create(current.id, player_answer, time_taken, correct, now)

        total = len(previous) + 1
        correct_count = sum(1 for a in previous if a.is_correct) + (1 if correct else 0)
        game.current_score = score_fraction(correct_count, total)
        game.total_time_spent = (game.total_time_spent or 0.0) + time_taken

        name = game.player.name
        response = {
            'result': (f"Good job {name}, your answer is correct!" if correct
                       else f"Sorry {name}, your answer is incorrect."),
            'time_taken': round2(time_taken),
            'current_score': score_label(correct_count, total),
        }

        if total < self.max_answers:
            next_text = self._add_question(game.id, game.difficulty, total + 1)
            response['next_question'] = {
                'submit_url': submit_url(game.id),
                'question': next_text,
            }

        self.games.save(game)
        self.logger.info(
            f"[submit] game={game.id} question={current.order_index} correct={correct} "
            f"time_taken={time_taken:.2f}s score={response['current_score']}"
        )
        return response

    def end_game(self, game_id: int) -> dict:
        with self._game_lock(game_id):
            try:
                return self._end_game(game_id)
            except Exception:
                self.games.rollback()
                raise

    def _end_game(self, game_id: int) -> dict:
        game = self._load_game(game_id)
        self.games.mark_ended(game, self.clock())

        answers = self.answers.for_game(game.id)
        correct_count = sum(1 for a in answers if a.is_correct)
        total = len(answers)

        fastest = best_answer(answers)
        if fastest is None:
            best_score = dict(NO_CORRECT_ANSWERS)
        else:
            question = next(q for q in game.questions if q.id == fastest.question_id)
            best_score = {
                'question': question.question_text,
                'answer': question.correct_answer,
                'time_taken': round2(fastest.time_taken),
            }

        history = []
        for question in game.questions:
            answer = question.answer
            if answer is None:
                continue
            history.append({
                'question': question.question_text,
                'player_answer': answer.player_answer,
                'correct_answer': question.correct_answer,
                'is_correct': answer.is_correct,
                'time_taken': round2(answer.time_taken),
            })

        self.games.save(game)
        self.logger.info(f"[end] game={game.id} score={score_label(correct_count, total)}")
        return {
            'name': game.player.name,
            'difficulty': game.difficulty,
            'current_score': score_label(correct_count, total),
            'total_time_spent': round2(game.total_time_spent or 0.0),
            'best_score': best_score,
            'history': history,
        }
