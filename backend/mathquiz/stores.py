"""Persistence stores for players, games, questions and answers.

Each store wraps the SQLAlchemy session handed to it at construction. Lookups
return fully loaded objects; relationships are configured with
``lazy='raise'`` so anything not joined here cannot be fetched behind the
caller's back.
"""

from sqlalchemy import select
from sqlalchemy.orm import joinedload, selectinload

from mathquiz.models import Player, Game, Question, Answer


class PlayerStore:
    def __init__(self, session):
        self.session = session

    def find_by_name(self, name: str):
        stmt = (
            select(Player)
            .where(Player.name == name, Player.deleted_at.is_(None))
            .order_by(Player.id)
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()

    def create(self, name: str) -> Player:
        player = Player(name=name)
        self.session.add(player)
        self.session.flush()
        return player


class GameStore:
    def __init__(self, session):
        self.session = session

    def create(self, player: Player, difficulty: int, start_time) -> Game:
        game = Game(
            player_id=player.id,
            difficulty=difficulty,
            start_time=start_time,
            current_score=0.0,
            total_time_spent=0.0,
        )
        self.session.add(game)
        self.session.flush()
        return game

    def find_with_questions(self, game_id: int, for_update: bool = False):
        """Load a game with its player, questions (in order) and their answers.

        ``for_update`` locks the game row on backends that support it.
        """
        stmt = (
            select(Game)
            .where(Game.id == game_id, Game.deleted_at.is_(None))
            .options(
                joinedload(Game.player),
                selectinload(Game.questions).selectinload(Question.answers),
            )
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update(of=Game)
        return self.session.execute(stmt).scalars().first()

    def mark_ended(self, game: Game, when) -> Game:
        """Stamp the end time once.

        A game that already ended keeps its first ``end_time``; ending it
        again does not re-stamp it, unlike a plain overwrite.
        """
        if game.end_time is None:
            game.end_time = when
            self.session.add(game)
        return game

    def save(self, game: Game) -> Game:
        self.session.add(game)
        self.session.commit()
        return game

    def rollback(self):
        self.session.rollback()


class QuestionStore:
    def __init__(self, session):
        self.session = session

    def create(self, game_id: int, question_text: str, correct_answer: float, order_index: int) -> Question:
        question = Question(
            game_id=game_id,
            question_text=question_text,
            correct_answer=correct_answer,
            order_index=order_index,
        )
        self.session.add(question)
        self.session.flush()
        return question


class AnswerStore:
    def __init__(self, session):
        self.session = session

    def create(self, question_id: int, player_answer: float, time_taken: float, is_correct: bool, submitted_at) -> Answer:
        answer = Answer(
            question_id=question_id,
            player_answer=player_answer,
            time_taken=time_taken,
            is_correct=is_correct,
            submitted_at=submitted_at,
        )
        self.session.add(answer)
        self.session.flush()
        return answer

    def for_game(self, game_id: int):
        """All answers recorded for a game, oldest submission first."""
        stmt = (
            select(Answer)
            .join(Question, Answer.question_id == Question.id)
            .where(Question.game_id == game_id, Answer.deleted_at.is_(None))
            .order_by(Answer.submitted_at, Answer.id)
        )
        return list(self.session.execute(stmt).scalars().all())
