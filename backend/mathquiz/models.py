from datetime import datetime, timezone

from mathquiz import db


def utcnow():
    """Current UTC time as a naive datetime, the form every column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    # Soft delete marker; stores skip rows where this is set
    deleted_at = db.Column(db.DateTime, nullable=True)


class Player(TimestampMixin, db.Model):
    __tablename__ = 'player'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False, index=True)
    games = db.relationship('Game', back_populates='player', lazy='raise')


class Game(TimestampMixin, db.Model):
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), nullable=False, index=True)
    difficulty = db.Column(db.Integer, nullable=False)
    start_time = db.Column(db.DateTime, default=utcnow, nullable=False)
    end_time = db.Column(db.DateTime, nullable=True)  # null while in progress
    current_score = db.Column(db.Float, default=0.0, nullable=False)
    total_time_spent = db.Column(db.Float, default=0.0, nullable=False)

    player = db.relationship('Player', back_populates='games', lazy='raise')
    questions = db.relationship(
        'Question',
        back_populates='game',
        order_by='Question.order_index',
        lazy='raise',
    )

    @property
    def is_ended(self):
        return self.end_time is not None


class Question(TimestampMixin, db.Model):
    __tablename__ = 'question'
    __table_args__ = (
        db.UniqueConstraint('game_id', 'order_index', name='uq_question_game_order'),
    )
    id = db.Column(db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey('game.id'), nullable=False, index=True)
    question_text = db.Column(db.String(255), nullable=False)
    correct_answer = db.Column(db.Float, nullable=False)
    order_index = db.Column(db.Integer, nullable=False)

    game = db.relationship('Game', back_populates='questions', lazy='raise')
    answers = db.relationship('Answer', back_populates='question', lazy='raise')

    @property
    def answer(self):
        """The single answer recorded for this question, if any."""
        return self.answers[0] if self.answers else None


class Answer(TimestampMixin, db.Model):
    __tablename__ = 'answer'
    id = db.Column(db.Integer, primary_key=True)
    question_id = db.Column(db.Integer, db.ForeignKey('question.id'), nullable=False, index=True)
    player_answer = db.Column(db.Float, nullable=False)
    time_taken = db.Column(db.Float, nullable=False)
    is_correct = db.Column(db.Boolean, default=False, nullable=False)
    submitted_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    question = db.relationship('Question', back_populates='answers', lazy='raise')
