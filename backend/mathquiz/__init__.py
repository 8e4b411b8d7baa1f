from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

# Aggregates are read after commit to build responses
db = SQLAlchemy(session_options={'expire_on_commit': False})
migrate = Migrate()

GAME_SERVICE_KEY = 'game_service'


def build_game_service(flask_app):
    """Wire the game service to its stores.

    Everything is constructed here and handed over by constructor; views look
    the service up through ``app.extensions``.
    """
    from mathquiz.stores import PlayerStore, GameStore, QuestionStore, AnswerStore
    from mathquiz.services.games import GameService

    return GameService(
        players=PlayerStore(db.session),
        games=GameStore(db.session),
        questions=QuestionStore(db.session),
        answers=AnswerStore(db.session),
        max_answers=int(flask_app.config.get('MAX_ANSWERS_PER_GAME', 10)),
        logger=flask_app.logger,
    )


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS') or '*')

    # Import and register blueprints here
    from mathquiz.main import main
    flask_app.register_blueprint(main)

    from mathquiz.api.games import games
    api_prefix = flask_app.config.get('API_PREFIX', '/api/v1').rstrip('/')
    flask_app.register_blueprint(games, url_prefix=f'{api_prefix}/game')

    from mathquiz.errors import register_error_handlers
    register_error_handlers(flask_app)

    flask_app.extensions[GAME_SERVICE_KEY] = build_game_service(flask_app)

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates all tables."""
        # Ensure models are imported so their tables are known
        import mathquiz.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
        click.echo('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
