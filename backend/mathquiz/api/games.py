from flask import Blueprint, current_app, jsonify

from mathquiz import GAME_SERVICE_KEY
from mathquiz.schemas import StartGameRequest, SubmitAnswerRequest
from mathquiz.validation import parse_game_id, validate_body


games = Blueprint('games', __name__)


def _service():
    return current_app.extensions[GAME_SERVICE_KEY]


@games.route('/start', methods=['POST'])
@validate_body(StartGameRequest)
def start_game(payload: StartGameRequest):
    result = _service().start_game(payload.name, payload.difficulty)
    return jsonify(result), 201


@games.route('/<game_id>/submit', methods=['POST'])
@validate_body(SubmitAnswerRequest)
def submit_answer(game_id, payload: SubmitAnswerRequest):
    result = _service().submit_answer(parse_game_id(game_id), payload.answer)
    return jsonify(result)


@games.route('/<game_id>/end', methods=['GET'])
def end_game(game_id):
    return jsonify(_service().end_game(parse_game_id(game_id)))
