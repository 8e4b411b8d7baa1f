from flask import jsonify, request
from werkzeug.exceptions import HTTPException


class QuizError(Exception):
    """Base class for errors that map onto a client-facing response."""
    status_code = 500
    error = 'Internal Server Error'

    def __init__(self, message=None):
        super().__init__(message or self.error)
        self.message = message or self.error

    def to_dict(self):
        return {'error': self.message}


class ValidationError(QuizError):
    status_code = 400
    error = 'Validation failed'

    def __init__(self, message=None, details=None, error=None, extra=None):
        super().__init__(message or 'Please check your input data')
        if error:
            self.error = error
        self.details = details or []
        self.extra = extra or {}

    def to_dict(self):
        payload = {'error': self.error, 'message': self.message}
        if self.details:
            payload['details'] = self.details
        payload.update(self.extra)
        return payload


class NotFoundError(QuizError):
    status_code = 404
    error = 'Not Found'


class InvalidStateError(QuizError):
    status_code = 400
    error = 'Invalid state'


def register_error_handlers(flask_app):
    @flask_app.errorhandler(QuizError)
    def handle_quiz_error(exc):
        flask_app.logger.info(f"[rejected] {request.method} {request.path} status={exc.status_code} reason={exc.message}")
        return jsonify(exc.to_dict()), exc.status_code

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({'error': exc.name, 'message': exc.description}), exc.code

    @flask_app.errorhandler(Exception)
    def handle_unexpected(exc):
        flask_app.logger.exception(f"[error] {request.method} {request.path} failed: {exc}")
        message = str(exc) if flask_app.config.get('DEBUG') else 'Something went wrong'
        return jsonify({'error': 'Internal Server Error', 'message': message}), 500
