"""Request sanitization and validation for JSON views.

``validate_body(Model)`` runs, in order: trim every string, reject null or
blank values, then validate against the pydantic model. The view receives the
validated model as its ``payload`` keyword argument.
"""

from functools import wraps
from typing import Any, List

from flask import request
from pydantic import ValidationError as PydanticValidationError

from mathquiz.errors import ValidationError


def sanitize(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list):
        return [sanitize(item) for item in value]
    if isinstance(value, dict):
        return {key: sanitize(item) for key, item in value.items()}
    return value


def find_empty_fields(data: dict, path: str = '') -> List[str]:
    empty = []
    for key, value in data.items():
        field_path = f"{path}.{key}" if path else key
        if value is None or (isinstance(value, str) and value == ''):
            empty.append(field_path)
        elif isinstance(value, dict):
            empty.extend(find_empty_fields(value, field_path))
    return empty


def format_errors(exc: PydanticValidationError) -> List[dict]:
    details = []
    for err in exc.errors():
        details.append({
            'property': '.'.join(str(part) for part in err['loc']) or None,
            'message': err['msg'],
        })
    return details


def parse_body(model, raw: Any):
    if not isinstance(raw, dict):
        raise ValidationError('Request body must be a JSON object')

    data = sanitize(raw)
    empty = find_empty_fields(data)
    if empty:
        raise ValidationError(
            'Please provide values for all required fields',
            error='Empty values not allowed',
            extra={'emptyFields': empty},
        )

    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(details=format_errors(exc)) from exc


def validate_body(model):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            kwargs['payload'] = parse_body(model, request.get_json(silent=True))
            return view(*args, **kwargs)
        return wrapper
    return decorator


def parse_game_id(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError('Invalid game ID', error='Invalid game ID')
