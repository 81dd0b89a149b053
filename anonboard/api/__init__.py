from flask import current_app, request
from flask_smorest import Blueprint as ApiBlueprint
from marshmallow import ValidationError
from webargs.flaskparser import FlaskParser
from werkzeug.exceptions import HTTPException
import sentry_sdk

from anonboard.errors import NotFound
from anonboard.utils import orjson_response

FORM_MIMETYPES = ('application/x-www-form-urlencoded', 'multipart/form-data')


class BoardArgumentsParser(FlaskParser):
    """Rejects bad input with 400 and accepts html form posts wherever a json body is expected"""
    DEFAULT_VALIDATION_STATUS = 400

    def load_json(self, req, schema):
        if req.mimetype in FORM_MIMETYPES:
            return self.load_form(req, schema)
        return super().load_json(req, schema)


class BoardBlueprint(ApiBlueprint):
    ARGUMENTS_PARSER = BoardArgumentsParser()


thread_bp = BoardBlueprint(
    "Threads",
    __name__,
    url_prefix="/api/threads",
    description="Threads on a board",
)

reply_bp = BoardBlueprint(
    "Replies",
    __name__,
    url_prefix="/api/replies",
    description="Replies within a thread",
)


def is_form_post() -> bool:
    return request.mimetype in FORM_MIMETYPES


def shared_error_handler(e):
    """Shared error handler for all API blueprints"""
    if isinstance(e, NotFound):
        response = {"code": 404, "message": str(e), "status": "Not Found"}
        return orjson_response(response, 404)
    elif isinstance(e, ValidationError):
        response = {"code": 400, "message": "Validation failed", "errors": e.messages, "status": "Bad Request"}
        return orjson_response(response, 400)
    elif isinstance(e, HTTPException):
        data = getattr(e, 'data', None)   # set by webargs when request arguments fail validation
        messages = data.get('messages') if isinstance(data, dict) else None
        if e.code == 400 and messages:
            errors = {}
            for location, location_messages in messages.items():
                if isinstance(location_messages, dict):
                    errors.update(location_messages)
                else:
                    errors[location] = location_messages
            current_app.logger.info(f"API validation error on {request.path}: {errors}")
            response = {"code": 400, "message": "Validation failed", "errors": errors, "status": "Bad Request"}
            return orjson_response(response, 400)
        response = {"code": e.code, "message": e.description, "status": e.name}
        return orjson_response(response, e.code)
    else:
        current_app.logger.exception("API exception")
        if current_app.config['SENTRY_DSN']:
            sentry_sdk.capture_exception(e)
        response = {"code": 500, "message": "Internal server error", "status": "Internal Server Error"}
        return orjson_response(response, 500)


# Register the shared error handler for all blueprints
blueprints = [thread_bp, reply_bp]
for blueprint in blueprints:
    blueprint.errorhandler(Exception)(shared_error_handler)

from anonboard.api import routes
