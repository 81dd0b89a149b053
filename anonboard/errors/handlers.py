from anonboard import db
from anonboard.errors import bp
from anonboard.utils import orjson_response, text_response


@bp.app_errorhandler(404)
def not_found_error(error):
    return text_response('Not Found', 404)


@bp.app_errorhandler(405)
def method_not_allowed_error(error):
    return text_response('Method Not Allowed', 405)


@bp.app_errorhandler(500)
def internal_error_500(error):
    db.session.rollback()
    return orjson_response({'code': 500, 'status': 'Internal Server Error', 'message': 'Internal server error'}, 500)
