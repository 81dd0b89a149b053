# This file is part of anonboard, which is licensed under the GNU Affero General Public License (AGPL) version 3.0.
# You should have received a copy of the GPL along with this program. If not, see <http://www.gnu.org/licenses/>.

import logging
from logging.handlers import RotatingFileHandler
import os
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_smorest import Api
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from anonboard.constants import VERSION
from config import Config


db = SQLAlchemy(session_options={"autoflush": False})
rest_api = Api()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    if app.config['SENTRY_DSN']:
        import sentry_sdk
        sentry_sdk.init(
            dsn=app.config["SENTRY_DSN"],
            enable_tracing=False,
        )

    app.config["API_TITLE"] = "Anonymous Message Board API"
    app.config["API_VERSION"] = VERSION
    app.config["OPENAPI_VERSION"] = "3.1.1"
    if app.config["SERVE_API_DOCS"]:
        app.config["OPENAPI_URL_PREFIX"] = "/api"
        app.config["OPENAPI_JSON_PATH"] = "/swagger.json"
        app.config["OPENAPI_SWAGGER_UI_PATH"] = "/swagger"
        app.config["OPENAPI_SWAGGER_UI_URL"] = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"
    rest_api.init_app(app)
    rest_api.DEFAULT_ERROR_RESPONSE_NAME = None  # Don't include default errors, define them ourselves

    db.init_app(app)

    from anonboard.main import bp as main_bp
    app.register_blueprint(main_bp)

    from anonboard.errors import bp as errors_bp
    app.register_blueprint(errors_bp)

    # API Namespaces
    from anonboard.api import thread_bp, reply_bp
    rest_api.register_blueprint(thread_bp)
    rest_api.register_blueprint(reply_bp)

    from anonboard import cli
    cli.register(app)

    # log rotation
    if not app.config.get('TESTING'):
        log_dir = app.config['LOG_DIR']
        if not os.path.exists(log_dir):
            os.mkdir(log_dir)
        file_handler = RotatingFileHandler(os.path.join(log_dir, 'anonboard.log'),
                                           maxBytes=1002400, backupCount=15)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s '
            '[in %(pathname)s:%(lineno)d]'))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

    app.logger.setLevel(logging.INFO)

    app.extensions['thread_collection'] = select_thread_collection(app)
    app.logger.info('Started!')  # let's go!

    return app


def select_thread_collection(app):
    """Pick the storage backend named by STORAGE_BACKEND.

    'auto' uses the database when it answers and falls back to the in-memory store otherwise.
    """
    from anonboard.storage import MemoryThreadCollection, SqlThreadCollection

    backend = app.config['STORAGE_BACKEND']
    if backend == 'memory':
        return MemoryThreadCollection()
    if backend == 'sql':
        return SqlThreadCollection()
    if backend != 'auto':
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")

    with app.app_context():
        try:
            with db.engine.connect() as conn:
                conn.execute(text('SELECT 1'))
            db.create_all()
        except SQLAlchemyError as e:
            app.logger.warning(f"Database connection failed, using in-memory storage: {e}")
            return MemoryThreadCollection()
    app.logger.info('Connected to database successfully')
    return SqlThreadCollection()


def get_thread_collection():
    from flask import current_app
    return current_app.extensions['thread_collection']


from anonboard import models
