import os

from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, '.env'))


class Config(object):
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guesss'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or os.environ.get('DB') or \
                              'sqlite:///' + os.path.join(basedir, 'anonboard.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False     # set to true to see SQL in console

    # 'sql', 'memory' or 'auto' (database if reachable, otherwise memory)
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND') or 'auto'

    SENTRY_DSN = os.environ.get('SENTRY_DSN') or None

    SERVE_API_DOCS = os.environ.get('SERVE_API_DOCS') or False

    # CORS configuration
    CORS_ALLOW_ORIGIN = os.environ.get('CORS_ALLOW_ORIGIN') or '*'

    LOG_DIR = os.environ.get('LOG_DIR') or 'logs'

    RECENT_THREADS_LIMIT = int(os.environ.get('RECENT_THREADS_LIMIT') or 10)
    RECENT_REPLIES_LIMIT = int(os.environ.get('RECENT_REPLIES_LIMIT') or 3)
