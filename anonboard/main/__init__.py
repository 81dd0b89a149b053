from flask import Blueprint

bp = Blueprint('main', __name__)

from anonboard.main import routes
