from flask import Blueprint

bp = Blueprint('errors', __name__)


class BoardError(Exception):
    """Base class for errors raised by thread and reply operations"""
    pass


class NotFound(BoardError):
    """No thread (or reply) matches the board and id given"""
    pass


class StorageError(BoardError):
    """The backing store failed to complete an operation"""
    pass


from anonboard.errors import handlers
