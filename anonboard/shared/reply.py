# Reply operations. Replies live inside their thread, so every lookup goes through (board, thread_id).
from flask import current_app

from anonboard.views import reply_view
from anonboard.constants import RESULT_REPORTED, RESULT_SUCCESS, RESULT_INCORRECT_PASSWORD, REPLY_DELETED_TEXT
from anonboard.errors import NotFound
from anonboard.storage import ThreadCollection
from anonboard.utils import new_object_id, utcnow


def create_reply(threads: ThreadCollection, board: str, thread_id: str, text: str, delete_password: str) -> dict:
    """
    Append a reply to a thread and bump the thread to the reply's creation time.

    Raises NotFound if the thread does not exist on this board.
    """
    reply = {'_id': new_object_id(),
             'text': text,
             'created_on': utcnow(),
             'reported': False,
             'delete_password': delete_password}

    if not threads.update(board, thread_id, set_fields={'bumped_on': reply['created_on']}, push_reply=reply):
        raise NotFound('Thread not found')

    current_app.logger.info(f"Created reply {reply['_id']} in thread {thread_id} on /{board}/")
    return reply_view(reply)


def report_reply(threads: ThreadCollection, board: str, thread_id: str, reply_id: str) -> str:
    # A missing thread and a missing reply are not told apart
    if not threads.update_reply(board, thread_id, reply_id, {'reported': True}):
        raise NotFound('Reply not found')

    current_app.logger.info(f"Reply {reply_id} in thread {thread_id} on /{board}/ reported")
    return RESULT_REPORTED


def delete_reply(threads: ThreadCollection, board: str, thread_id: str, reply_id: str, delete_password: str) -> str:
    """
    Blank out a reply's text if the password matches.

    The reply keeps its id, created_on and reported flag, and the thread is not bumped.
    """
    thread = threads.find_one(board, thread_id)
    if thread is None:
        raise NotFound('Thread not found')

    reply = next((r for r in thread['replies'] if r['_id'] == reply_id), None)
    if reply is None:
        raise NotFound('Reply not found')

    if reply['delete_password'] != delete_password:
        current_app.logger.warning(f"Incorrect password given to delete reply {reply_id} in thread {thread_id}")
        return RESULT_INCORRECT_PASSWORD

    if not threads.update_reply(board, thread_id, reply_id, {'text': REPLY_DELETED_TEXT}):
        raise NotFound('Reply not found')

    current_app.logger.info(f"Deleted reply {reply_id} in thread {thread_id} on /{board}/")
    return RESULT_SUCCESS
