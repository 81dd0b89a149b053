# Thread operations. Each takes the thread collection to work on as its first argument.
from flask import current_app

from anonboard.views import thread_view
from anonboard.constants import RESULT_REPORTED, RESULT_SUCCESS, RESULT_INCORRECT_PASSWORD
from anonboard.errors import NotFound, StorageError
from anonboard.storage import ThreadCollection
from anonboard.utils import new_object_id, utcnow


def create_thread(threads: ThreadCollection, board: str, text: str, delete_password: str) -> dict:
    now = utcnow()
    thread = {'_id': new_object_id(),
              'board': board,
              'text': text,
              'created_on': now,
              'bumped_on': now,
              'reported': False,
              'delete_password': delete_password,
              'replies': []}
    thread_id = threads.insert(thread)
    if thread_id != thread['_id']:
        raise StorageError(f"Thread {thread['_id']} was not stored")

    current_app.logger.info(f"Created thread {thread_id} on /{board}/")
    return thread_view(thread, variant=1)


def get_recent_threads(threads: ThreadCollection, board: str) -> list:
    recent = threads.find(board, sort='bumped_on', descending=True,
                          limit=current_app.config['RECENT_THREADS_LIMIT'])
    return [thread_view(thread, variant=2, reply_limit=current_app.config['RECENT_REPLIES_LIMIT'])
            for thread in recent]


def get_thread_with_replies(threads: ThreadCollection, board: str, thread_id: str) -> dict:
    thread = threads.find_one(board, thread_id)
    if thread is None:
        raise NotFound('Thread not found')
    return thread_view(thread, variant=1)


def report_thread(threads: ThreadCollection, board: str, thread_id: str) -> str:
    if not threads.update(board, thread_id, set_fields={'reported': True}):
        raise NotFound('Thread not found')

    current_app.logger.info(f"Thread {thread_id} on /{board}/ reported")
    return RESULT_REPORTED


def delete_thread(threads: ThreadCollection, board: str, thread_id: str, delete_password: str) -> str:
    thread = threads.find_one(board, thread_id)
    if thread is None:
        raise NotFound('Thread not found')

    if thread['delete_password'] != delete_password:
        current_app.logger.warning(f"Incorrect password given to delete thread {thread_id} on /{board}/")
        return RESULT_INCORRECT_PASSWORD

    # a concurrent delete can remove the thread between the lookup and here
    if not threads.delete(board, thread_id):
        raise NotFound('Thread not found')

    current_app.logger.info(f"Deleted thread {thread_id} on /{board}/")
    return RESULT_SUCCESS
