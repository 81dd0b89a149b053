from __future__ import annotations

from flask import current_app
from sqlalchemy import desc, asc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from anonboard import db
from anonboard.errors import StorageError
from anonboard.models import Thread, Reply
from anonboard.storage.base import ThreadCollection

THREAD_FIELDS = ('text', 'bumped_on', 'reported', 'delete_password')
REPLY_FIELDS = ('text', 'reported', 'delete_password')


def _set_fields(model, set_fields: dict, allowed: tuple):
    for field, value in set_fields.items():
        if field not in allowed:
            raise ValueError(f"{field} cannot be updated on {model.__tablename__}")
        setattr(model, field, value)


class SqlThreadCollection(ThreadCollection):
    """Threads and replies stored in the SQLAlchemy database configured on the app."""

    def _thread(self, board, thread_id):
        return Thread.query.filter_by(id=thread_id, board=board).first()

    def _fail(self, action: str, error: SQLAlchemyError):
        db.session.rollback()
        current_app.logger.error(f"Storage failure while {action}: {error}")
        raise StorageError(f"Storage failure while {action}") from error

    def insert(self, document):
        thread = Thread(id=document['_id'], board=document['board'], text=document['text'],
                        created_on=document['created_on'], bumped_on=document['bumped_on'],
                        reported=document['reported'], delete_password=document['delete_password'])
        for reply in document.get('replies', []):
            thread.replies.append(Reply(id=reply['_id'], text=reply['text'], created_on=reply['created_on'],
                                        reported=reply['reported'], delete_password=reply['delete_password']))
        try:
            db.session.add(thread)
            db.session.commit()
        except SQLAlchemyError as e:
            self._fail('inserting a thread', e)
        return thread.id

    def find(self, board, sort='bumped_on', descending=True, limit=None):
        order = desc if descending else asc
        try:
            query = Thread.query.options(selectinload(Thread.replies)).filter_by(board=board).\
                order_by(order(getattr(Thread, sort)))
            if limit is not None:
                query = query.limit(limit)
            return [thread.to_document() for thread in query.all()]
        except SQLAlchemyError as e:
            self._fail('listing threads', e)

    def find_one(self, board, thread_id):
        try:
            thread = self._thread(board, thread_id)
            return thread.to_document() if thread else None
        except SQLAlchemyError as e:
            self._fail('fetching a thread', e)

    def update(self, board, thread_id, set_fields=None, push_reply=None):
        try:
            thread = self._thread(board, thread_id)
            if thread is None:
                return False
            if set_fields:
                _set_fields(thread, set_fields, THREAD_FIELDS)
            if push_reply is not None:
                thread.replies.append(Reply(id=push_reply['_id'], text=push_reply['text'],
                                            created_on=push_reply['created_on'], reported=push_reply['reported'],
                                            delete_password=push_reply['delete_password']))
            db.session.commit()
            return True
        except SQLAlchemyError as e:
            self._fail('updating a thread', e)

    def update_reply(self, board, thread_id, reply_id, set_fields):
        try:
            reply = Reply.query.join(Thread, Thread.id == Reply.thread_id).\
                filter(Reply.id == reply_id, Thread.id == thread_id, Thread.board == board).first()
            if reply is None:
                return False
            _set_fields(reply, set_fields, REPLY_FIELDS)
            db.session.commit()
            return True
        except SQLAlchemyError as e:
            self._fail('updating a reply', e)

    def delete(self, board, thread_id):
        try:
            thread = self._thread(board, thread_id)
            if thread is None:
                return False
            db.session.delete(thread)
            db.session.commit()
            return True
        except SQLAlchemyError as e:
            self._fail('deleting a thread', e)
