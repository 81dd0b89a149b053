from __future__ import annotations

import copy
import threading
from typing import Optional

from anonboard.storage.base import ThreadCollection


class MemoryThreadCollection(ThreadCollection):
    """Keeps threads in process memory. Used when no database is reachable, and in tests."""

    def __init__(self) -> None:
        self._threads: list[dict] = []
        self._lock = threading.Lock()

    def _match(self, board: str, thread_id: str) -> Optional[dict]:
        for thread in self._threads:
            if thread['_id'] == thread_id and thread['board'] == board:
                return thread
        return None

    def insert(self, document: dict) -> str:
        with self._lock:
            self._threads.append(copy.deepcopy(document))
        return document['_id']

    def find(self, board, sort='bumped_on', descending=True, limit=None):
        with self._lock:
            threads = [thread for thread in self._threads if thread['board'] == board]
            threads.sort(key=lambda thread: thread[sort], reverse=descending)
            if limit is not None:
                threads = threads[:limit]
            return copy.deepcopy(threads)

    def find_one(self, board, thread_id):
        with self._lock:
            return copy.deepcopy(self._match(board, thread_id))

    def update(self, board, thread_id, set_fields=None, push_reply=None):
        with self._lock:
            thread = self._match(board, thread_id)
            if thread is None:
                return False
            if set_fields:
                thread.update(copy.deepcopy(set_fields))
            if push_reply is not None:
                thread['replies'].append(copy.deepcopy(push_reply))
            return True

    def update_reply(self, board, thread_id, reply_id, set_fields):
        with self._lock:
            thread = self._match(board, thread_id)
            if thread is None:
                return False
            for reply in thread['replies']:
                if reply['_id'] == reply_id:
                    reply.update(copy.deepcopy(set_fields))
                    return True
            return False

    def delete(self, board, thread_id):
        with self._lock:
            thread = self._match(board, thread_id)
            if thread is None:
                return False
            self._threads.remove(thread)
            return True
