"""Document collection holding every thread, with its replies embedded."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class ThreadCollection(ABC):
    """
    Storage for thread documents.

    A thread document is a dict:
        {'_id', 'board', 'text', 'created_on', 'bumped_on', 'reported', 'delete_password',
         'replies': [{'_id', 'text', 'created_on', 'reported', 'delete_password'}, ...]}

    Replies are kept in insertion order. Every document handed out is a copy, changing it does not change the
    stored thread. Implementations raise StorageError when the backing store fails.
    """

    @abstractmethod
    def insert(self, document: dict) -> str:
        """Store a new thread document and return its id."""

    @abstractmethod
    def find(self, board: str, sort: str = 'bumped_on', descending: bool = True,
             limit: Optional[int] = None) -> list[dict]:
        """Threads on a board, ordered by the `sort` field."""

    @abstractmethod
    def find_one(self, board: str, thread_id: str) -> Optional[dict]:
        pass

    @abstractmethod
    def update(self, board: str, thread_id: str, set_fields: Optional[dict] = None,
               push_reply: Optional[dict] = None) -> bool:
        """
        Set top-level fields on a thread and/or append a reply to it.

        Returns False when no thread matches (board, thread_id).
        """

    @abstractmethod
    def update_reply(self, board: str, thread_id: str, reply_id: str, set_fields: dict) -> bool:
        """
        Set fields on one reply of a thread.

        Returns False when the thread or the reply does not exist.
        """

    @abstractmethod
    def delete(self, board: str, thread_id: str) -> bool:
        """Remove a thread and all of its replies. Returns False when nothing was removed."""
