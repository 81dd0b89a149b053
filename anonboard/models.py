"""Database models backing the SQL thread collection"""
from __future__ import annotations
from typing import List
from datetime import datetime
from sqlalchemy import String, Boolean, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from anonboard import db
from anonboard.utils import utcnow


class Thread(db.Model):
    __tablename__ = 'thread'

    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    board: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_on: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    bumped_on: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False, index=True)
    reported: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    delete_password: Mapped[str] = mapped_column(String(255), nullable=False)

    replies: Mapped[List[Reply]] = relationship('Reply', back_populates='thread', cascade='all, delete-orphan',
                                                order_by='(Reply.created_on, Reply.id)')

    def to_document(self) -> dict:
        return {'_id': self.id,
                'board': self.board,
                'text': self.text,
                'created_on': self.created_on,
                'bumped_on': self.bumped_on,
                'reported': self.reported,
                'delete_password': self.delete_password,
                'replies': [reply.to_document() for reply in self.replies]}

    def __repr__(self):
        return f'<Thread {self.id} on /{self.board}/>'


class Reply(db.Model):
    __tablename__ = 'reply'

    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    thread_id: Mapped[str] = mapped_column(String(24), ForeignKey('thread.id', ondelete='CASCADE'),
                                           nullable=False, index=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_on: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    reported: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    delete_password: Mapped[str] = mapped_column(String(255), nullable=False)

    thread: Mapped[Thread] = relationship('Thread', back_populates='replies')

    def to_document(self) -> dict:
        return {'_id': self.id,
                'text': self.text,
                'created_on': self.created_on,
                'reported': self.reported,
                'delete_password': self.delete_password}

    def __repr__(self):
        return f'<Reply {self.id}>'
