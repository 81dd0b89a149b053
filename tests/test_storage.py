"""
Both thread collections (SQL and in-memory) must behave the same way. Every test here runs once per backend.
"""
from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from anonboard import db
from anonboard.errors import StorageError
from anonboard.storage import ThreadCollection, MemoryThreadCollection, SqlThreadCollection
from anonboard.utils import new_object_id

BASE_TIME = datetime(2025, 3, 1, 9, 30, 0, 123456)


def make_thread(board='test', text='thread', minutes=0, replies=None):
    created = BASE_TIME + timedelta(minutes=minutes)
    return {'_id': new_object_id(),
            'board': board,
            'text': text,
            'created_on': created,
            'bumped_on': created,
            'reported': False,
            'delete_password': 'secret',
            'replies': replies or []}


def make_reply(text='reply', minutes=0):
    return {'_id': new_object_id(),
            'text': text,
            'created_on': BASE_TIME + timedelta(minutes=minutes),
            'reported': False,
            'delete_password': 'reply-secret'}


def test_collection_type(app, threads):
    assert isinstance(threads, ThreadCollection)
    expected = MemoryThreadCollection if app.config['STORAGE_BACKEND'] == 'memory' else SqlThreadCollection
    assert isinstance(threads, expected)


def test_insert_and_find_one(threads):
    thread = make_thread(text='hello')
    assert threads.insert(thread) == thread['_id']

    stored = threads.find_one('test', thread['_id'])
    assert stored == thread


def test_find_one_requires_matching_board(threads):
    thread = make_thread(board='test')
    threads.insert(thread)

    assert threads.find_one('other', thread['_id']) is None
    assert threads.find_one('test', new_object_id()) is None


def test_returned_documents_are_copies(threads):
    thread = make_thread()
    threads.insert(thread)

    stored = threads.find_one('test', thread['_id'])
    stored['text'] = 'changed'
    stored['replies'].append(make_reply())

    again = threads.find_one('test', thread['_id'])
    assert again['text'] == 'thread'
    assert again['replies'] == []


def test_find_filters_sorts_and_limits(threads):
    oldest = make_thread(text='oldest', minutes=0)
    newest = make_thread(text='newest', minutes=10)
    middle = make_thread(text='middle', minutes=5)
    elsewhere = make_thread(board='other', minutes=20)
    for thread in (oldest, newest, middle, elsewhere):
        threads.insert(thread)

    found = threads.find('test')
    assert [t['text'] for t in found] == ['newest', 'middle', 'oldest']

    found = threads.find('test', limit=2)
    assert [t['text'] for t in found] == ['newest', 'middle']

    found = threads.find('test', descending=False)
    assert [t['text'] for t in found] == ['oldest', 'middle', 'newest']

    assert threads.find('empty') == []


def test_update_sets_fields(threads):
    thread = make_thread()
    threads.insert(thread)

    assert threads.update('test', thread['_id'], set_fields={'reported': True}) is True

    stored = threads.find_one('test', thread['_id'])
    assert stored['reported'] is True
    assert stored['text'] == thread['text']


def test_update_pushes_reply_in_order(threads):
    thread = make_thread()
    threads.insert(thread)
    first = make_reply(text='first', minutes=1)
    second = make_reply(text='second', minutes=2)

    assert threads.update('test', thread['_id'], set_fields={'bumped_on': first['created_on']}, push_reply=first)
    assert threads.update('test', thread['_id'], set_fields={'bumped_on': second['created_on']}, push_reply=second)

    stored = threads.find_one('test', thread['_id'])
    assert [r['text'] for r in stored['replies']] == ['first', 'second']
    assert stored['replies'][1] == second
    assert stored['bumped_on'] == second['created_on']


def test_update_missing_thread(threads):
    thread = make_thread()
    threads.insert(thread)

    assert threads.update('test', new_object_id(), set_fields={'reported': True}) is False
    assert threads.update('other', thread['_id'], push_reply=make_reply()) is False
    assert threads.find_one('test', thread['_id'])['replies'] == []


def test_update_reply(threads):
    target = make_reply(text='target')
    bystander = make_reply(text='bystander', minutes=1)
    thread = make_thread(replies=[target, bystander])
    threads.insert(thread)

    assert threads.update_reply('test', thread['_id'], target['_id'], {'text': '[deleted]'}) is True

    stored = threads.find_one('test', thread['_id'])
    assert stored['replies'][0]['text'] == '[deleted]'
    assert stored['replies'][0]['_id'] == target['_id']
    assert stored['replies'][1]['text'] == 'bystander'


def test_update_reply_missing(threads):
    reply = make_reply()
    thread = make_thread(replies=[reply])
    other = make_thread()
    threads.insert(thread)
    threads.insert(other)

    assert threads.update_reply('test', thread['_id'], new_object_id(), {'reported': True}) is False
    assert threads.update_reply('test', other['_id'], reply['_id'], {'reported': True}) is False
    assert threads.update_reply('other', thread['_id'], reply['_id'], {'reported': True}) is False
    assert threads.find_one('test', thread['_id'])['replies'][0]['reported'] is False


def test_delete_removes_thread_and_replies(threads):
    thread = make_thread(replies=[make_reply(), make_reply(minutes=1)])
    keep = make_thread(text='keep')
    threads.insert(thread)
    threads.insert(keep)

    assert threads.delete('other', thread['_id']) is False
    assert threads.delete('test', thread['_id']) is True
    assert threads.delete('test', thread['_id']) is False

    assert threads.find_one('test', thread['_id']) is None
    assert [t['text'] for t in threads.find('test')] == ['keep']


@pytest.mark.parametrize('test_app', ['sql'], indirect=True)
def test_sql_failure_rolls_back_and_raises_storage_error(threads, monkeypatch):
    def failing_commit():
        raise OperationalError('INSERT INTO thread', {}, Exception('db down'))

    rollback = db.session.rollback
    rollbacks = []

    def recording_rollback():
        rollbacks.append(True)
        rollback()

    monkeypatch.setattr(db.session, 'commit', failing_commit)
    monkeypatch.setattr(db.session, 'rollback', recording_rollback)
    thread = make_thread()

    with pytest.raises(StorageError) as excinfo:
        threads.insert(thread)

    assert rollbacks
    assert isinstance(excinfo.value.__cause__, OperationalError)
    assert threads.find_one('test', thread['_id']) is None
