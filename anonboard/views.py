from __future__ import annotations

from anonboard.utils import ap_datetime


# Views are the only shape in which threads and replies leave the application. delete_password, reported and
# board are never included.


def reply_view(reply: dict) -> dict:
    return {'_id': reply['_id'],
            'text': reply['text'],
            'created_on': ap_datetime(reply['created_on'])}


def thread_view(thread: dict, variant: int, reply_limit=None) -> dict:
    # Variant 1 - thread with every reply, oldest first
    if variant == 1:
        return {'_id': thread['_id'],
                'text': thread['text'],
                'created_on': ap_datetime(thread['created_on']),
                'bumped_on': ap_datetime(thread['bumped_on']),
                'replies': [reply_view(reply) for reply in thread['replies']]}

    # Variant 2 - board listing: the most recent replies first, and how many replies there are in total
    if variant == 2:
        replies = sorted(thread['replies'], key=lambda reply: reply['created_on'], reverse=True)
        if reply_limit is not None:
            replies = replies[:reply_limit]
        return {'_id': thread['_id'],
                'text': thread['text'],
                'created_on': ap_datetime(thread['created_on']),
                'bumped_on': ap_datetime(thread['bumped_on']),
                'replycount': len(thread['replies']),
                'replies': [reply_view(reply) for reply in replies]}

    raise ValueError(f"Unknown thread view variant: {variant}")
