from flask import redirect, url_for

from anonboard import get_thread_collection
from anonboard.api import thread_bp, reply_bp, is_form_post
from anonboard.api.schema import *
from anonboard.shared.reply import create_reply, report_reply, delete_reply
from anonboard.shared.thread import create_thread, get_recent_threads, get_thread_with_replies, report_thread, \
    delete_thread
from anonboard.utils import orjson_response, text_response


# Threads
@thread_bp.route('/<board>', methods=['POST'])
@thread_bp.doc(summary="Create a thread. Form submissions are redirected to the board page.")
@thread_bp.arguments(CreateThreadRequest)
@thread_bp.response(200, Thread)
@thread_bp.alt_response(303, description="Redirect to the board page")
@thread_bp.alt_response(400, schema=DefaultError)
@thread_bp.alt_response(500, schema=DefaultError)
def post_thread(data, board):
    resp = create_thread(get_thread_collection(), board, data['text'].strip(), data['delete_password'])
    if is_form_post():
        return redirect(url_for('main.board', board=board), 303)
    return orjson_response(resp)


@thread_bp.route('/<board>', methods=['GET'])
@thread_bp.doc(summary="The 10 most recently bumped threads on a board, each with its 3 most recent replies.")
@thread_bp.response(200, BoardThread(many=True))
@thread_bp.alt_response(500, schema=DefaultError)
def get_thread_list(board):
    resp = get_recent_threads(get_thread_collection(), board)
    return orjson_response(resp)


@thread_bp.route('/<board>', methods=['PUT'])
@thread_bp.doc(summary="Report a thread.")
@thread_bp.arguments(ReportThreadRequest)
@thread_bp.response(200, description="reported", content_type="text/plain")
@thread_bp.alt_response(400, schema=DefaultError)
@thread_bp.alt_response(404, schema=DefaultError)
def put_thread_report(data, board):
    resp = report_thread(get_thread_collection(), board, data['thread_id'])
    return text_response(resp)


@thread_bp.route('/<board>', methods=['DELETE'])
@thread_bp.doc(summary="Delete a thread and all of its replies.")
@thread_bp.arguments(DeleteThreadRequest)
@thread_bp.response(200, description="success | incorrect password", content_type="text/plain")
@thread_bp.alt_response(400, schema=DefaultError)
@thread_bp.alt_response(404, schema=DefaultError)
def delete_thread_route(data, board):
    resp = delete_thread(get_thread_collection(), board, data['thread_id'], data['delete_password'])
    return text_response(resp)


# Replies
@reply_bp.route('/<board>', methods=['POST'])
@reply_bp.doc(summary="Reply to a thread. Form submissions are redirected to the thread page.")
@reply_bp.arguments(CreateReplyRequest)
@reply_bp.response(200, Reply)
@reply_bp.alt_response(303, description="Redirect to the thread page")
@reply_bp.alt_response(400, schema=DefaultError)
@reply_bp.alt_response(404, schema=DefaultError)
@reply_bp.alt_response(500, schema=DefaultError)
def post_reply(data, board):
    resp = create_reply(get_thread_collection(), board, data['thread_id'], data['text'].strip(),
                        data['delete_password'])
    if is_form_post():
        return redirect(url_for('main.thread', board=board, thread_id=data['thread_id']), 303)
    return orjson_response(resp)


@reply_bp.route('/<board>', methods=['GET'])
@reply_bp.doc(summary="A thread with all of its replies.")
@reply_bp.arguments(GetThreadRequest, location="query")
@reply_bp.response(200, Thread)
@reply_bp.alt_response(400, schema=DefaultError)
@reply_bp.alt_response(404, schema=DefaultError)
def get_thread(data, board):
    resp = get_thread_with_replies(get_thread_collection(), board, data['thread_id'])
    return orjson_response(resp)


@reply_bp.route('/<board>', methods=['PUT'])
@reply_bp.doc(summary="Report a reply.")
@reply_bp.arguments(ReportReplyRequest)
@reply_bp.response(200, description="reported", content_type="text/plain")
@reply_bp.alt_response(400, schema=DefaultError)
@reply_bp.alt_response(404, schema=DefaultError)
def put_reply_report(data, board):
    resp = report_reply(get_thread_collection(), board, data['thread_id'], data['reply_id'])
    return text_response(resp)


@reply_bp.route('/<board>', methods=['DELETE'])
@reply_bp.doc(summary="Delete a reply. Its text is replaced with [deleted].")
@reply_bp.arguments(DeleteReplyRequest)
@reply_bp.response(200, description="success | incorrect password", content_type="text/plain")
@reply_bp.alt_response(400, schema=DefaultError)
@reply_bp.alt_response(404, schema=DefaultError)
def delete_reply_route(data, board):
    resp = delete_reply(get_thread_collection(), board, data['thread_id'], data['reply_id'],
                        data['delete_password'])
    return text_response(resp)
