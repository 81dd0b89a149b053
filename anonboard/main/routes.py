from flask import request, current_app, render_template, abort, redirect, url_for

from anonboard import get_thread_collection
from anonboard.errors import NotFound
from anonboard.main import bp
from anonboard.shared.thread import get_recent_threads, get_thread_with_replies
from anonboard.utils import is_object_id


@bp.route('/', methods=['GET'])
def index():
    board = request.args.get('board', '').strip()
    if board:
        return redirect(url_for('main.board', board=board))
    return render_template('index.html')


@bp.route('/b/<board>/', methods=['GET'])
def board(board):
    threads = get_recent_threads(get_thread_collection(), board)
    return render_template('board.html', board=board, threads=threads)


@bp.route('/b/<board>/<thread_id>', methods=['GET'])
def thread(board, thread_id):
    if not is_object_id(thread_id):
        abort(404)
    try:
        thread = get_thread_with_replies(get_thread_collection(), board, thread_id)
    except NotFound:
        abort(404)
    return render_template('thread.html', board=board, thread=thread)


@bp.before_app_request
def before_request():
    # Handle CORS preflight requests for routes that exist; unmatched paths fall through to the 404 handler
    if request.method == 'OPTIONS' and request.url_rule is not None:
        return '', 200


@bp.after_app_request
def after_request(response):
    # Add CORS headers to all responses
    response.headers['Access-Control-Allow-Origin'] = current_app.config.get('CORS_ALLOW_ORIGIN', '*')
    response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type, Accept, User-Agent'

    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-DNS-Prefetch-Control'] = 'off'
    response.headers['Referrer-Policy'] = 'same-origin'
    response.headers['X-Content-Type-Options'] = 'nosniff'

    # Disable caching for every response
    response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
    response.headers['Pragma'] = 'no-cache'
    response.headers['Expires'] = '0'
    return response
