import multiprocessing

cpu_cores = multiprocessing.cpu_count()

# One worker process: the in-memory store (used when no database is reachable) is not shared between processes.
workers = 1
threads = min(
    16, cpu_cores * 2
)  # Number of threads within the worker

wsgi_app = "messageboard:app"
bind = "0.0.0.0:3000"
reload = False

worker_class = "gthread"

# logging
accesslog = "-"
errorlog = "-"


def post_fork(server, worker):
    """
    Called after a worker has been forked.
    Disposes of the connection pool inherited from the parent process so the worker opens its own connections.
    """
    from anonboard import db
    from messageboard import app

    with app.app_context():
        # close=False prevents closing parent process connections
        db.engine.dispose(close=False)
