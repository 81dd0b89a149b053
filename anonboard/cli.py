# if commands in this file are not working make sure you set the FLASK_APP environment variable.
# e.g. export FLASK_APP=messageboard.py
import click

from anonboard import db


def register(app):
    @app.cli.command("init-db")
    @click.option('--drop', is_flag=True, help='Drop existing tables first. Every thread is lost.')
    def init_db(drop):
        """Create the thread and reply tables."""
        with app.app_context():
            if drop:
                db.drop_all()
            db.configure_mappers()
            db.create_all()
        print("Database tables created")
