# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_app import create_app
from todolist.models import db, Task

STREAM_ACCEPT = 'text/vnd.turbo-stream.html, text/html, application/xhtml+xml'


@pytest.fixture()
def app(tmp_path: Path):
    """App bound to a throwaway SQLite file."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'tasks.db'}",
        'SECRET_KEY': 'test',
        'LOG_LEVEL': 'DEBUG',
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def stream_headers() -> dict:
    return {'Accept': STREAM_ACCEPT}


@pytest.fixture()
def make_task(app):
    def _make(title='Buy milk', **fields):
        task = Task(title=title, **fields)
        db.session.add(task)
        db.session.commit()
        return task

    return _make


@pytest.fixture()
def reload(app):
    """Fetch a task fresh from the database, or None once it is gone."""
    def _reload(task_id):
        db.session.expire_all()
        return db.session.get(Task, task_id)

    return _reload
