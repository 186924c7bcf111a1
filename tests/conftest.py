# tests/conftest.py
import os
import sys
from urllib.parse import parse_qs, urlsplit

import pytest
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import generate_password_hash

# so that `from app import create_app` works when run from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app  # noqa: E402
from extensions import db  # noqa: E402
from models import User  # noqa: E402
from modules.blog.models import BlogPost  # noqa: E402


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'blog.db'}",
        "UPLOAD_FOLDER": str(tmp_path / "img"),
        "SECRET_KEY": "test-secret",
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    """Insert a user straight into the store and return its id."""
    def _make_user(username, password="pw", role="user"):
        with app.app_context():
            user = User(username=username, password=generate_password_hash(password), role=role)
            db.session.add(user)
            db.session.commit()
            return user.id
    return _make_user


@pytest.fixture()
def make_post(app):
    """Insert a post owned by ``user_id`` and return its id."""
    def _make_post(user_id, title="Title", description="Body", image="/img/default.jpg"):
        with app.app_context():
            post = BlogPost(title=title, description=description, image=image, user_id=user_id)
            db.session.add(post)
            db.session.commit()
            return post.id
    return _make_post


@pytest.fixture()
def login_as(client):
    """Put a user id into the session the way Flask-Login does."""
    def _login_as(user_id):
        with client.session_transaction() as session:
            session["_user_id"] = str(user_id)
            session["_fresh"] = True
    return _login_as


@pytest.fixture()
def post_count(app):
    def _post_count():
        with app.app_context():
            return BlogPost.query.count()
    return _post_count


def location_error(response):
    """The ``error`` message of a redirect to the landing page."""
    parts = urlsplit(response.headers["Location"])
    assert parts.path == "/"
    return parse_qs(parts.query).get("error", [""])[0]


@pytest.fixture()
def landing_error():
    return location_error


class _BrokenQuery:
    """Stands in for ``Model.query`` when the store is down."""

    def options(self, *args, **kwargs):
        return self

    def filter_by(self, **kwargs):
        return self

    def _fail(self, *args, **kwargs):
        raise SQLAlchemyError("store unavailable")

    all = first = one = count = _fail


@pytest.fixture()
def break_query(app, monkeypatch):
    """Make ``model.query`` raise on execution for the rest of the test."""
    def _break(model):
        # the query property needs an app context to be read
        with app.app_context():
            monkeypatch.setattr(model, "query", _BrokenQuery())
    return _break
