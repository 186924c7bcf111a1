"""End-to-end walks through the app as a browser would drive it."""

from extensions import db
from models import User
from modules.blog.models import BlogPost


def test_admin_registers_logs_in_and_posts(app, client):
    client.post("/register", data={"username": "alice", "password": "pw1", "role": "admin"})
    client.get("/logout")

    resp = client.post("/login", data={"username": "alice", "password": "pw1"})
    assert resp.headers["Location"] == "/dashboard"

    resp = client.post("/create-post", data={"title": "Hello", "description": "World"})
    assert resp.headers["Location"] == "/dashboard"

    body = client.get("/dashboard").get_data(as_text=True)
    assert "Hello" in body

    with app.app_context():
        post = BlogPost.query.filter_by(title="Hello").one()
        assert post.image == app.config["DEFAULT_POST_IMAGE"] == "/img/default.jpg"
        assert post.user.username == "alice"


def test_reader_cannot_delete_admin_post(app, client):
    client.post("/register", data={"username": "alice", "password": "pw1", "role": "admin"})
    client.post("/create-post", data={"title": "Hello", "description": "World"})
    with app.app_context():
        post_id = BlogPost.query.filter_by(title="Hello").one().id
    client.get("/logout")

    client.post("/register", data={"username": "bob", "password": "pw2", "role": "user"})
    resp = client.post(f"/delete-post/{post_id}")

    assert resp.headers["Location"] == f"/blog/{post_id}"
    with app.app_context():
        assert db.session.get(BlogPost, post_id) is not None
        assert User.query.filter_by(username="bob").one().role == "user"
