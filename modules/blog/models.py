"""SQLAlchemy models for the blog domain."""

from flask import current_app

from extensions import db


def _default_image() -> str:
    return current_app.config["DEFAULT_POST_IMAGE"]


class BlogPost(db.Model):
    """A post written by an admin user."""

    __tablename__ = "blog_posts"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    image = db.Column(db.String(255), nullable=False, default=_default_image)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)

    user = db.relationship("User", back_populates="posts")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<BlogPost {self.id}: {self.title}>"
