"""Shared SQLAlchemy models."""

from flask_login import UserMixin

from extensions import db

ADMIN_ROLE = "admin"


class User(UserMixin, db.Model):
    """Represents a registered blog user."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), nullable=False)  # admin, anything else is a reader

    posts = db.relationship("BlogPost", back_populates="user", lazy=True)

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.username}>"
