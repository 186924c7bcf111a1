# permissions.py
"""
Session gate and access rules for the blog.

- session_required: decorator for protected routes. Resolves the session user
  and hands the view an explicit ``SessionContext`` as the ``ctx`` argument.
- resolve_session(): the gate itself; raises Unauthenticated, StaleSession or
  StoreUnavailable. The app-level error handler turns those into a redirect
  to ``/?error=...``.
- can_create_post / can_delete_post: role check and role+ownership check.
  Kept separate on purpose; do not fold one into the other.
"""

import logging
from dataclasses import dataclass
from functools import wraps

from flask import session
from sqlalchemy.exc import SQLAlchemyError

from errors import StaleSession, StoreUnavailable, Unauthenticated
from extensions import db
from models import ADMIN_ROLE, User

logger = logging.getLogger(__name__)

# Flask-Login keeps the authenticated user id under this session key
SESSION_USER_KEY = "_user_id"


@dataclass(frozen=True)
class SessionContext:
    """The authenticated user a request runs on behalf of."""

    user: User


# ------------------------------- GATE -------------------------------------- #
def resolve_session() -> SessionContext:
    """Map the current session to an existing user. Never mutates the session."""
    raw_id = session.get(SESSION_USER_KEY)
    if raw_id is None:
        logger.info("User not authenticated.")
        raise Unauthenticated()

    try:
        user_id = int(raw_id)
    except (TypeError, ValueError):
        logger.warning("Session carries an unusable user id: %r", raw_id)
        raise StaleSession()

    try:
        user = db.session.get(User, user_id)
    except SQLAlchemyError:
        logger.exception("Error fetching user %s", user_id)
        db.session.rollback()
        raise StoreUnavailable()

    if user is None:
        logger.warning("User not found for session user id %s", user_id)
        raise StaleSession()

    logger.info("Authenticated user: %s (id=%s, role=%s)", user.username, user.id, user.role)
    return SessionContext(user=user)


def session_required(view_func):
    """
    Decorator for routes that need a logged-in user.
    Example:
        @bp.route("/dashboard")
        @session_required
        def dashboard(ctx): ...
    """
    @wraps(view_func)
    def wrapped(*args, **kwargs):
        ctx = resolve_session()
        return view_func(*args, ctx=ctx, **kwargs)
    return wrapped


# ------------------------------- RULES ------------------------------------- #
def can_create_post(user) -> bool:
    """Only admins write posts."""
    return user is not None and user.role == ADMIN_ROLE


def can_delete_post(user, post) -> bool:
    """Only the admin who owns a post may delete it."""
    return user is not None and user.role == ADMIN_ROLE and post.user_id == user.id
