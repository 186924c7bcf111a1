"""HTTP routes for the landing page, registration, login and logout."""

import logging

from flask import redirect, render_template, request, session, url_for
from flask_login import login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import check_password_hash, generate_password_hash

from extensions import db, login_manager
from models import User
from utils import redirect_home_with_error

from . import bp

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid username or password.'


@login_manager.user_loader
def load_user(user_id: str | None) -> User | None:
    """Resolve a ``User`` instance for Flask-Login sessions."""

    if not user_id:
        return None
    try:
        return db.session.get(User, int(user_id))
    except (TypeError, ValueError):
        return None
    except SQLAlchemyError:
        logger.exception("Error loading user %s", user_id)
        db.session.rollback()
        return None


@bp.route('/')
def index():
    return render_template('index.html', error=request.args.get('error'))


@bp.route('/register', methods=['POST'])
def register():
    username = request.form.get('username', '')
    password = request.form.get('password', '')
    # Whatever role the client sends is stored, "admin" included.
    role = request.form.get('role', '')

    if not username or not password or not role:
        logger.info("Registration rejected: missing username, password or role")
        return redirect_home_with_error('Registration failed. Please try again.')

    user = User(username=username, password=generate_password_hash(password), role=role)
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Registration failed for %r", username)
        return redirect_home_with_error('Registration failed. Please try again.')

    login_user(user)
    logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role)
    return redirect(url_for('blog.dashboard'))


@bp.route('/login', methods=['POST'])
def login():
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    if not username or not password:
        return redirect_home_with_error(INVALID_CREDENTIALS)

    try:
        user = User.query.filter_by(username=username).first()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Login failed for %r", username)
        return redirect_home_with_error('Login failed. Please try again.')

    # same answer for an unknown user and a wrong password
    if user and check_password_hash(user.password, password):
        login_user(user)
        logger.info("User %s logged in", user.username)
        return redirect(url_for('blog.dashboard'))
    logger.info("Rejected login for %r", username)
    return redirect_home_with_error(INVALID_CREDENTIALS)


@bp.route('/logout')
def logout():
    logout_user()
    session.clear()
    return redirect(url_for('auth.index'))
