"""HTTP routes for the blog domain."""

import logging

from flask import redirect, render_template, request, url_for
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from errors import AuthorizationDenied, NotFound
from extensions import db
from models import User
from modules.blog.models import BlogPost
from permissions import can_create_post, can_delete_post, session_required
from utils import parse_post_id, redirect_home_with_error, resolve_post_image, save_post_image

from . import bp

logger = logging.getLogger(__name__)


def load_post(raw_post_id) -> BlogPost:
    """Fetch a post together with its owner, or raise NotFound."""
    post_id = parse_post_id(raw_post_id)
    if post_id is None:
        raise NotFound()
    post = (
        BlogPost.query.options(joinedload(BlogPost.user))
        .filter_by(id=post_id)
        .first()
    )
    if post is None:
        raise NotFound()
    return post


@bp.route('/dashboard')
@session_required
def dashboard(ctx):
    try:
        blog_posts = BlogPost.query.options(joinedload(BlogPost.user)).all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error fetching dashboard data")
        return redirect_home_with_error('Error fetching dashboard data.')
    return render_template('dashboard.html', user=ctx.user, blog_posts=blog_posts)


@bp.route('/blog/<post_id>')
@session_required
def blog(post_id, ctx):
    logger.debug("postId: %s", post_id)
    try:
        blog_post = load_post(post_id)
    except NotFound:
        return redirect(url_for('blog.dashboard'))
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error fetching blog post %s", post_id)
        return redirect_home_with_error('Error fetching blog post.')
    return render_template('blog.html', user=ctx.user, blog_post=blog_post)


@bp.route('/create-post', methods=['GET'])
@session_required
def create_post_form(ctx):
    if not can_create_post(ctx.user):
        return redirect(url_for('blog.dashboard'))
    return render_template('create_post.html', user=ctx.user)


@bp.route('/create-post', methods=['POST'])
@session_required
def create_post(ctx):
    title = request.form.get('title')
    description = request.form.get('description')
    image_file = request.files.get('image')

    try:
        # role is re-read from the store, not trusted from the gate
        author = db.session.get(User, ctx.user.id, populate_existing=True)
        if not can_create_post(author):
            raise AuthorizationDenied()

        disk_path, image = resolve_post_image(image_file)
        logger.info("Received data: title=%r image=%s", title, image)

        db.session.add(BlogPost(title=title, description=description, image=image, user_id=author.id))
        # the row must be acceptable to the store before anything on disk is replaced
        db.session.flush()
        if disk_path:
            save_post_image(image_file, disk_path)
        db.session.commit()
    except AuthorizationDenied:
        logger.info("User %s may not create posts", ctx.user.id)
        return redirect(url_for('blog.dashboard'))
    except (SQLAlchemyError, OSError, ValueError):
        db.session.rollback()
        logger.exception("Error creating blog post")
        return redirect_home_with_error('Error creating blog post.')

    return redirect(url_for('blog.dashboard'))


@bp.route('/delete-post/<post_id>', methods=['POST'])
@session_required
def delete_post(post_id, ctx):
    try:
        blog_post = load_post(post_id)
        if not can_delete_post(ctx.user, blog_post):
            raise AuthorizationDenied()
        db.session.delete(blog_post)
        db.session.commit()
    except NotFound:
        return redirect(url_for('blog.dashboard'))
    except AuthorizationDenied:
        logger.info("User %s may not delete post %s", ctx.user.id, post_id)
        return redirect(url_for('blog.blog', post_id=post_id))
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error deleting blog post %s", post_id)
        return redirect_home_with_error('Error deleting blog post.')

    logger.info("User %s deleted post %s", ctx.user.id, post_id)
    return redirect(url_for('blog.dashboard'))
