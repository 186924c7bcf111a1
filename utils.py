import re

from flask import current_app, redirect, url_for
from werkzeug.utils import safe_join

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_MAX_ROW_ID = 2 ** 63 - 1


def redirect_home_with_error(message):
    """Redirect to the landing page with ``message`` in the ``error`` query parameter."""
    return redirect(url_for('auth.index', error=message))


def parse_post_id(raw):
    """Parse a path segment the lenient way: leading digits win, junk means None.

    "12" -> 12, " 7abc" -> 7, "abc" -> None.
    """
    match = _LEADING_INT.match(raw or '')
    if not match:
        return None
    value = int(match.group(1))
    if abs(value) > _MAX_ROW_ID:
        return None
    return value


def resolve_post_image(file):
    """Decide where a new post's image comes from.

    Returns ``(disk_path, public_path)``. ``disk_path`` is None when nothing was
    uploaded and the placeholder is used. The client's filename is kept as is,
    so a later upload with the same name replaces the earlier file on disk.
    Raises ValueError for a name that would land outside the upload folder.
    """
    config = current_app.config
    if not file or not file.filename:
        return None, config['DEFAULT_POST_IMAGE']

    disk_path = safe_join(config['UPLOAD_FOLDER'], file.filename)
    if disk_path is None:
        raise ValueError(f"upload name escapes the upload folder: {file.filename!r}")
    return disk_path, f"{config['UPLOAD_URL_PREFIX']}/{file.filename}"


def save_post_image(file, disk_path):
    file.save(disk_path)
