import logging
import os

from flask import Flask
from dotenv import load_dotenv

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from errors import BlogError  # noqa: E402
from extensions import db, login_manager  # noqa: E402
from utils import redirect_home_with_error  # noqa: E402

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
}


def create_app(test_config=None) -> Flask:
    """Application factory for the blog."""

    # public/ is served from the URL root, so uploads resolve at /img/<name>
    app = Flask(__name__, static_folder="public", static_url_path="")
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(level=app.config["LOG_LEVEL"], format=LOG_FORMAT)

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)

    # blueprints
    from modules.auth import bp as auth_bp
    from modules.blog import bp as blog_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(blog_bp)

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401
        from modules.blog import models as blog_models  # noqa: F401

        db.create_all()

    # uploads dir
    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    @app.errorhandler(BlogError)
    def redirect_on_blog_error(error):
        return redirect_home_with_error(error.message)

    @app.after_request
    def set_security_headers(response):
        response.headers.update(SECURITY_HEADERS)
        return response

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(port=app.config["PORT"])
