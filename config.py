import os

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///blog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    basedir = os.path.abspath(os.path.dirname(__file__))
    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', os.path.join(basedir, 'public', 'img'))
    UPLOAD_URL_PREFIX = '/img'
    DEFAULT_POST_IMAGE = '/img/default.jpg'
    PORT = int(os.getenv('PORT', '3000'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
