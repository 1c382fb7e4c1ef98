import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DEFAULT_DATABASE_URI = 'sqlite:///' + os.path.join(BASE_DIR, 'scorekeeper.db')


def sqlalchemy_url_from_mongo_uri(value):
    """Accept MONGO_URI as an alias, but only when it holds an SQLAlchemy URL."""
    if not value or value.startswith(('mongodb:', 'mongodb+srv:')):
        return None
    return value


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Document Store connection; None means fall back to DEFAULT_DATABASE_URI
    DATABASE_URL = os.environ.get('DATABASE_URL') or sqlalchemy_url_from_mongo_uri(os.environ.get('MONGO_URI'))
    SQLALCHEMY_DATABASE_URI = DATABASE_URL or DEFAULT_DATABASE_URI
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    PORT = int(os.environ.get('PORT', '3000'))
    # Frontend build served for any unmatched route
    STATIC_FOLDER = os.environ.get('STATIC_FOLDER') or os.path.join(BASE_DIR, 'public')
