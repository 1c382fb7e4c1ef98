import os
import sys
import pytest

# Ensure the backend root (containing the `scorekeeper` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scorekeeper import create_app, db
from scorekeeper.store import get_store


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    DATABASE_URL = 'sqlite://'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    PORT = 3000
    STATIC_FOLDER = os.path.join(CURRENT_DIR, 'static')


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        store = get_store(application)
        store.create_schema()
        yield application
        db.session.remove()
        store.drop_schema()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    return get_store(flask_app)
