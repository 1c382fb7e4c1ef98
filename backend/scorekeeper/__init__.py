from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]


def create_app(config_class=Config):
    flask_app = Flask(__name__, static_folder=None)
    flask_app.config.from_object(config_class)

    if not flask_app.config.get('DATABASE_URL') and not flask_app.config.get('TESTING'):
        flask_app.logger.warning("Waiting for DATABASE_URL (or MONGO_URI) environment variable...")
    flask_app.logger.info(f"[store] using {flask_app.config['SQLALCHEMY_DATABASE_URI'].split('://')[0]} backend")

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # The store handle is injected into every operation via app.extensions
    from scorekeeper.store import GameStore
    store = GameStore(db)
    store.init_app(flask_app)

    from scorekeeper.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api')

    # Catch-all entry page for the frontend
    from scorekeeper.main import main
    flask_app.register_blueprint(main)

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the game table."""
        with flask_app.app_context():
            store.drop_schema()
            store.create_schema()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
