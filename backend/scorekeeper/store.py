from typing import List, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from scorekeeper.models import GameRow
from scorekeeper.services.games.errors import StorageError
from scorekeeper.services.games.records import Game


class GameStore:
    """Document Store handle: whole-document reads and writes keyed by code.

    There is no locking and no version column. Two requests mutating the same
    code race, and the last write wins.
    """

    extension_name = 'game_store'

    def __init__(self, db):
        self.db = db

    def init_app(self, app) -> None:
        app.extensions[self.extension_name] = self

    def create_schema(self) -> None:
        self.db.create_all()

    def drop_schema(self) -> None:
        self.db.drop_all()

    def shutdown(self) -> None:
        self.db.engine.dispose()

    def find(self, code: str) -> Optional[Game]:
        try:
            row = GameRow.query.filter_by(code=code).first()
        except SQLAlchemyError as exc:
            raise self._storage_error('find', exc) from exc
        return row.to_record() if row else None

    def find_all(self) -> List[Game]:
        """All games in insertion order."""
        try:
            rows = GameRow.query.order_by(GameRow.id).all()
        except SQLAlchemyError as exc:
            raise self._storage_error('find_all', exc) from exc
        return [row.to_record() for row in rows]

    def save(self, game: Game) -> Game:
        """Insert or fully replace the document for ``game.code``."""
        try:
            row = GameRow.query.filter_by(code=game.code).first()
            if row is None:
                row = GameRow(code=game.code)
            row.replace_with(game)
            self.db.session.add(row)
            self.db.session.commit()
        except SQLAlchemyError as exc:
            self.db.session.rollback()
            raise self._storage_error('save', exc) from exc
        return game

    def _storage_error(self, action: str, exc: SQLAlchemyError) -> StorageError:
        message = str(getattr(exc, 'orig', None) or exc)
        current_app.logger.exception(f"[store-error] action={action} error={message}")
        return StorageError(message)


def get_store(app=None) -> GameStore:
    return (app or current_app).extensions[GameStore.extension_name]
