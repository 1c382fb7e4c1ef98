from scorekeeper import db
from scorekeeper.services.games.records import Game, Session
import json


class GameRow(db.Model):
    """One row per game; the document lives in JSON-encoded text columns."""
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(64), unique=True, nullable=False, index=True)
    players = db.Column(db.Text, nullable=False, default='[]')  # JSON-encoded list of names
    sessions = db.Column(db.Text, nullable=False, default='[]')  # JSON-encoded list of {date, scores}

    def to_record(self) -> Game:
        return Game(
            code=self.code,
            players=json.loads(self.players or '[]'),
            sessions=[Session.from_dict(s) for s in json.loads(self.sessions or '[]')],
        )

    def replace_with(self, game: Game) -> None:
        """Overwrite the stored document with ``game`` in full."""
        self.code = game.code
        self.players = json.dumps(list(game.players))
        self.sessions = json.dumps([s.to_dict() for s in game.sessions])
