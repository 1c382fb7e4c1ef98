from typing import List, Optional

from flask import current_app

from .errors import ValidationError
from .records import Game, Session


def join_game(store, code: str, name: str) -> Game:
    """Join ``name`` to the game ``code``, creating the game on first join.

    A returning player keeps their current-session score; a new player is
    appended to ``players`` and seeded at 0 in the current session only.
    """
    if not code or not name:
        raise ValidationError('Code and Name required')

    game = store.find(code)
    created = game is None
    if created:
        game = Game(code=code, players=[name], sessions=[Session(scores={name: 0})])
    else:
        if name not in game.players:
            game.players.append(name)
        current = game.current_session
        if name not in current.scores:
            current.scores[name] = 0

    game = store.save(game)
    current_app.logger.info(f"[join] game={code} player={name} created={created}")
    return game


def get_game(store, code: str) -> Optional[Game]:
    return store.find(code)


def list_games(store) -> List[dict]:
    """Lightweight listing, most recently played first.

    Games with equal ``lastPlayed`` keep the order the store returned them in.
    """
    games = sorted(store.find_all(), key=lambda g: g.last_played, reverse=True)
    return [g.to_summary() for g in games]


def admin_list_games(store) -> List[Game]:
    return store.find_all()
