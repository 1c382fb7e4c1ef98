from typing import Optional

from flask import current_app

from .errors import NotFoundError
from .records import Game, Session


def _require_game(store, code: str) -> Game:
    game = store.find(code)
    if game is None:
        raise NotFoundError('Game not found')
    return game


def update_score(store, code: str, name: str, delta: Optional[int] = None) -> Game:
    """Apply ``delta`` to ``name``'s score in the current session.

    A missing or zero delta counts as +1. The player does not need to be in
    ``players``; a missing score starts from 0. No clamping.
    """
    change = delta or 1
    game = _require_game(store, code)
    current = game.current_session
    current.scores[name] = current.scores.get(name, 0) + change
    game = store.save(game)
    current_app.logger.info(f"[score] game={code} player={name} delta={change} score={current.scores[name]}")
    return game


def new_session(store, code: str) -> Game:
    """Append a fresh session seeding every current player at 0."""
    game = _require_game(store, code)
    game.sessions.append(Session(scores={p: 0 for p in game.players}))
    game = store.save(game)
    current_app.logger.info(f"[new-session] game={code} sessions={len(game.sessions)}")
    return game


def admin_set_score(store, code: str, session_index: int, player: str, new_score: int) -> Game:
    """Overwrite a score in any session, not just the current one."""
    game = _require_game(store, code)
    if not 0 <= session_index < len(game.sessions):
        raise NotFoundError('Session not found')
    game.sessions[session_index].scores[player] = int(new_score)
    game = store.save(game)
    current_app.logger.info(
        f"[admin-score] game={code} session={session_index} player={player} score={int(new_score)}"
    )
    return game
