"""Game domain services: records, joining and scoring.

This package contains the pure(ish) domain logic that HTTP routes call
into. Every operation takes the store handle as its first argument and
performs a single whole-document read-modify-write against it, keeping
transport concerns in the blueprint.
"""

from .errors import GameStoreError, ValidationError, NotFoundError, StorageError
from .records import Game, Session
from .lobby import join_game, get_game, list_games, admin_list_games
from .scoring import update_score, new_session, admin_set_score

__all__ = [
    'GameStoreError',
    'ValidationError',
    'NotFoundError',
    'StorageError',
    'Game',
    'Session',
    'join_game',
    'get_game',
    'list_games',
    'admin_list_games',
    'update_score',
    'new_session',
    'admin_set_score',
]
