from flask import Blueprint, jsonify
from scorekeeper.store import get_store
from scorekeeper.services.games import (
    GameStoreError,
    join_game,
    get_game,
    list_games,
    admin_list_games,
    update_score,
    new_session,
    admin_set_score,
)
from scorekeeper.api.schemas import (
    parse_body,
    JoinRequest,
    ScoreRequest,
    NewSessionRequest,
    AdminScoreRequest,
)


games = Blueprint('games', __name__)


@games.errorhandler(GameStoreError)
def handle_game_error(exc):
    return jsonify(exc.to_dict()), exc.status_code


@games.route('/join', methods=['POST'])
def join():
    """Join a game by code, creating it when the code is new."""
    payload = parse_body(JoinRequest)
    game = join_game(get_store(), payload.code, payload.name)
    return jsonify(game.to_dict())


@games.route('/score', methods=['POST'])
def score():
    payload = parse_body(ScoreRequest)
    game = update_score(get_store(), payload.code, payload.name, payload.delta)
    return jsonify(game.to_dict())


@games.route('/new-session', methods=['POST'])
def start_new_session():
    payload = parse_body(NewSessionRequest)
    game = new_session(get_store(), payload.code)
    return jsonify(game.to_dict())


@games.route('/game/<string:code>', methods=['GET'])
def game_state(code):
    # Unknown codes answer 200 with a null body
    game = get_game(get_store(), code)
    return jsonify(game.to_dict() if game else None)


@games.route('/games', methods=['GET'])
def all_games():
    return jsonify(list_games(get_store()))


# --- Admin ---

@games.route('/admin/games', methods=['GET'])
def admin_games():
    return jsonify([g.to_dict() for g in admin_list_games(get_store())])


@games.route('/admin/update-score', methods=['POST'])
def admin_update_score():
    """Overwrite a score in any session, including past ones."""
    payload = parse_body(AdminScoreRequest)
    game = admin_set_score(
        get_store(), payload.code, payload.session_index, payload.player, payload.new_score
    )
    return jsonify(game.to_dict())
