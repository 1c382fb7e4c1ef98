from datetime import datetime, timedelta, timezone

import pytest

from scorekeeper.services.games import (
    Game,
    Session,
    NotFoundError,
    ValidationError,
    join_game,
    get_game,
    list_games,
    admin_list_games,
    update_score,
    new_session,
    admin_set_score,
)


def _game_with_last_session(code, when):
    return Game(code=code, players=['Alice'], sessions=[Session(date=when, scores={'Alice': 0})])


def test_join_new_code_creates_single_game(store):
    game = join_game(store, 'ABCD', 'Alice')
    assert game.players == ['Alice']
    assert len(game.sessions) == 1
    assert game.current_session.scores == {'Alice': 0}
    assert len(admin_list_games(store)) == 1


def test_join_existing_code_only_touches_current_session(store):
    join_game(store, 'ABCD', 'Alice')
    update_score(store, 'ABCD', 'Alice', 2)
    new_session(store, 'ABCD')
    update_score(store, 'ABCD', 'Alice', 5)

    game = join_game(store, 'ABCD', 'Bob')
    assert game.players == ['Alice', 'Bob']
    assert game.sessions[0].scores == {'Alice': 2}
    assert game.sessions[1].scores == {'Alice': 5, 'Bob': 0}


def test_join_requires_code_and_name(store):
    with pytest.raises(ValidationError):
        join_game(store, '', 'Alice')
    with pytest.raises(ValidationError):
        join_game(store, 'ABCD', None)
    assert get_game(store, 'ABCD') is None


def test_join_restores_missing_score_entry(store):
    # a player listed without a score in the current session gets one on rejoin
    store.save(Game(code='ABCD', players=['Alice', 'Bob'], sessions=[Session(scores={'Alice': 3})]))
    game = join_game(store, 'ABCD', 'Bob')
    assert game.players == ['Alice', 'Bob']
    assert game.current_session.scores == {'Alice': 3, 'Bob': 0}


def test_update_score_default_and_negative(store):
    join_game(store, 'ABCD', 'Alice')
    assert update_score(store, 'ABCD', 'Alice').current_session.scores['Alice'] == 1
    assert update_score(store, 'ABCD', 'Alice', -3).current_session.scores['Alice'] == -2


def test_update_score_unknown_code_does_not_write(store):
    with pytest.raises(NotFoundError):
        update_score(store, 'NOPE', 'Alice')
    assert admin_list_games(store) == []


def test_new_session_snapshots_players(store):
    join_game(store, 'ABCD', 'Alice')
    join_game(store, 'ABCD', 'Bob')
    update_score(store, 'ABCD', 'Bob', 4)
    game = new_session(store, 'ABCD')
    assert [s.scores for s in game.sessions] == [{'Alice': 0, 'Bob': 4}, {'Alice': 0, 'Bob': 0}]
    assert game.sessions[1].date >= game.sessions[0].date

    # later joiners do not appear in earlier sessions
    game = join_game(store, 'ABCD', 'Cara')
    assert 'Cara' not in game.sessions[0].scores
    assert game.sessions[1].scores['Cara'] == 0


def test_new_session_unknown_code(store):
    with pytest.raises(NotFoundError):
        new_session(store, 'NOPE')


def test_admin_set_score_out_of_range_leaves_game(store):
    before = join_game(store, 'ABCD', 'Alice')
    with pytest.raises(NotFoundError):
        admin_set_score(store, 'ABCD', 3, 'Alice', 10)
    assert get_game(store, 'ABCD') == before


def test_admin_set_score_overwrites_any_session(store):
    join_game(store, 'ABCD', 'Alice')
    new_session(store, 'ABCD')
    game = admin_set_score(store, 'ABCD', 0, 'Alice', '12')
    assert game.sessions[0].scores == {'Alice': 12}
    game = admin_set_score(store, 'ABCD', 1, 'Zed', -4)
    assert game.sessions[1].scores == {'Alice': 0, 'Zed': -4}


def test_list_games_most_recent_first(store):
    base = datetime(2026, 10, 1, tzinfo=timezone.utc)
    store.save(_game_with_last_session('OLD1', base))
    store.save(_game_with_last_session('NEW1', base + timedelta(days=2)))
    store.save(_game_with_last_session('MID1', base + timedelta(days=1)))
    store.save(_game_with_last_session('MID2', base + timedelta(days=1)))

    listing = list_games(store)
    # equal dates keep store order
    assert [g['code'] for g in listing] == ['NEW1', 'MID1', 'MID2', 'OLD1']
    assert listing[0]['lastPlayed'] == '2026-10-03T00:00:00Z'
    assert listing[0]['players'] == ['Alice']


def test_list_games_uses_latest_session(store):
    base = datetime(2026, 10, 1, tzinfo=timezone.utc)
    game = _game_with_last_session('ABCD', base)
    game.sessions.append(Session(date=base + timedelta(days=5), scores={'Alice': 0}))
    store.save(game)
    store.save(_game_with_last_session('WXYZ', base + timedelta(days=3)))
    assert [g['code'] for g in list_games(store)] == ['ABCD', 'WXYZ']


def test_store_round_trip(store):
    when = datetime(2026, 10, 17, 9, 30, 15, 123456, tzinfo=timezone.utc)
    game = Game(
        code='ABCD',
        players=['Alice', 'Bob'],
        sessions=[Session(date=when, scores={'Alice': 2, 'Bob': -1}), Session(date=when, scores={})],
    )
    store.save(game)
    loaded = store.find('ABCD')
    assert loaded == game
    assert loaded.to_dict()['sessions'][0]['date'] == '2026-10-17T09:30:15.123456Z'
