from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_date(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def parse_date(value: str) -> datetime:
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class Session:
    """One scoring round: a date and a player -> score map."""

    date: datetime = field(default_factory=utcnow)
    scores: Dict[str, int] = field(default_factory=dict)

    def to_dict(self):
        return {
            'date': format_date(self.date),
            'scores': dict(self.scores),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Session':
        return cls(
            date=parse_date(data['date']),
            scores={name: int(score) for name, score in (data.get('scores') or {}).items()},
        )


@dataclass
class Game:
    """A game document as stored and served: code, players and session history.

    ``sessions`` is append-only; the last entry is the current session and the
    only one ordinary score updates touch.
    """

    code: str
    players: List[str] = field(default_factory=list)
    sessions: List[Session] = field(default_factory=list)

    @property
    def current_session(self) -> Optional[Session]:
        return self.sessions[-1] if self.sessions else None

    @property
    def last_played(self) -> Optional[datetime]:
        current = self.current_session
        return current.date if current else None

    def to_dict(self):
        return {
            'code': self.code,
            'players': list(self.players),
            'sessions': [s.to_dict() for s in self.sessions],
        }

    def to_summary(self):
        last_played = self.last_played
        return {
            'code': self.code,
            'players': list(self.players),
            'lastPlayed': format_date(last_played) if last_played else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Game':
        return cls(
            code=data['code'],
            players=list(data.get('players') or []),
            sessions=[Session.from_dict(s) for s in data.get('sessions') or []],
        )
