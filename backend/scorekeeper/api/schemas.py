"""Request bodies for the /api blueprint.

Each schema validates a JSON body before it reaches the game services.
Failures are re-raised as the service-level ``ValidationError`` so the
blueprint translates them to a 400 like any other game error.
"""
import math
from typing import ClassVar, Optional

from flask import request
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from scorekeeper.services.games.errors import ValidationError


def _truncate_number(value):
    """Turn numeric strings and floats into ints, truncating toward zero.

    Anything that is not a number is returned unchanged for the int field to reject.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else value
    return value


class RequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    # Overrides the generated message when set
    error_message: ClassVar[Optional[str]] = None


class JoinRequest(RequestSchema):
    error_message: ClassVar[Optional[str]] = 'Code and Name required'

    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class ScoreRequest(RequestSchema):
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    delta: Optional[int] = Field(None, description="Signed change; missing or 0 means +1")

    @field_validator('delta', mode='before')
    @classmethod
    def blank_delta_means_default(cls, value):
        if value is None or value is False or value == '':
            return None
        return _truncate_number(value)


class NewSessionRequest(RequestSchema):
    code: str = Field(..., min_length=1)


class AdminScoreRequest(RequestSchema):
    code: str = Field(..., min_length=1)
    session_index: int = Field(..., alias='sessionIndex', description="Zero-based index into sessions")
    player: str = Field(..., min_length=1)
    new_score: int = Field(..., alias='newScore')

    @field_validator('new_score', mode='before')
    @classmethod
    def truncate_new_score(cls, value):
        return _truncate_number(value)


def _describe(exc: PydanticValidationError) -> str:
    first = exc.errors()[0]
    field = '.'.join(str(part) for part in first['loc']) or 'body'
    return f"{field}: {first['msg']}"


def parse_body(schema):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(schema.error_message or _describe(exc)) from exc
