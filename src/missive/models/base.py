from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from missive.missing import MISSING, _MissingType, is_not_missing
from missive.types import Snowflake, Color


__all__ = (
    'RawBaseModel',
    'filter_missing',
)


class RawBaseModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        # ? fields this model doesn't know about yet survive re-encoding
        extra='allow'
    )

    def as_payload(self) -> dict:
        return filter_missing(self.model_dump())


def _serialize(value: Any) -> Any:  # noqa: ANN401
    match value:
        case dict():
            return filter_missing(value)
        case list() | tuple() | set():
            return [
                _serialize(i)
                for i in value]
        case Enum():
            return value.value
        case Snowflake():
            return str(value)
        case Color():
            return int(value)
        case datetime():
            return value.isoformat()
        case _MissingType():
            return MISSING

    return value


def filter_missing(data: dict) -> dict:
    filtered = {}

    for k, v in data.items():
        if is_not_missing(value := _serialize(v)):
            filtered[k] = value

    return filtered
