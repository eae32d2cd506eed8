from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import Discriminator, Tag

from missive.missing import MISSING, MissingOr, MissingNoneOr
from missive.types import Snowflake, Color
from missive.enums import ReactionType

from .base import RawBaseModel


__all__ = (
    'CountDetails',
    'CustomEmoji',
    'Reaction',
    'ReactionEmoji',
    'UnicodeEmoji',
)


class CustomEmoji(RawBaseModel):
    id: Snowflake
    name: MissingNoneOr[str] = MISSING
    """null when the emoji has since been deleted"""
    animated: MissingOr[bool] = MISSING

    def __str__(self) -> str:
        return f'<{"a" if self.animated else ""}:{self.name or "_"}:{self.id}>'

    @property
    def url(self) -> str:
        return f'https://cdn.discordapp.com/emojis/{self.id}.{"gif" if self.animated else "png"}'


class UnicodeEmoji(RawBaseModel):
    name: str
    id: MissingOr[None] = MISSING

    def __str__(self) -> str:
        return self.name


def _emoji_tag(value: Any) -> str:  # noqa: ANN401
    match value:
        case CustomEmoji():
            return 'custom'
        case UnicodeEmoji():
            return 'unicode'
        case Mapping() if value.get('id') is not None:
            return 'custom'

    return 'unicode'


ReactionEmoji = Annotated[
    Annotated[CustomEmoji, Tag('custom')] |
    Annotated[UnicodeEmoji, Tag('unicode')],
    Discriminator(_emoji_tag)
]


class CountDetails(RawBaseModel):
    burst: int
    """count of super reactions"""
    normal: int
    """count of normal reactions"""


class Reaction(RawBaseModel):
    count: int
    me: bool
    emoji: ReactionEmoji
    count_details: MissingOr[CountDetails] = MISSING
    me_burst: MissingOr[bool] = MISSING
    burst_colors: MissingOr[list[str]] = MISSING
    type: MissingOr[ReactionType] = MISSING
    """only sent with reaction events"""

    @property
    def is_custom(self) -> bool:
        return isinstance(self.emoji, CustomEmoji)

    @property
    def colors(self) -> list[Color]:
        return [
            Color.from_hex(color)
            for color in self.burst_colors or []
        ]
