from __future__ import annotations

from missive.enums import ChannelType
from missive.types import Snowflake

from .base import RawBaseModel


__all__ = (
    'ChannelMention',
)


class ChannelMention(RawBaseModel):
    id: Snowflake
    guild_id: Snowflake
    type: ChannelType
    name: str

    @property
    def mention(self) -> str:
        return f'<#{self.id}>'
