from __future__ import annotations

from missive.missing import MISSING, MissingOr, MissingNoneOr
from missive.enums import StickerType, StickerFormatType
from missive.types import Snowflake

from .base import RawBaseModel
from .user import User


__all__ = (
    'Sticker',
    'StickerItem',
)


class StickerItem(RawBaseModel):
    id: Snowflake
    name: str
    format_type: StickerFormatType

    @property
    def filename(self) -> str:
        return f'{self.name}.{self.format_type.file_extension}'

    @property
    def url(self) -> str:
        host = (
            'media.discordapp.net'
            if self.format_type == StickerFormatType.GIF else
            'cdn.discordapp.com')

        return f'https://{host}/stickers/{self.id}.{self.format_type.file_extension}'


class Sticker(StickerItem):
    type: StickerType
    pack_id: MissingOr[Snowflake] = MISSING
    """for standard stickers, id of the pack the sticker is from"""
    description: MissingNoneOr[str] = MISSING
    tags: MissingOr[str] = MISSING
    """autocomplete/suggestion tags for the sticker (max 200 characters)"""
    available: MissingOr[bool] = MISSING
    guild_id: MissingOr[Snowflake] = MISSING
    user: MissingOr[User] = MISSING
    sort_value: MissingOr[int] = MISSING
