from __future__ import annotations

from missive.missing import MISSING, MissingOr, MissingNoneOr
from missive.types import Snowflake

from .base import RawBaseModel


__all__ = (
    'MessageApplication',
)


class MessageApplication(RawBaseModel):
    """The slice of an application sent with rich presence chat embeds."""

    id: Snowflake
    name: str
    description: str
    icon: MissingNoneOr[str] = MISSING
    cover_image: MissingOr[str] = MISSING

    @property
    def icon_url(self) -> str | None:
        if not self.icon:
            return None

        return f'https://cdn.discordapp.com/app-icons/{self.id}/{self.icon}.png'
