from __future__ import annotations

from missive.missing import MISSING, MissingOr, MissingNoneOr
from missive.enums import UserFlag, GuildMemberFlag
from missive.types import Snowflake, Timestamp, Color, Locale

from .base import RawBaseModel


__all__ = (
    'PartialMember',
    'User',
)


class User(RawBaseModel):
    id: Snowflake
    username: str
    discriminator: str
    global_name: MissingNoneOr[str] = MISSING
    avatar: MissingNoneOr[str] = MISSING
    bot: MissingOr[bool] = MISSING
    system: MissingOr[bool] = MISSING
    accent_color: MissingNoneOr[Color] = MISSING
    locale: MissingOr[Locale] = MISSING
    public_flags: MissingOr[UserFlag] = MISSING

    @property
    def mention(self) -> str:
        return f'<@{self.id}>'

    @property
    def display_name(self) -> str:
        return self.global_name or self.username

    @property
    def default_avatar_url(self) -> str:
        avatar = (
            (self.id >> 22) % 6
            if self.discriminator in {'0', '0000'} else
            int(self.discriminator) % 5)

        return f'https://cdn.discordapp.com/embed/avatars/{avatar}.png'

    @property
    def avatar_url(self) -> str:
        if not self.avatar:
            return self.default_avatar_url

        return 'https://cdn.discordapp.com/avatars/{id}/{avatar}.{format}?size=1024'.format(
            id=self.id,
            avatar=self.avatar,
            format='gif' if self.avatar.startswith('a_') else 'png'
        )


class PartialMember(RawBaseModel):
    """Guild member fields sent alongside a message author or mention."""

    nick: MissingNoneOr[str] = MISSING
    avatar: MissingNoneOr[str] = MISSING
    roles: MissingOr[list[Snowflake]] = MISSING
    joined_at: MissingNoneOr[Timestamp] = MISSING
    premium_since: MissingNoneOr[Timestamp] = MISSING
    deaf: MissingOr[bool] = MISSING
    mute: MissingOr[bool] = MISSING
    flags: MissingOr[GuildMemberFlag] = MISSING
    pending: MissingOr[bool] = MISSING
    communication_disabled_until: MissingNoneOr[Timestamp] = MISSING
