from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from pydantic import ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from missive.missing import MISSING, MissingOr, MissingNoneOr
from missive.types import Snowflake, Timestamp
from missive.enums import (
    MessageReferenceType,
    MessageActivityType,
    MessageFlag,
    MessageType,
    MentionType
)

from .interaction import MessageInteraction, MessageInteractionMetadata
from .component import Component, MessageComponent, UnknownComponent, walk_components
from .sticker import Sticker, StickerItem
from .application import MessageApplication
from .user import User, PartialMember
from .role import RoleSubscriptionData
from .channel import ChannelMention
from .attachment import Attachment
from .base import RawBaseModel
from .reaction import Reaction
from .embed import Embed


__all__ = (
    'AllowedMentions',
    'Mention',
    'Message',
    'MessageActivity',
    'MessageReference',
)


class MessageActivity(RawBaseModel):
    type: MessageActivityType
    party_id: MissingOr[str] = MISSING
    """party id from a rich presence event"""


class MessageReference(RawBaseModel):
    """Points at the message a reply, crosspost or pin notice is about.

    Every id is optional; a reply whose target was deleted still carries
    a reference, just without `message_id`.
    """

    type: MissingOr[MessageReferenceType] = MISSING
    message_id: MissingOr[Snowflake] = MISSING
    channel_id: MissingOr[Snowflake] = MISSING
    guild_id: MissingOr[Snowflake] = MISSING
    fail_if_not_exists: MissingOr[bool] = MISSING
    """only used when sending, whether to error if the referenced message doesn't exist"""

    @property
    def is_forward(self) -> bool:
        return self.type == MessageReferenceType.FORWARD


class AllowedMentions(RawBaseModel):
    """Which mentions in an outgoing message are allowed to ping.

    `parse` enables whole categories, `roles` and `users` allow specific
    ids; the two are independent, an id in `roles` pings even when
    `roles` is not in `parse`.
    """

    parse: MissingOr[list[MentionType]] = MISSING
    roles: MissingOr[list[Snowflake]] = MISSING
    users: MissingOr[list[Snowflake]] = MISSING
    replied_user: MissingOr[bool] = MISSING

    @classmethod
    def none(cls) -> AllowedMentions:
        return cls(parse=[])

    @classmethod
    def all(cls) -> AllowedMentions:
        return cls(
            parse=[
                MentionType.EVERYONE,
                MentionType.ROLES,
                MentionType.USERS],
            replied_user=True
        )

    @property
    def allows_everyone(self) -> bool:
        return MentionType.EVERYONE in (self.parse or [])

    def allows_role(self, role_id: int) -> bool:
        return (
            MentionType.ROLES in (self.parse or []) or
            role_id in (self.roles or [])
        )

    def allows_user(self, user_id: int) -> bool:
        return (
            MentionType.USERS in (self.parse or []) or
            user_id in (self.users or [])
        )


class Mention(User):
    """A user that was mentioned in a sent message."""

    member: MissingOr[PartialMember] = MISSING
    """member data for the mentioned user in guild messages"""

    @property
    def display_name(self) -> str:
        return (
            (self.member.nick if self.member else None) or
            self.global_name or
            self.username
        )


class Message(RawBaseModel):
    id: Snowflake
    channel_id: Snowflake
    author: User
    timestamp: Timestamp
    type: MessageType
    guild_id: MissingOr[Snowflake] = MISSING
    member: MissingOr[PartialMember] = MISSING
    content: MissingOr[str] = MISSING
    edited_timestamp: MissingNoneOr[Timestamp] = MISSING
    """null when the message was never edited"""
    tts: MissingOr[bool] = MISSING
    mention_everyone: MissingOr[bool] = MISSING
    mentions: MissingOr[list[Mention]] = MISSING
    mention_roles: MissingOr[list[Snowflake]] = MISSING
    mention_channels: MissingOr[list[ChannelMention]] = MISSING
    attachments: MissingOr[list[Attachment]] = MISSING
    embeds: MissingOr[list[Embed]] = MISSING
    reactions: MissingOr[list[Reaction]] = MISSING
    nonce: MissingOr[int | str] = MISSING
    pinned: MissingOr[bool] = MISSING
    webhook_id: MissingOr[Snowflake] = MISSING
    activity: MissingOr[MessageActivity] = MISSING
    application: MissingOr[MessageApplication] = MISSING
    application_id: MissingOr[Snowflake] = MISSING
    flags: MissingOr[MessageFlag] = MISSING
    message_reference: MissingOr[MessageReference] = MISSING
    referenced_message: MissingNoneOr[Message] = MISSING
    """null when the referenced message was deleted"""
    interaction: MissingOr[MessageInteraction] = MISSING
    interaction_metadata: MissingOr[MessageInteractionMetadata] = MISSING
    components: MissingOr[list[Component]] = MISSING
    sticker_items: MissingOr[list[StickerItem]] = MISSING
    stickers: MissingOr[list[Sticker]] = MISSING
    position: MissingOr[int] = MISSING
    role_subscription_data: MissingOr[RoleSubscriptionData] = MISSING

    @field_validator('edited_timestamp')
    @classmethod
    def _edited_after_created(
        cls,
        value: datetime | None,
        info: ValidationInfo
    ) -> datetime | None:
        created = info.data.get('timestamp')

        if (
            isinstance(value, datetime) and
            isinstance(created, datetime) and
            value < created
        ):
            raise PydanticCustomError(
                'type_mismatch',
                'expected {expected}, found {found}',
                {
                    'expected': f'timestamp at or after {created.isoformat()}',
                    'found': value.isoformat()
                }
            )

        return value

    @property
    def jump_url(self) -> str:
        return f'https://discord.com/channels/{self.guild_id or "@me"}/{self.channel_id}/{self.id}'

    @property
    def edited(self) -> bool:
        return isinstance(self.edited_timestamp, datetime)

    @property
    def is_reply(self) -> bool:
        return self.type == MessageType.REPLY

    @property
    def reply_target_id(self) -> Snowflake | None:
        if not self.is_reply or not self.message_reference:
            return None

        return self.message_reference.message_id or None

    @property
    def flag_set(self) -> MessageFlag:
        return self.flags or MessageFlag.NONE

    def mentions_user(self, user_id: int) -> bool:
        return any(
            mention.id == user_id
            for mention in self.mentions or []
        )

    def walk_components(self) -> Iterator[MessageComponent | UnknownComponent]:
        return walk_components(self.components or [])
