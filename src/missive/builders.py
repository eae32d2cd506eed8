from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator

from .missing import MISSING, MissingOr, is_not_missing
from .errors import TypeMismatch
from .types import Snowflake, Timestamp, Color
from .enums import MessageFlag, MessageReferenceType
from .models import (
    AllowedMentions,
    MessageReference,
    EmbedThumbnail,
    EmbedFooter,
    EmbedAuthor,
    CustomEmoji,
    UnicodeEmoji,
    EmbedImage,
    EmbedField,
    Component,
    Message,
    Embed
)
from .models.base import filter_missing


__all__ = (
    'BuilderModel',
    'EmbedBuilder',
    'MessageBuilder',
    'ReactionEmojiBuilder',
)


MAX_CONTENT_LENGTH = 2000
MAX_EMBEDS = 10
MAX_EMBED_CHARACTERS = 6000
MAX_STICKERS = 3


class BuilderModel(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    def as_payload(self) -> dict:
        return filter_missing(self.model_dump())


class ReactionEmojiBuilder(BuilderModel):
    """The emoji of an outgoing reaction, either custom or unicode.

    Exactly one of `custom_id` and `unicode` is set; giving both or
    neither raises `TypeMismatch` when the builder is constructed.
    """

    custom_id: MissingOr[Snowflake] = MISSING
    custom_name: MissingOr[str] = MISSING
    unicode: MissingOr[str] = MISSING

    @model_validator(mode='after')
    def _exactly_one_form(self) -> Self:
        custom, unicode = (
            is_not_missing(self.custom_id),
            is_not_missing(self.unicode)
        )

        if custom and unicode:
            raise TypeMismatch(
                'either a custom or a unicode emoji',
                'both',
                'reaction.emoji'
            )

        if not custom and not unicode:
            raise TypeMismatch(
                'either a custom or a unicode emoji',
                'neither',
                'reaction.emoji'
            )

        return self

    @classmethod
    def from_emoji(cls, emoji: CustomEmoji | UnicodeEmoji) -> ReactionEmojiBuilder:
        if isinstance(emoji, CustomEmoji):
            return cls(custom_id=emoji.id, custom_name=emoji.name or MISSING)

        return cls(unicode=emoji.name)

    @property
    def is_custom(self) -> bool:
        return is_not_missing(self.custom_id)

    def as_payload(self) -> dict:
        if self.is_custom:
            return {
                'id': str(self.custom_id),
                'name': self.custom_name or None
            }

        return {'id': None, 'name': self.unicode}


class EmbedBuilder(BuilderModel):
    title: MissingOr[str] = MISSING
    description: MissingOr[str] = MISSING
    url: MissingOr[str] = MISSING
    timestamp: MissingOr[Timestamp] = MISSING
    color: MissingOr[Color] = MISSING
    footer: MissingOr[EmbedFooter] = MISSING
    image: MissingOr[EmbedImage] = MISSING
    thumbnail: MissingOr[EmbedThumbnail] = MISSING
    author: MissingOr[EmbedAuthor] = MISSING
    fields: list[EmbedField] = []

    def add_field(self, name: str, value: str, inline: bool = True) -> EmbedBuilder:
        self.fields = [
            *self.fields,
            EmbedField(name=name, value=value, inline=inline)]
        return self

    def set_footer(self, text: str, icon_url: MissingOr[str] = MISSING) -> EmbedBuilder:
        self.footer = EmbedFooter(text=text, icon_url=icon_url)
        return self

    def set_image(self, url: str) -> EmbedBuilder:
        self.image = EmbedImage(url=url)
        return self

    def set_thumbnail(self, url: str) -> EmbedBuilder:
        self.thumbnail = EmbedThumbnail(url=url)
        return self

    def set_author(
        self,
        name: str,
        url: MissingOr[str] = MISSING,
        icon_url: MissingOr[str] = MISSING
    ) -> EmbedBuilder:
        self.author = EmbedAuthor(name=name, url=url, icon_url=icon_url)
        return self

    def build(self) -> Embed:
        payload = self.as_payload()

        if not payload['fields']:
            del payload['fields']

        return Embed.model_validate({'type': 'rich', **payload})


class MessageBuilder(BuilderModel):
    """An outgoing message.

    Limits the protocol enforces on creation are checked on construction
    and on every assignment, raising `TypeMismatch` at the offending
    field.
    """

    content: MissingOr[str] = MISSING
    tts: MissingOr[bool] = MISSING
    embeds: list[Embed] = []
    components: list[Component] = []
    sticker_ids: list[Snowflake] = []
    allowed_mentions: MissingOr[AllowedMentions] = MISSING
    message_reference: MissingOr[MessageReference] = MISSING
    flags: MissingOr[MessageFlag] = MISSING
    nonce: MissingOr[int | str] = MISSING
    enforce_nonce: MissingOr[bool] = MISSING

    @model_validator(mode='after')
    def _within_limits(self) -> Self:
        if self.content and len(self.content) > MAX_CONTENT_LENGTH:
            raise TypeMismatch(
                f'at most {MAX_CONTENT_LENGTH} characters',
                f'{len(self.content)} characters',
                'message.content'
            )

        if len(self.embeds) > MAX_EMBEDS:
            raise TypeMismatch(
                f'at most {MAX_EMBEDS} embeds',
                f'{len(self.embeds)} embeds',
                'message.embeds'
            )

        total = sum(embed.total_characters for embed in self.embeds)
        if total > MAX_EMBED_CHARACTERS:
            raise TypeMismatch(
                f'at most {MAX_EMBED_CHARACTERS} embed characters',
                f'{total} characters',
                'message.embeds'
            )

        if len(self.sticker_ids) > MAX_STICKERS:
            raise TypeMismatch(
                f'at most {MAX_STICKERS} stickers',
                f'{len(self.sticker_ids)} stickers',
                'message.sticker_ids'
            )

        return self

    def reply_to(
        self,
        message: Message,
        mention: bool = False
    ) -> MessageBuilder:
        self.message_reference = MessageReference(
            type=MessageReferenceType.DEFAULT,
            message_id=message.id,
            channel_id=message.channel_id,
            guild_id=message.guild_id
        )

        if not mention:
            self.allowed_mentions = (
                self.allowed_mentions or AllowedMentions(parse=[])
            ).model_copy(update={'replied_user': False})

        return self

    def add_embed(self, embed: Embed | EmbedBuilder) -> MessageBuilder:
        self.embeds = [
            *self.embeds,
            embed.build() if isinstance(embed, EmbedBuilder) else embed]
        return self

    def add_component(self, component: Component) -> MessageBuilder:
        self.components = [*self.components, component]
        return self

    def suppress_notifications(self) -> MessageBuilder:
        self.flags = (
            (self.flags or MessageFlag(0)) |
            MessageFlag.SUPPRESS_NOTIFICATIONS
        )
        return self

    def as_payload(self) -> dict:
        payload = super().as_payload()

        for key in ('embeds', 'components', 'sticker_ids'):
            if not payload[key]:
                del payload[key]

        return payload
