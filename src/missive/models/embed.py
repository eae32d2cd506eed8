from __future__ import annotations

from missive.missing import MISSING, MissingOr
from missive.types import Color, Timestamp
from missive.enums import EmbedType

from .base import RawBaseModel


__all__ = (
    'Embed',
    'EmbedAuthor',
    'EmbedField',
    'EmbedFooter',
    'EmbedImage',
    'EmbedProvider',
    'EmbedThumbnail',
    'EmbedVideo',
)


class EmbedFooter(RawBaseModel):
    text: str
    icon_url: MissingOr[str] = MISSING
    proxy_icon_url: MissingOr[str] = MISSING


class EmbedImage(RawBaseModel):
    url: str
    proxy_url: MissingOr[str] = MISSING
    height: MissingOr[int] = MISSING
    width: MissingOr[int] = MISSING


class EmbedThumbnail(RawBaseModel):
    url: str
    proxy_url: MissingOr[str] = MISSING
    height: MissingOr[int] = MISSING
    width: MissingOr[int] = MISSING


class EmbedVideo(RawBaseModel):
    url: MissingOr[str] = MISSING
    proxy_url: MissingOr[str] = MISSING
    height: MissingOr[int] = MISSING
    width: MissingOr[int] = MISSING


class EmbedProvider(RawBaseModel):
    name: MissingOr[str] = MISSING
    url: MissingOr[str] = MISSING


class EmbedAuthor(RawBaseModel):
    name: str
    url: MissingOr[str] = MISSING
    icon_url: MissingOr[str] = MISSING
    proxy_icon_url: MissingOr[str] = MISSING


class EmbedField(RawBaseModel):
    name: str
    value: str
    inline: MissingOr[bool] = MISSING


class Embed(RawBaseModel):
    """Rich content attached to a message.

    `type` selects which of the media records are meaningful: `rich`
    embeds are the only kind bots send, the others are generated from
    links and carry `video`, `provider` or `thumbnail` data.
    """

    type: MissingOr[EmbedType] = MISSING
    title: MissingOr[str] = MISSING
    description: MissingOr[str] = MISSING
    url: MissingOr[str] = MISSING
    timestamp: MissingOr[Timestamp] = MISSING
    color: MissingOr[Color] = MISSING
    footer: MissingOr[EmbedFooter] = MISSING
    image: MissingOr[EmbedImage] = MISSING
    thumbnail: MissingOr[EmbedThumbnail] = MISSING
    video: MissingOr[EmbedVideo] = MISSING
    provider: MissingOr[EmbedProvider] = MISSING
    author: MissingOr[EmbedAuthor] = MISSING
    fields: MissingOr[list[EmbedField]] = MISSING

    @property
    def is_media(self) -> bool:
        return self.type in {
            EmbedType.IMAGE,
            EmbedType.VIDEO,
            EmbedType.GIFV
        }

    @property
    def media_url(self) -> str | None:
        for media in (self.video, self.image, self.thumbnail):
            if media and media.url:
                return media.url

        return None

    @property
    def total_characters(self) -> int:
        """Character count the protocol limits across an embed."""
        return sum((
            len(self.title or ''),
            len(self.description or ''),
            len(self.footer.text if self.footer else ''),
            len(self.author.name if self.author else ''),
            *(
                len(field.name) + len(field.value)
                for field in self.fields or []
            )
        ))
