from __future__ import annotations

from missive.missing import MISSING, MissingOr, MissingNoneOr
from missive.enums import AttachmentFlag
from missive.types import Snowflake

from .base import RawBaseModel


__all__ = (
    'Attachment',
)


class Attachment(RawBaseModel):
    id: Snowflake
    filename: str
    size: int
    url: str
    proxy_url: str
    title: MissingOr[str] = MISSING
    description: MissingOr[str] = MISSING
    content_type: MissingOr[str] = MISSING
    height: MissingNoneOr[int] = MISSING
    width: MissingNoneOr[int] = MISSING
    ephemeral: MissingOr[bool] = MISSING
    duration_secs: MissingOr[float] = MISSING
    waveform: MissingOr[str] = MISSING
    flags: MissingOr[AttachmentFlag] = MISSING

    @property
    def spoiler(self) -> bool:
        return self.filename.startswith('SPOILER_')

    @property
    def is_voice_message(self) -> bool:
        return bool(self.duration_secs and self.waveform)
