from __future__ import annotations

from missive.missing import MISSING, MissingOr
from missive.enums import InteractionType
from missive.types import Snowflake

from .user import User, PartialMember
from .base import RawBaseModel


__all__ = (
    'MessageInteraction',
    'MessageInteractionMetadata',
)


class MessageInteraction(RawBaseModel):
    """The interaction a message was sent in response to.

    Superseded on the wire by `MessageInteractionMetadata`, still sent
    for older messages.
    """

    id: Snowflake
    type: InteractionType
    name: str
    user: User
    member: MissingOr[PartialMember] = MISSING


class MessageInteractionMetadata(RawBaseModel):
    id: Snowflake
    type: InteractionType
    user: User
    # ? keyed by integration type, "0" for guild installs and "1" for user installs
    authorizing_integration_owners: dict[str, Snowflake]
    original_response_message_id: MissingOr[Snowflake] = MISSING
    target_user: MissingOr[User] = MISSING
    target_message_id: MissingOr[Snowflake] = MISSING
    interacted_message_id: MissingOr[Snowflake] = MISSING
