from .interaction import MessageInteraction, MessageInteractionMetadata
from .sticker import Sticker, StickerItem
from .application import MessageApplication
from .role import RoleSubscriptionData
from .user import User, PartialMember
from .channel import ChannelMention
from .attachment import Attachment
from .base import RawBaseModel

from .component import (
    ActionRow,
    Button,
    Component,
    ComponentEmoji,
    Container,
    MessageComponent,
    Section,
    SelectMenu,
    Separator,
    TextDisplay,
    TextInput,
    Thumbnail,
    UnfurledMediaItem,
    UnknownComponent,
    walk_components
)

from .embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedProvider,
    EmbedThumbnail,
    EmbedVideo
)

from .message import (
    AllowedMentions,
    Mention,
    Message,
    MessageActivity,
    MessageReference
)

from .reaction import (
    CountDetails,
    CustomEmoji,
    Reaction,
    ReactionEmoji,
    UnicodeEmoji
)

# ? to handle the self reference
Message.model_rebuild()


__all__ = (  # noqa: RUF022
    # Application
    'MessageApplication',
    # Attachment
    'Attachment',
    # Base
    'RawBaseModel',
    # Channel
    'ChannelMention',
    # Component
    'ActionRow',
    'Button',
    'Component',
    'ComponentEmoji',
    'Container',
    'MessageComponent',
    'Section',
    'SelectMenu',
    'Separator',
    'TextDisplay',
    'TextInput',
    'Thumbnail',
    'UnfurledMediaItem',
    'UnknownComponent',
    'walk_components',
    # Embed
    'Embed',
    'EmbedAuthor',
    'EmbedField',
    'EmbedFooter',
    'EmbedImage',
    'EmbedProvider',
    'EmbedThumbnail',
    'EmbedVideo',
    # Interaction
    'MessageInteraction',
    'MessageInteractionMetadata',
    # Message
    'AllowedMentions',
    'Mention',
    'Message',
    'MessageActivity',
    'MessageReference',
    # Reaction
    'CountDetails',
    'CustomEmoji',
    'Reaction',
    'ReactionEmoji',
    'UnicodeEmoji',
    # Role
    'RoleSubscriptionData',
    # Sticker
    'Sticker',
    'StickerItem',
    # User
    'PartialMember',
    'User',
)
