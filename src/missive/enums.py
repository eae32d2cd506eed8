from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, StrEnum, KEEP
from functools import lru_cache
from typing import Any, Self, TYPE_CHECKING

from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from .errors import wire_type_name

if TYPE_CHECKING:
    from pydantic import GetJsonSchemaHandler, GetCoreSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core.core_schema import ValidationInfo


__all__ = (
    'AttachmentFlag',
    'ButtonStyle',
    'ChannelType',
    'ComponentType',
    'DecodeMode',
    'EmbedType',
    'GuildMemberFlag',
    'InteractionType',
    'MentionType',
    'MessageActivityType',
    'MessageFlag',
    'MessageReferenceType',
    'MessageType',
    'OpenIntEnum',
    'OpenStrEnum',
    'ReactionType',
    'SelectDefaultValueType',
    'StickerFormatType',
    'StickerType',
    'TextInputStyle',
    'UserFlag',
    'WireFlag',
    'is_strict',
)


class DecodeMode(StrEnum):
    LENIENT = 'lenient'
    STRICT = 'strict'


def is_strict(info: ValidationInfo) -> bool:
    return bool(info.context) and info.context.get('mode') == DecodeMode.STRICT


PSEUDO_MEMBER_CACHE_SIZE = 256


@lru_cache(maxsize=PSEUDO_MEMBER_CACHE_SIZE, typed=True)
def _pseudo_member(cls: type[Enum], value: Any) -> Enum:  # noqa: ANN401
    member_type = cls._member_type_  # type: ignore[attr-defined]

    member = (
        object.__new__(cls)
        if member_type is object else
        member_type.__new__(cls, value))

    member._name_ = f'UNKNOWN_{value}'
    member._value_ = value

    return member


class _OpenEnum:
    """Enum mixin that turns unrecognized wire values into members.

    `Cls(raw)` for a value with no named member returns a pseudo-member
    named `UNKNOWN_<raw>` carrying the raw value. Pseudo-members compare
    equal by raw value; recently seen ones are shared through a bounded
    cache and never registered on the enum class.
    """

    _member_type_: type
    _member_map_: dict[str, Any]
    _name_: str
    _value_: Any

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        if isinstance(value, bool) or not isinstance(value, cls._member_type_):
            return None

        return _pseudo_member(cls, value)  # type: ignore[arg-type, return-value]

    @property
    def is_unknown(self) -> bool:
        return self._name_ not in type(self)._member_map_

    @classmethod
    def _validate(
        cls,
        value: Any,  # noqa: ANN401
        info: ValidationInfo
    ) -> Self:
        if isinstance(value, cls):
            member = value
        elif (
            isinstance(value, bool) or
            not isinstance(value, cls._member_type_)
        ):
            raise PydanticCustomError(
                'type_mismatch',
                'expected {expected}, found {found}',
                {
                    'expected': f'{cls.__name__} discriminant',
                    'found': wire_type_name(value)
                }
            )
        else:
            member = cls(value)  # type: ignore[call-arg]

        if member.is_unknown and is_strict(info):
            raise PydanticCustomError(
                'schema_error',
                'unrecognized {enum} discriminant {discriminant}',
                {
                    'enum': cls.__name__,
                    'discriminant': member._value_
                }
            )

        return member

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.with_info_plain_validator_function(cls._validate)

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {
            'type': 'integer' if cls._member_type_ is int else 'string'}


class OpenIntEnum(_OpenEnum, IntEnum):
    ...


class OpenStrEnum(_OpenEnum, StrEnum):
    ...


class WireFlag(IntFlag, boundary=KEEP):
    """Bit set that keeps bits it has no name for."""

    @classmethod
    def all(cls) -> Self:
        result = cls(0)
        for flag in cls.__members__.values():
            result |= flag
        return result

    @property
    def unknown_bits(self) -> int:
        return int(self) & ~int(self.all())

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(ge=0, strict=True)
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'integer'}


class MessageType(OpenIntEnum):
    DEFAULT = 0
    RECIPIENT_ADD = 1
    RECIPIENT_REMOVE = 2
    CALL = 3
    CHANNEL_NAME_CHANGE = 4
    CHANNEL_ICON_CHANGE = 5
    CHANNEL_PINNED_MESSAGE = 6
    USER_JOIN = 7
    GUILD_BOOST = 8
    GUILD_BOOST_TIER_1 = 9
    GUILD_BOOST_TIER_2 = 10
    GUILD_BOOST_TIER_3 = 11
    CHANNEL_FOLLOW_ADD = 12
    GUILD_DISCOVERY_DISQUALIFIED = 14
    GUILD_DISCOVERY_REQUALIFIED = 15
    GUILD_DISCOVERY_GRACE_PERIOD_INITIAL_WARNING = 16
    GUILD_DISCOVERY_GRACE_PERIOD_FINAL_WARNING = 17
    THREAD_CREATED = 18
    REPLY = 19
    CHAT_INPUT_COMMAND = 20
    THREAD_STARTER_MESSAGE = 21
    GUILD_INVITE_REMINDER = 22
    CONTEXT_MENU_COMMAND = 23
    AUTO_MODERATION_ACTION = 24
    ROLE_SUBSCRIPTION_PURCHASE = 25
    INTERACTION_PREMIUM_UPSELL = 26
    STAGE_START = 27
    STAGE_END = 28
    STAGE_SPEAKER = 29
    STAGE_TOPIC = 31
    GUILD_APPLICATION_PREMIUM_SUBSCRIPTION = 32
    GUILD_INCIDENT_ALERT_MODE_ENABLED = 36
    GUILD_INCIDENT_ALERT_MODE_DISABLED = 37
    GUILD_INCIDENT_REPORT_RAID = 38
    GUILD_INCIDENT_REPORT_FALSE_ALARM = 39
    PURCHASE_NOTIFICATION = 44
    POLL_RESULT = 46

    @property
    def deletable(self) -> bool:
        """Whether a message of this type can be deleted at all.

        Unrecognized types are treated as not deletable.
        """
        if self.is_unknown:
            return False

        return self not in {
            MessageType.RECIPIENT_ADD,
            MessageType.RECIPIENT_REMOVE,
            MessageType.CALL,
            MessageType.CHANNEL_NAME_CHANGE,
            MessageType.CHANNEL_ICON_CHANGE,
            MessageType.THREAD_STARTER_MESSAGE
        }


class MessageActivityType(OpenIntEnum):
    JOIN = 1
    SPECTATE = 2
    LISTEN = 3
    JOIN_REQUEST = 5


class ReactionType(OpenIntEnum):
    NORMAL = 0
    BURST = 1


class MentionType(OpenStrEnum):
    EVERYONE = 'everyone'
    ROLES = 'roles'
    USERS = 'users'


class MessageReferenceType(OpenIntEnum):
    DEFAULT = 0
    FORWARD = 1


class InteractionType(OpenIntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class ChannelType(OpenIntEnum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16


class ComponentType(OpenIntEnum):
    ACTION_ROW = 1
    BUTTON = 2
    STRING_SELECT = 3
    TEXT_INPUT = 4
    USER_SELECT = 5
    ROLE_SELECT = 6
    MENTIONABLE_SELECT = 7
    CHANNEL_SELECT = 8
    SECTION = 9
    TEXT_DISPLAY = 10
    THUMBNAIL = 11
    SEPARATOR = 14
    CONTAINER = 17


class ButtonStyle(OpenIntEnum):
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5
    PREMIUM = 6


class TextInputStyle(OpenIntEnum):
    SHORT = 1
    PARAGRAPH = 2


class SelectDefaultValueType(OpenStrEnum):
    USER = 'user'
    ROLE = 'role'
    CHANNEL = 'channel'


class EmbedType(OpenStrEnum):
    RICH = 'rich'
    IMAGE = 'image'
    VIDEO = 'video'
    GIFV = 'gifv'
    ARTICLE = 'article'
    LINK = 'link'
    POLL_RESULT = 'poll_result'
    AUTO_MODERATION_MESSAGE = 'auto_moderation_message'


class StickerType(OpenIntEnum):
    STANDARD = 1
    GUILD = 2


class StickerFormatType(OpenIntEnum):
    PNG = 1
    APNG = 2
    LOTTIE = 3
    GIF = 4

    @property
    def file_extension(self) -> str:
        match self:
            case StickerFormatType.PNG | StickerFormatType.APNG:
                return 'png'
            case StickerFormatType.LOTTIE:
                return 'json'
            case StickerFormatType.GIF:
                return 'gif'
            case _:
                raise ValueError(
                    f'no file extension for sticker format {self.value}')


class MessageFlag(WireFlag):
    NONE = 0
    CROSSPOSTED = 1 << 0
    IS_CROSSPOST = 1 << 1
    SUPPRESS_EMBEDS = 1 << 2
    SOURCE_MESSAGE_DELETED = 1 << 3
    URGENT = 1 << 4
    HAS_THREAD = 1 << 5
    EPHEMERAL = 1 << 6
    LOADING = 1 << 7
    FAILED_TO_MENTION_SOME_ROLES_IN_THREAD = 1 << 8
    SUPPRESS_NOTIFICATIONS = 1 << 12
    IS_VOICE_MESSAGE = 1 << 13


class UserFlag(WireFlag):
    NONE = 0
    STAFF = 1 << 0
    PARTNER = 1 << 1
    HYPESQUAD = 1 << 2
    BUG_HUNTER_LEVEL_1 = 1 << 3
    HYPESQUAD_ONLINE_HOUSE_1 = 1 << 6
    HYPESQUAD_ONLINE_HOUSE_2 = 1 << 7
    HYPESQUAD_ONLINE_HOUSE_3 = 1 << 8
    PREMIUM_EARLY_SUPPORTER = 1 << 9
    TEAM_PSEUDO_USER = 1 << 10
    BUG_HUNTER_LEVEL_2 = 1 << 14
    VERIFIED_BOT = 1 << 16
    VERIFIED_DEVELOPER = 1 << 17
    CERTIFIED_MODERATOR = 1 << 18
    BOT_HTTP_INTERACTIONS = 1 << 19
    ACTIVE_DEVELOPER = 1 << 22


class GuildMemberFlag(WireFlag):
    NONE = 0
    DID_REJOIN = 1 << 0
    COMPLETED_ONBOARDING = 1 << 1
    BYPASSES_VERIFICATION = 1 << 2
    STARTED_ONBOARDING = 1 << 3
    IS_GUEST = 1 << 4
    STARTED_HOME_ACTIONS = 1 << 5
    COMPLETED_HOME_ACTIONS = 1 << 6
    AUTOMOD_QUARANTINED_USERNAME = 1 << 7
    DM_SETTINGS_UPSELL_ACKNOWLEDGED = 1 << 9


class AttachmentFlag(WireFlag):
    NONE = 0
    IS_REMIX = 1 << 2
