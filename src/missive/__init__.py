from .codec import (
    UnknownDiscriminant,
    scan_components,
    decode_json,
    encode_json,
    decode,
    encode
)
from .errors import (
    BaseMissiveException,
    MissingRequiredField,
    DepthExceeded,
    TypeMismatch,
    SchemaError,
    DecodeError
)
from .builders import EmbedBuilder, MessageBuilder, ReactionEmojiBuilder
from .missing import MISSING, MissingOr, MissingNoneOr, is_not_missing
from .types import Snowflake, Timestamp, Color, Locale
from .log import configure_logging
from .enums import DecodeMode
from .version import VERSION
from .models import *  # noqa: F403
from . import models, enums


__all__ = (  # noqa: PLE0604
    'MISSING',
    'VERSION',
    'BaseMissiveException',
    'Color',
    'DecodeError',
    'DecodeMode',
    'DepthExceeded',
    'EmbedBuilder',
    'Locale',
    'MessageBuilder',
    'MissingNoneOr',
    'MissingOr',
    'MissingRequiredField',
    'ReactionEmojiBuilder',
    'SchemaError',
    'Snowflake',
    'Timestamp',
    'TypeMismatch',
    'UnknownDiscriminant',
    'configure_logging',
    'decode',
    'decode_json',
    'encode',
    'encode_json',
    'enums',
    'is_not_missing',
    'models',
    'scan_components',
    *models.__all__,
)
