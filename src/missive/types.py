from __future__ import annotations

from datetime import datetime, UTC
from typing import Any, Self, TYPE_CHECKING

from pydantic import AwareDatetime
from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from .errors import wire_type_name
from .enums import OpenStrEnum

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


__all__ = (
    'Color',
    'Locale',
    'Snowflake',
    'Timestamp',
)


DISCORD_EPOCH = 1420070400000

# ? wire timestamps always carry an offset
Timestamp = AwareDatetime


class Snowflake(int):
    """64-bit protocol id, a decimal string on the wire."""

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(
            ((self >> 22) + DISCORD_EPOCH) / 1000,
            tz=UTC
        )

    @classmethod
    def _validate(cls, value: Any) -> Self:  # noqa: ANN401
        if isinstance(value, str) and value.isascii() and value.isdigit():
            value = int(value)

        if (
            isinstance(value, bool) or
            not isinstance(value, int) or
            not 0 <= value < 1 << 64
        ):
            raise PydanticCustomError(
                'type_mismatch',
                'expected {expected}, found {found}',
                {'expected': 'snowflake', 'found': wire_type_name(value)}
            )

        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: type[Snowflake] | None,
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                when_used='json'
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'snowflake'}


class Color(int):
    """24-bit RGB color, an integer on the wire."""

    @property
    def r(self) -> int:
        return (self >> 16) & 0xff

    @property
    def g(self) -> int:
        return (self >> 8) & 0xff

    @property
    def b(self) -> int:
        return self & 0xff

    @property
    def hex(self) -> str:
        return f'#{self:06x}'

    @classmethod
    def from_hex(cls, value: str) -> Self:
        return cls(int(value.removeprefix('#'), 16))

    @classmethod
    def _validate(cls, value: Any) -> Self:  # noqa: ANN401
        if (
            isinstance(value, bool) or
            not isinstance(value, int) or
            not 0 <= value <= 0xffffff
        ):
            raise PydanticCustomError(
                'type_mismatch',
                'expected {expected}, found {found}',
                {'expected': 'rgb color', 'found': wire_type_name(value)}
            )

        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: type[Color] | None,
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(cls._validate)

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'integer'}


class Locale(OpenStrEnum):
    INDONESIAN = 'id'
    DANISH = 'da'
    GERMAN = 'de'
    ENGLISH_UK = 'en-GB'
    ENGLISH_US = 'en-US'
    SPANISH = 'es-ES'
    SPANISH_LATAM = 'es-419'
    FRENCH = 'fr'
    CROATIAN = 'hr'
    ITALIAN = 'it'
    LITHUANIAN = 'lt'
    HUNGARIAN = 'hu'
    DUTCH = 'nl'
    NORWEGIAN = 'no'
    POLISH = 'pl'
    PORTUGUESE_BRAZILIAN = 'pt-BR'
    ROMANIAN = 'ro'
    FINNISH = 'fi'
    SWEDISH = 'sv-SE'
    VIETNAMESE = 'vi'
    TURKISH = 'tr'
    CZECH = 'cs'
    GREEK = 'el'
    BULGARIAN = 'bg'
    RUSSIAN = 'ru'
    UKRAINIAN = 'uk'
    HINDI = 'hi'
    THAI = 'th'
    CHINESE_CHINA = 'zh-CN'
    JAPANESE = 'ja'
    CHINESE_TAIWAN = 'zh-TW'
    KOREAN = 'ko'
